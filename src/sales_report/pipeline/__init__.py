# ========================
# src/sales_report/pipeline/__init__.py
# ========================

"""
Sales Report Pipeline Package

Core components of the sales report pipeline:
- models: Products, salespeople and the run context
- ingestion: Delimited file reading and transaction file discovery
- cleaning: Tolerant record parsing
- loaders: Catalog and directory loading
- transformation: Transaction processing and aggregation
- storage: Report sorting and writing
- orchestrator: Pipeline coordination
"""

from .models import Product, Salesperson, PipelineContext
from .ingestion import DelimitedFileReader, TransactionScanner
from .cleaning import RecordParser
from .loaders import load_catalog, load_directory
from .transformation import SalesAggregator
from .storage import ReportWriter, format_amount, sort_products, sort_salespeople
from .orchestrator import SalesReportPipeline

__all__ = [
    'Product',
    'Salesperson',
    'PipelineContext',
    'DelimitedFileReader',
    'TransactionScanner',
    'RecordParser',
    'load_catalog',
    'load_directory',
    'SalesAggregator',
    'ReportWriter',
    'format_amount',
    'sort_products',
    'sort_salespeople',
    'SalesReportPipeline'
]
