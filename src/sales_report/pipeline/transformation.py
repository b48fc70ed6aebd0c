# ========================
# src/sales_report/pipeline/transformation.py
# ========================

"""
Data Transformation Module

Applies transaction files to the catalog and directory, accumulating units
sold per product and revenue collected per salesperson.
"""

import logging
from contextlib import closing
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Optional

from .cleaning import RecordParser
from .ingestion import DelimitedFileReader
from .models import PipelineContext, Salesperson, money_context

logger = logging.getLogger(__name__)


class SalesAggregator:
    """
    Processes transaction files against a shared PipelineContext.
    Entities are updated in place; the aggregator itself only keeps counters.
    """

    def __init__(self,
                 context: PipelineContext,
                 parser: Optional[RecordParser] = None,
                 delimiter: str = ';',
                 encoding: str = 'utf-8'):
        """
        Initialize the aggregator.

        Args:
            context (PipelineContext): Loaded catalog and directory
            parser (RecordParser): Parser shared with the loaders, for statistics
            delimiter (str): Field separator
            encoding (str): File encoding
        """
        self.context = context
        self.parser = parser or RecordParser()
        self.delimiter = delimiter
        self.encoding = encoding
        self._reset_counters()
        logger.debug(f"SalesAggregator initialized with {len(context.catalog)} products "
                     f"and {len(context.directory)} salespeople")

    def _reset_counters(self):
        """Reset all processing counters."""
        self.files_processed = 0
        self.files_skipped = 0
        self.line_items_applied = 0
        self.line_items_skipped = 0
        self.unknown_products = 0

    def process_files(self,
                      file_paths: Iterable,
                      on_file_done: Optional[Callable[[Any, int], None]] = None) -> int:
        """
        Process several transaction files in order.

        Args:
            file_paths (iterable): Transaction files
            on_file_done (callable): Called with ``(file_path, items_applied)``
                                     after each file, skipped files included

        Returns:
            int: Number of files processed successfully
        """
        processed = 0
        for file_path in file_paths:
            applied_before = self.line_items_applied
            if self.process_file(file_path):
                processed += 1
            if on_file_done is not None:
                on_file_done(file_path, self.line_items_applied - applied_before)
        logger.info(f"Transaction files processed: {processed} (skipped: {self.files_skipped})")
        return processed

    def process_file(self, file_path) -> bool:
        """
        Apply one transaction file.

        The first non-blank line names the salesperson; every following line
        is a ``productId;quantity`` item. A bad header or an unknown
        salesperson skips the whole file. A bad item skips only that line.

        Args:
            file_path (str | Path): Transaction file

        Returns:
            bool: True if the file header resolved and its items were applied
        """
        reader = DelimitedFileReader(file_path, delimiter=self.delimiter, encoding=self.encoding)
        source = reader.name

        try:
            with closing(reader.read_records()) as records:
                header = next(records, None)
                if header is None:
                    return self._skip_file(source, "file is empty")

                salesperson = self._resolve_salesperson(header, source)
                if salesperson is None:
                    self.files_skipped += 1
                    return False

                applied = 0
                for line_number, fields in records:
                    if self._apply_line_item(salesperson, fields, source, line_number):
                        applied += 1
        except OSError as e:
            return self._skip_file(source, f"could not be read ({e})")

        self.files_processed += 1
        logger.info(f"Processed {source}: {applied} line items for {salesperson.full_name}")
        return True

    def _resolve_salesperson(self, header, source: str) -> Optional[Salesperson]:
        line_number, fields = header
        document_number = self.parser.parse_header(fields, source, line_number)
        if document_number is None:
            logger.warning(f"Skipping file {source}: invalid salesperson header")
            return None

        salesperson = self.context.get_salesperson(document_number)
        if salesperson is None:
            logger.warning(f"Skipping file {source}: salesperson with document {document_number} not found")
        return salesperson

    def _apply_line_item(self, salesperson: Salesperson, fields, source: str, line_number: int) -> bool:
        item = self.parser.parse_line_item(fields, source, line_number)
        if item is None:
            self.line_items_skipped += 1
            return False

        product_id, quantity = item
        product = self.context.get_product(product_id)
        if product is None:
            self.unknown_products += 1
            logger.warning(f"Skipping line {line_number} in {source}: product id {product_id} not found")
            return False

        product.add_sale(quantity)
        with money_context():
            amount = product.unit_price * quantity
        salesperson.add_revenue(amount)
        self.line_items_applied += 1
        return True

    def _skip_file(self, source: str, reason: str) -> bool:
        self.files_skipped += 1
        logger.warning(f"Skipping file {source}: {reason}")
        return False

    def get_aggregation_summary(self) -> Dict[str, int]:
        """Get a summary of processing counters."""
        return {
            'files_processed': self.files_processed,
            'files_skipped': self.files_skipped,
            'line_items_applied': self.line_items_applied,
            'line_items_skipped': self.line_items_skipped,
            'unknown_products': self.unknown_products,
        }

    def get_statistics(self) -> Dict[str, Any]:
        """
        Summarize the aggregated entities.

        Returns:
            dict: Entity counts, overall totals, the catalog sales value
                  (equal to total revenue), the top salesperson by revenue
                  and the top product by units sold. The first maximum in
                  load order wins ties.
        """
        salespeople = list(self.context.directory.values())
        products = list(self.context.catalog.values())

        with money_context():
            total_revenue = sum((s.revenue_collected for s in salespeople), Decimal(0))
            total_sales_value = sum((p.total_sales for p in products), Decimal(0))

        stats = {
            'salespeople': len(salespeople),
            'products': len(products),
            'total_revenue': total_revenue,
            'total_sales_value': total_sales_value,
            'total_units_sold': sum(p.units_sold for p in products),
            'best_salesperson': None,
            'best_product': None,
        }

        if salespeople:
            best = max(salespeople, key=lambda s: s.revenue_collected)
            stats['best_salesperson'] = {'name': best.full_name, 'revenue': best.revenue_collected}

        if products:
            top = max(products, key=lambda p: p.units_sold)
            stats['best_product'] = {'name': top.name, 'units_sold': top.units_sold}

        return stats
