# ========================
# src/sales_report/pipeline/orchestrator.py
# ========================

"""
Pipeline Orchestrator Module

Main orchestrator class that runs the load, scan, process and report phases
in strict order.
"""

import logging
from pathlib import Path
from typing import Optional

from .cleaning import RecordParser
from .ingestion import TransactionScanner
from .loaders import load_catalog, load_directory
from .models import PipelineContext
from .storage import ReportWriter, format_amount
from .transformation import SalesAggregator
from ..utils.config import Config
from ..utils.performance_monitor import monitor_performance

logger = logging.getLogger(__name__)


class SalesReportPipeline:
    """
    Orchestrates a complete sales report run.
    Loads reference data, applies every transaction file and writes reports.
    """

    def __init__(self,
                 working_dir: Optional[str] = None,
                 config: Optional[Config] = None):
        """
        Initialize the pipeline.

        Args:
            working_dir (str): Directory holding the inputs and receiving the
                               reports; defaults to ``config.WORKING_DIR``
            config (Config): Configuration object
        """
        self.config = config or Config()
        self.working_dir = Path(working_dir or self.config.WORKING_DIR)

        self.context = PipelineContext()
        self.parser = RecordParser()
        self.scanner = TransactionScanner(
            self.working_dir,
            prefix=self.config.TRANSACTION_PREFIX,
            suffix=self.config.TRANSACTION_SUFFIX
        )
        self.aggregator = SalesAggregator(
            self.context,
            parser=self.parser,
            delimiter=self.config.FIELD_DELIMITER,
            encoding=self.config.FILE_ENCODING
        )
        self.writer = ReportWriter(
            self.working_dir,
            salesperson_report=self.config.SALESPERSON_REPORT_FILE,
            product_report=self.config.PRODUCT_REPORT_FILE,
            delimiter=self.config.FIELD_DELIMITER,
            encoding=self.config.FILE_ENCODING
        )

        logger.info("SalesReportPipeline initialized:")
        logger.info(f"  Working directory: {self.working_dir}")
        logger.info(f"  Transaction files: {self.config.TRANSACTION_PREFIX}*{self.config.TRANSACTION_SUFFIX}")

    @property
    def products_path(self) -> Path:
        return self.working_dir / self.config.PRODUCTS_FILE

    @property
    def salespeople_path(self) -> Path:
        return self.working_dir / self.config.SALESPEOPLE_FILE

    def run(self) -> dict:
        """
        Execute the complete pipeline from start to finish.

        Returns:
            dict: Summary of processing results and saved files

        Raises:
            OSError: If a reference file cannot be read or a report cannot
                     be written
        """
        logger.info(f"Starting sales report pipeline in '{self.working_dir}'...")

        with monitor_performance("SalesReportPipeline") as monitor:
            logger.info("Step 1: Loading products...")
            self.context.catalog.update(self._load_catalog())
            logger.info(f"Products loaded: {len(self.context.catalog)}")

            logger.info("Step 2: Loading salespeople...")
            self.context.directory.update(self._load_directory())
            logger.info(f"Salespeople loaded: {len(self.context.directory)}")
            monitor.add_checkpoint('reference_data_loaded', {
                'products': len(self.context.catalog),
                'salespeople': len(self.context.directory)
            })

            logger.info("Step 3: Processing transaction files...")
            transaction_files = self.scanner.scan_paths()
            self.aggregator.process_files(
                transaction_files,
                on_file_done=lambda _path, applied: monitor.update_progress(applied)
            )

            logger.info("Step 4: Writing reports...")
            saved_files = self.writer.save_all(self.context)

        results = {
            'pipeline_status': 'completed',
            'working_dir': str(self.working_dir),
            'saved_files': saved_files,
            'files_found': [path.name for path in transaction_files],
            'processing_stats': self.aggregator.get_aggregation_summary(),
            'data_quality_stats': self.parser.get_statistics(),
            'statistics': self.aggregator.get_statistics()
        }

        logger.info("Pipeline finished successfully.")
        self._log_final_summary(results)

        return results

    def _load_catalog(self):
        return load_catalog(
            self.products_path,
            parser=self.parser,
            delimiter=self.config.FIELD_DELIMITER,
            encoding=self.config.FILE_ENCODING
        )

    def _load_directory(self):
        return load_directory(
            self.salespeople_path,
            parser=self.parser,
            delimiter=self.config.FIELD_DELIMITER,
            encoding=self.config.FILE_ENCODING
        )

    def _log_final_summary(self, results: dict) -> None:
        """Log final pipeline summary."""
        logger.info("=" * 60)
        logger.info("PIPELINE EXECUTION SUMMARY")
        logger.info("=" * 60)

        processing_stats = results['processing_stats']
        quality_stats = results['data_quality_stats']
        statistics = results['statistics']

        logger.info(f"Transaction files found: {len(results['files_found'])}")
        logger.info(f"Line items applied: {processing_stats['line_items_applied']:,}")
        logger.info(f"Records dropped: {quality_stats['records_dropped']:,}")
        logger.info(f"Unknown products: {processing_stats['unknown_products']:,}")
        logger.info(f"Total revenue collected: {format_amount(statistics['total_revenue'])}")

        for report_type, file_path in results['saved_files'].items():
            logger.info(f"  • {report_type}: {file_path}")

        logger.info("=" * 60)

    def validate_input(self) -> bool:
        """
        Validate that the reference files exist and are readable.

        Returns:
            bool: True if input is valid
        """
        for input_path in (self.products_path, self.salespeople_path):
            if not input_path.exists():
                logger.error(f"Input file does not exist: {input_path}")
                return False

            if not input_path.is_file():
                logger.error(f"Input path is not a file: {input_path}")
                return False

            try:
                with open(input_path, 'r', encoding=self.config.FILE_ENCODING, errors='replace') as f:
                    f.readline()
            except OSError as e:
                logger.error(f"Cannot read input file: {e}")
                return False

        logger.info(f"Input validation passed: {self.working_dir}")
        return True
