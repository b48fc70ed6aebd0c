#!/usr/bin/env python3
# ========================
# main.py
# ========================

"""
Main Entry Point for the Sales Report Pipeline

Loads products and salespeople from the working directory, applies every
transaction file and writes the salesperson and product rankings.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from sales_report.pipeline import SalesReportPipeline, format_amount
from sales_report.utils import Config, setup_logging


def main(config: Optional[Config] = None):
    """
    Main execution function.

    Returns:
        int: 0 when the reports were written, 1 when a reference file is
             missing or unreadable or a report could not be written
    """
    config = config or Config()

    setup_logging(
        log_level=config.LOG_LEVEL,
        log_file=config.LOG_FILE,
        log_dir=config.LOG_DIR
    )

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("SALES REPORT PIPELINE - MAIN EXECUTION")
    logger.info("=" * 60)

    try:
        pipeline = SalesReportPipeline(config=config)
        if not pipeline.validate_input():
            logger.error("Input validation failed, no reports were written")
            return 1
        results = pipeline.run()
    except OSError as e:
        logger.error(f"Pipeline execution failed: {e}", exc_info=True)
        return 1

    _print_execution_summary(results)
    logger.info("Pipeline execution completed successfully!")
    return 0


def _print_execution_summary(results: dict) -> None:
    """Print final execution summary."""
    statistics = results['statistics']
    processing_stats = results['processing_stats']

    print("\n" + "=" * 70)
    print("GENERAL STATISTICS")
    print("=" * 70)

    print("📊 Reference data:")
    print(f"   • Salespeople: {statistics['salespeople']:,}")
    print(f"   • Products: {statistics['products']:,}")

    print("\n🔄 Transactions:")
    print(f"   • Files processed: {processing_stats['files_processed']:,}")
    print(f"   • Files skipped: {processing_stats['files_skipped']:,}")
    print(f"   • Line items applied: {processing_stats['line_items_applied']:,}")
    print(f"   • Total revenue collected: ${format_amount(statistics['total_revenue'])}")
    print(f"   • Total units sold: {statistics['total_units_sold']:,}")

    best_salesperson = statistics['best_salesperson']
    if best_salesperson:
        print(f"   • Best salesperson: {best_salesperson['name']} "
              f"(${format_amount(best_salesperson['revenue'])})")

    best_product = statistics['best_product']
    if best_product:
        print(f"   • Best-selling product: {best_product['name']} "
              f"({best_product['units_sold']} units)")

    print("\n📁 Generated reports:")
    for report_type, file_path in results['saved_files'].items():
        print(f"   • {report_type.replace('_', ' ').title()}: {Path(file_path).name}")

    print("=" * 70)


if __name__ == '__main__':
    exit_code = main()
    sys.exit(exit_code)
