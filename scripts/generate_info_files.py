#!/usr/bin/env python3
# ========================
# scripts/generate_info_files.py
# ========================

"""
Script to generate pseudo-random input files for the sales report pipeline:
a product catalog, a salesperson directory and one sales file per salesperson.
"""

import sys
import os

# Add src to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from sales_report.utils import Config, DataGenerator, setup_logging


def main():
    """Generate a full input set in the configured working directory."""
    config = Config()
    setup_logging(log_level=config.LOG_LEVEL)

    print("=" * 60)
    print("SALES INPUT FILE GENERATION")
    print("=" * 60)
    print(f"Products: {config.GENERATOR_PRODUCTS}")
    print(f"Salespeople: {config.GENERATOR_SALESPEOPLE}")
    print(f"Output directory: {os.path.abspath(config.WORKING_DIR)}")
    print("=" * 60)

    generator = DataGenerator(seed=config.GENERATOR_SEED)
    try:
        stats = generator.generate_all(
            config.WORKING_DIR,
            num_products=config.GENERATOR_PRODUCTS,
            num_salespeople=config.GENERATOR_SALESPEOPLE,
            min_sales=config.GENERATOR_MIN_SALES,
            max_sales=config.GENERATOR_MAX_SALES,
            max_quantity=config.GENERATOR_MAX_QUANTITY,
            error_rate=config.GENERATOR_ERROR_RATE,
            products_file=config.PRODUCTS_FILE,
            salespeople_file=config.SALESPEOPLE_FILE,
            transaction_prefix=config.TRANSACTION_PREFIX,
            transaction_suffix=config.TRANSACTION_SUFFIX
        )
    except OSError as e:
        print(f"❌ Error generating files: {e}", file=sys.stderr)
        return 1

    print(f"\n✅ {config.PRODUCTS_FILE} (product information)")
    print(f"✅ {config.SALESPEOPLE_FILE} (salesperson information)")
    print(f"✅ {len(stats['transaction_files'])} sales files, {stats['line_items']:,} line items")
    return 0


if __name__ == '__main__':
    sys.exit(main())
