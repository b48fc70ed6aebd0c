# ========================
# src/sales_report/pipeline/storage.py
# ========================

"""
Report Storage Module

Sorts the aggregated entities and writes the salesperson and product reports.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Dict, Iterable, List

from .models import PipelineContext, Product, Salesperson, money_context

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal('0.01')


def format_amount(value) -> str:
    """Render a money amount with exactly two decimals, rounding half up."""
    with money_context():
        return format(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP), 'f')


def sort_salespeople(salespeople: Iterable[Salesperson]) -> List[Salesperson]:
    """Stable sort by revenue collected, highest first."""
    return sorted(salespeople, key=lambda s: s.revenue_collected, reverse=True)


def sort_products(products: Iterable[Product]) -> List[Product]:
    """Stable sort by units sold, highest first."""
    return sorted(products, key=lambda p: p.units_sold, reverse=True)


class ReportWriter:
    """
    Writes the two ranking reports of a run.
    """

    def __init__(self,
                 output_dir: str = ".",
                 salesperson_report: str = "reporte_vendedores.csv",
                 product_report: str = "reporte_productos.csv",
                 delimiter: str = ';',
                 encoding: str = 'utf-8'):
        """
        Initialize the report writer.

        Args:
            output_dir (str): Directory to write reports into
            salesperson_report (str): File name of the salesperson ranking
            product_report (str): File name of the product ranking
            delimiter (str): Field separator
            encoding (str): Output encoding
        """
        self.output_dir = Path(output_dir)
        self.salesperson_report = salesperson_report
        self.product_report = product_report
        self.delimiter = delimiter
        self.encoding = encoding
        logger.debug(f"ReportWriter initialized with output directory: {self.output_dir}")

    def save_all(self, context: PipelineContext) -> Dict[str, str]:
        """
        Write both reports.

        Args:
            context (PipelineContext): Run state after all files were processed

        Returns:
            dict: Mapping of report kind to saved file path
        """
        saved_files = {
            'salesperson_report': self.write_salesperson_report(context.directory.values()),
            'product_report': self.write_product_report(context.catalog.values()),
        }
        logger.info(f"All reports saved to {self.output_dir}")
        return saved_files

    def write_salesperson_report(self, salespeople: Iterable[Salesperson], file_name: str = None) -> str:
        """Write ``firstNames;lastNames;revenue`` lines, best revenue first."""
        file_path = self.output_dir / (file_name or self.salesperson_report)
        rows = [
            [s.first_names, s.last_names, format_amount(s.revenue_collected)]
            for s in sort_salespeople(salespeople)
        ]
        self._write_lines(file_path, rows)
        return str(file_path)

    def write_product_report(self, products: Iterable[Product], file_name: str = None) -> str:
        """Write ``name;unitPrice;unitsSold`` lines, most units first."""
        file_path = self.output_dir / (file_name or self.product_report)
        rows = [
            [p.name, format_amount(p.unit_price), str(p.units_sold)]
            for p in sort_products(products)
        ]
        self._write_lines(file_path, rows)
        return str(file_path)

    def _write_lines(self, file_path: Path, rows: List[List[str]]) -> None:
        """Write delimited rows, truncating any existing file."""
        try:
            with open(file_path, 'w', newline='', encoding=self.encoding) as f:
                for row in rows:
                    f.write(self.delimiter.join(row) + '\n')

            logger.info(f"Saved {len(rows)} records to {file_path}")

        except OSError as e:
            logger.error(f"Error writing report {file_path}: {e}")
            raise
