# ========================
# src/sales_report/pipeline/models.py
# ========================

"""
Entity Data Model

Products, salespeople and the run context that owns both lookup tables.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal, localcontext, MAX_EMAX, MAX_PREC, MIN_EMIN
from typing import Dict


@contextmanager
def money_context():
    """
    Decimal context in which sums, products and quantizing are exact.
    """
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        yield ctx


@dataclass
class Product:
    """A catalog entry. Only ``units_sold`` changes after loading."""

    id: int
    name: str
    unit_price: Decimal
    units_sold: int = 0

    def add_sale(self, quantity: int) -> None:
        self.units_sold += quantity

    @property
    def total_sales(self) -> Decimal:
        with money_context():
            return self.unit_price * self.units_sold


@dataclass
class Salesperson:
    """A directory entry. Only ``revenue_collected`` changes after loading."""

    document_type: str
    document_number: int
    first_names: str
    last_names: str
    revenue_collected: Decimal = field(default_factory=Decimal)

    def add_revenue(self, amount: Decimal) -> None:
        with money_context():
            self.revenue_collected += amount

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.last_names}"


@dataclass
class PipelineContext:
    """
    State shared by every phase of a run.

    Created empty at the start of a run, filled once by the loaders,
    mutated while transaction files are processed and finally read by
    the report writer.
    """

    catalog: Dict[int, Product] = field(default_factory=dict)
    directory: Dict[int, Salesperson] = field(default_factory=dict)

    def get_product(self, product_id: int):
        return self.catalog.get(product_id)

    def get_salesperson(self, document_number: int):
        return self.directory.get(document_number)
