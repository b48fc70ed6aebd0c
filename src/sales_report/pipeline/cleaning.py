# ========================
# src/sales_report/pipeline/cleaning.py
# ========================

"""
Record Parsing Module

Turns raw field lists into entities. Malformed input is logged and dropped;
every parse method returns None instead of raising.
"""

import re
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

from .models import Product, Salesperson

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')
MAX_AMOUNT_EXPONENT = 308


class RecordParser:
    """
    Validates and converts raw records from the catalog, directory and
    transaction files. Each method handles one record kind.
    """

    PRODUCT_FIELDS = 3
    SALESPERSON_FIELDS = 4
    HEADER_FIELDS = 2
    LINE_ITEM_FIELDS = 2

    def __init__(self):
        """Initialize the parser."""
        self.records_processed = 0
        self.records_dropped = 0
        self.drop_reasons: Dict[str, int] = {}

    def parse_product(self, fields: List[str], source: str, line_number: int) -> Optional[Product]:
        """
        Build a Product from ``id;name;unitPrice``.

        Args:
            fields (list[str]): Trimmed fields of the line
            source (str): File name, for diagnostics
            line_number (int): Physical line number, for diagnostics

        Returns:
            Product or None: None if the line is malformed.
        """
        self.records_processed += 1

        if len(fields) < self.PRODUCT_FIELDS:
            return self._drop('format', source, line_number,
                              f"expected {self.PRODUCT_FIELDS} fields, got {len(fields)}")

        product_id = self._clean_int(fields[0])
        unit_price = self._clean_decimal(fields[2])
        if product_id is None or unit_price is None:
            return self._drop('numeric', source, line_number, "invalid product id or price")

        return Product(id=product_id, name=fields[1], unit_price=unit_price)

    def parse_salesperson(self, fields: List[str], source: str, line_number: int) -> Optional[Salesperson]:
        """
        Build a Salesperson from ``docType;docNumber;firstNames;lastNames``.

        Returns:
            Salesperson or None: None if the line is malformed.
        """
        self.records_processed += 1

        if len(fields) < self.SALESPERSON_FIELDS:
            return self._drop('format', source, line_number,
                              f"expected {self.SALESPERSON_FIELDS} fields, got {len(fields)}")

        document_number = self._clean_int(fields[1])
        if document_number is None:
            return self._drop('numeric', source, line_number, f"invalid document number {fields[1]!r}")

        return Salesperson(
            document_type=fields[0],
            document_number=document_number,
            first_names=fields[2],
            last_names=fields[3],
        )

    def parse_header(self, fields: List[str], source: str, line_number: int) -> Optional[int]:
        """Return the salesperson document number from a transaction header."""
        self.records_processed += 1

        if len(fields) < self.HEADER_FIELDS:
            return self._drop('header', source, line_number, "malformed salesperson header")

        document_number = self._clean_int(fields[1])
        if document_number is None:
            return self._drop('header', source, line_number, f"invalid document number {fields[1]!r}")
        return document_number

    def parse_line_item(self, fields: List[str], source: str, line_number: int) -> Optional[Tuple[int, int]]:
        """Return ``(product_id, quantity)`` from a transaction line."""
        self.records_processed += 1

        if len(fields) < self.LINE_ITEM_FIELDS:
            return self._drop('format', source, line_number,
                              f"expected {self.LINE_ITEM_FIELDS} fields, got {len(fields)}")

        product_id = self._clean_int(fields[0])
        quantity = self._clean_int(fields[1])
        if product_id is None or quantity is None:
            return self._drop('numeric', source, line_number, "invalid product id or quantity")
        return product_id, quantity

    def _drop(self, reason: str, source: str, line_number: int, detail: str) -> None:
        """Record a dropped record and log where it was found."""
        self.records_dropped += 1
        self.drop_reasons[reason] = self.drop_reasons.get(reason, 0) + 1
        logger.warning(f"Skipping line {line_number} in {source}: {detail}")
        return None

    def _clean_int(self, value: Any) -> Optional[int]:
        """Converts a strict decimal integer literal, or returns None."""
        if not isinstance(value, str) or not INTEGER_PATTERN.match(value.strip()):
            return None
        try:
            return int(value)
        except ValueError:
            # longer than the interpreter int conversion limit
            return None

    def _clean_decimal(self, value: Any) -> Optional[Decimal]:
        """Converts a finite decimal literal within double range, or returns None."""
        try:
            amount = Decimal(value.strip())
        except (InvalidOperation, AttributeError):
            return None
        if not amount.is_finite() or (amount and amount.adjusted() > MAX_AMOUNT_EXPONENT):
            return None
        return amount

    def get_statistics(self) -> Dict[str, Any]:
        """Get parsing statistics."""
        return {
            'records_processed': self.records_processed,
            'records_dropped': self.records_dropped,
            'records_cleaned': self.records_processed - self.records_dropped,
            'drop_reasons': dict(self.drop_reasons),
            'success_rate': (self.records_processed - self.records_dropped) / self.records_processed * 100 if self.records_processed > 0 else 0
        }
