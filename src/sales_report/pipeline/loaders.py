# ========================
# src/sales_report/pipeline/loaders.py
# ========================

"""
Reference Data Loaders

Build the product catalog and the salesperson directory from their flat files.
A missing or unreadable file is fatal; bad lines are skipped.
"""

import logging
from typing import Dict, Optional

from .cleaning import RecordParser
from .ingestion import DelimitedFileReader
from .models import Product, Salesperson

logger = logging.getLogger(__name__)


def load_catalog(file_path,
                 parser: Optional[RecordParser] = None,
                 delimiter: str = ';',
                 encoding: str = 'utf-8') -> Dict[int, Product]:
    """
    Load the product catalog.

    Args:
        file_path (str | Path): Catalog file (``id;name;unitPrice`` per line)
        parser (RecordParser): Parser to use; a fresh one if omitted
        delimiter (str): Field separator
        encoding (str): File encoding

    Returns:
        dict[int, Product]: Products keyed by id. On duplicate ids the last
                            line wins.

    Raises:
        OSError: If the file cannot be opened
    """
    parser = parser or RecordParser()
    reader = DelimitedFileReader(file_path, delimiter=delimiter, encoding=encoding)
    catalog: Dict[int, Product] = {}

    for line_number, fields in reader.read_records():
        product = parser.parse_product(fields, reader.name, line_number)
        if product is None:
            continue
        if product.id in catalog:
            logger.debug(f"Product id {product.id} redefined at line {line_number} of {reader.name}")
        catalog[product.id] = product

    logger.info(f"Loaded {len(catalog)} products from {reader.name}")
    return catalog


def load_directory(file_path,
                   parser: Optional[RecordParser] = None,
                   delimiter: str = ';',
                   encoding: str = 'utf-8') -> Dict[int, Salesperson]:
    """
    Load the salesperson directory.

    Args:
        file_path (str | Path): Directory file
            (``docType;docNumber;firstNames;lastNames`` per line)
        parser (RecordParser): Parser to use; a fresh one if omitted
        delimiter (str): Field separator
        encoding (str): File encoding

    Returns:
        dict[int, Salesperson]: Salespeople keyed by document number. On
                                duplicate numbers the last line wins.

    Raises:
        OSError: If the file cannot be opened
    """
    parser = parser or RecordParser()
    reader = DelimitedFileReader(file_path, delimiter=delimiter, encoding=encoding)
    directory: Dict[int, Salesperson] = {}

    for line_number, fields in reader.read_records():
        salesperson = parser.parse_salesperson(fields, reader.name, line_number)
        if salesperson is None:
            continue
        if salesperson.document_number in directory:
            logger.debug(f"Document {salesperson.document_number} redefined at line {line_number} of {reader.name}")
        directory[salesperson.document_number] = salesperson

    logger.info(f"Loaded {len(directory)} salespeople from {reader.name}")
    return directory
