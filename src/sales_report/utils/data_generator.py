# ========================
# src/sales_report/utils/data_generator.py
# ========================

"""
Data Generation Utilities

Writes synthetic product, salesperson and transaction files with optional
error injection, for testing the pipeline.
"""

import random
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "Juan", "María", "Carlos", "Ana", "Luis", "Carmen", "José", "Laura",
    "Miguel", "Sofia", "Antonio", "Isabel", "Francisco", "Patricia",
    "Manuel", "Rosa", "David", "Elena", "Rafael", "Mónica"
]

LAST_NAMES = [
    "García", "González", "Rodríguez", "Fernández", "López", "Martínez",
    "Sánchez", "Pérez", "Gómez", "Martín", "Jiménez", "Ruiz", "Hernández",
    "Díaz", "Moreno", "Muñoz", "Álvarez", "Romero", "Gutiérrez", "Navarro"
]

PRODUCT_NAMES = [
    "Laptop Dell Inspiron", "Mouse Inalámbrico Logitech", "Teclado Mecánico Corsair",
    "Monitor Samsung 24''", "Auriculares Sony WH-1000XM4", "Smartphone iPhone 14",
    "Tablet Samsung Galaxy", "Impresora HP LaserJet", "Disco Duro Externo 1TB",
    "Cámara Web Logitech HD", "Parlantes Bluetooth JBL", "Cargador Portátil Anker",
    "Cable HDMI 2.0", "Memoria USB 64GB", "Router WiFi TP-Link", "Hub USB-C",
    "Silla Ergonómica Oficina", "Lámpara LED Escritorio", "Soporte para Laptop",
    "Mousepad Gaming XL"
]

DOCUMENT_TYPES = ["Cedula de Ciudadania", "Cedula de Extranjeria", "Pasaporte"]


class DataGenerator:
    """
    Generator for the flat input files the pipeline consumes.
    """

    MIN_PRICE = 50000
    MAX_PRICE = 2000000
    DOCUMENT_BASE = 1000000000
    DOCUMENT_RANGE = 100000000

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize data generator.

        Args:
            seed (int): Random seed for reproducible data generation
        """
        self.random = random.Random(seed)
        logger.info(f"DataGenerator initialized with seed: {seed}")

    def generate_all(self,
                     output_dir: str,
                     num_products: int = 20,
                     num_salespeople: int = 10,
                     min_sales: int = 5,
                     max_sales: int = 20,
                     max_quantity: int = 10,
                     error_rate: float = 0.0,
                     products_file: str = "productos.txt",
                     salespeople_file: str = "vendedores.txt",
                     transaction_prefix: str = "ventas_",
                     transaction_suffix: str = ".txt") -> Dict[str, Any]:
        """
        Generate a complete input set: catalog, directory and one
        transaction file per salesperson.

        Args:
            output_dir (str): Directory to write into (created if missing)
            num_products (int): Products in the catalog, ids ``1..num_products``
            num_salespeople (int): Salespeople in the directory
            min_sales (int): Fewest line items per transaction file
            max_sales (int): Most line items per transaction file
            max_quantity (int): Largest quantity per line item
            error_rate (float): Fraction of line items replaced by bad lines
            products_file (str): Catalog file name
            salespeople_file (str): Directory file name
            transaction_prefix (str): Transaction file name prefix
            transaction_suffix (str): Transaction file name suffix

        Returns:
            dict: Generation statistics
        """
        logger.info(f"Generating {num_products} products, {num_salespeople} salespeople "
                    f"with {error_rate:.1%} error rate...")

        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        stats = {
            'products': num_products,
            'salespeople': num_salespeople,
            'transaction_files': [],
            'line_items': 0,
            'records_with_errors': 0,
            'error_types': {}
        }

        self.create_products_file(output_path / products_file, num_products)
        salespeople = self._generate_salespeople(num_salespeople)
        self.create_salespeople_file(output_path / salespeople_file, salespeople)

        for salesperson in salespeople:
            file_name = self.transaction_file_name(
                salesperson['first_names'], salesperson['document_number'],
                transaction_prefix, transaction_suffix
            )
            sales_count = self.random.randint(min_sales, max_sales)
            self.create_sales_file(
                output_path / file_name, salesperson, sales_count,
                num_products, max_quantity, error_rate, stats
            )
            stats['transaction_files'].append(file_name)

        logger.info(f"Input files generated in {output_path}")
        logger.info(f"Error breakdown: {stats['error_types']}")
        return stats

    @staticmethod
    def transaction_file_name(first_names: str, document_number: int,
                              prefix: str = "ventas_", suffix: str = ".txt") -> str:
        return f"{prefix}{first_names.lower().replace(' ', '_')}_{document_number}{suffix}"

    def create_products_file(self, file_path, num_products: int) -> None:
        """Write ``id;name;price`` lines with prices rounded to cents."""
        with open(file_path, 'w', encoding='utf-8') as f:
            for product_id in range(1, num_products + 1):
                name = PRODUCT_NAMES[(product_id - 1) % len(PRODUCT_NAMES)]
                price = round(self.random.uniform(self.MIN_PRICE, self.MAX_PRICE), 2)
                f.write(f"{product_id};{name};{price:.2f}\n")
        logger.debug(f"Products file written: {file_path}")

    def create_salespeople_file(self, file_path, salespeople: List[Dict[str, Any]]) -> None:
        """Write ``docType;docNumber;firstNames;lastNames`` lines."""
        with open(file_path, 'w', encoding='utf-8') as f:
            for s in salespeople:
                f.write(f"{s['document_type']};{s['document_number']};{s['first_names']};{s['last_names']}\n")
        logger.debug(f"Salespeople file written: {file_path}")

    def create_sales_file(self,
                          file_path,
                          salesperson: Dict[str, Any],
                          sales_count: int,
                          num_products: int,
                          max_quantity: int,
                          error_rate: float,
                          stats: Dict[str, Any]) -> None:
        """Write a header line followed by ``productId;quantity;`` items."""
        with open(file_path, 'w', encoding='utf-8') as f:
            document_type = self.random.choice(DOCUMENT_TYPES)
            f.write(f"{document_type};{salesperson['document_number']}\n")

            for _ in range(sales_count):
                product_id = self.random.randint(1, num_products)
                quantity = self.random.randint(1, max_quantity)
                line = f"{product_id};{quantity};"

                if self.random.random() < error_rate:
                    stats['records_with_errors'] += 1
                    line = self._inject_error(product_id, quantity, num_products, stats)

                f.write(line + "\n")
                stats['line_items'] += 1

    def _generate_salespeople(self, count: int) -> List[Dict[str, Any]]:
        """Build salespeople with unique document numbers."""
        offsets = self.random.sample(range(self.DOCUMENT_RANGE), count)
        return [
            {
                'document_type': self.random.choice(DOCUMENT_TYPES),
                'document_number': self.DOCUMENT_BASE + offset,
                'first_names': self.random.choice(FIRST_NAMES),
                'last_names': f"{self.random.choice(LAST_NAMES)} {self.random.choice(LAST_NAMES)}",
            }
            for offset in offsets
        ]

    def _inject_error(self, product_id: int, quantity: int, num_products: int,
                      stats: Dict[str, Any]) -> str:
        """Return a bad line item in place of a valid one."""
        error_type = self.random.choice([
            'string_product_id', 'string_quantity', 'missing_quantity', 'unknown_product'
        ])
        self._track_error_type(stats, error_type)

        if error_type == 'string_product_id':
            return f"abc;{quantity};"
        if error_type == 'string_quantity':
            return f"{product_id};{quantity} units;"
        if error_type == 'missing_quantity':
            return f"{product_id};"
        return f"{num_products + self.random.randint(1, 100)};{quantity};"

    def _track_error_type(self, stats: Dict[str, Any], error_type: str) -> None:
        """Track error types for statistics."""
        if error_type not in stats['error_types']:
            stats['error_types'][error_type] = 0
        stats['error_types'][error_type] += 1
