# ========================
# src/sales_report/utils/config.py
# ========================

"""
Configuration Management

Centralized configuration for the sales report pipeline.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional


class Config:
    """
    Configuration class for the sales report pipeline.
    Defaults match the file names the input generator produces; any value
    can be overridden from a dictionary or a JSON file.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            config_dict (dict): Optional configuration overrides
        """
        # File Paths
        self.WORKING_DIR = '.'
        self.PRODUCTS_FILE = 'productos.txt'
        self.SALESPEOPLE_FILE = 'vendedores.txt'
        self.SALESPERSON_REPORT_FILE = 'reporte_vendedores.csv'
        self.PRODUCT_REPORT_FILE = 'reporte_productos.csv'

        # Transaction File Discovery
        self.TRANSACTION_PREFIX = 'ventas_'
        self.TRANSACTION_SUFFIX = '.txt'

        # File Format
        self.FIELD_DELIMITER = ';'
        self.FILE_ENCODING = 'utf-8'

        # Data Generation Settings
        self.GENERATOR_SEED = None
        self.GENERATOR_PRODUCTS = 20
        self.GENERATOR_SALESPEOPLE = 10
        self.GENERATOR_MIN_SALES = 5
        self.GENERATOR_MAX_SALES = 20
        self.GENERATOR_MAX_QUANTITY = 10
        self.GENERATOR_ERROR_RATE = 0.0

        # Logging Configuration
        self.LOG_LEVEL = 'INFO'
        self.LOG_FILE = None
        self.LOG_DIR = 'logs'

        # Override with provided config
        if config_dict:
            self._update_from_dict(config_dict)

    def _update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for key, value in config_dict.items():
            if hasattr(self, key.upper()):
                setattr(self, key.upper(), value)

    def get_data_paths(self) -> Dict[str, Path]:
        """Get all configured data paths as Path objects."""
        working_dir = Path(self.WORKING_DIR)
        return {
            'working_dir': working_dir,
            'products_file': working_dir / self.PRODUCTS_FILE,
            'salespeople_file': working_dir / self.SALESPEOPLE_FILE,
            'salesperson_report': working_dir / self.SALESPERSON_REPORT_FILE,
            'product_report': working_dir / self.PRODUCT_REPORT_FILE,
            'logs_dir': Path(self.LOG_DIR)
        }

    def validate_config(self) -> Dict[str, bool]:
        """
        Validate configuration values.

        Returns:
            dict: Validation results for each setting
        """
        validations = {}

        validations['delimiter'] = len(self.FIELD_DELIMITER) == 1
        validations['transaction_pattern'] = bool(self.TRANSACTION_PREFIX) or bool(self.TRANSACTION_SUFFIX)
        validations['generator_products'] = self.GENERATOR_PRODUCTS > 0
        validations['generator_salespeople'] = self.GENERATOR_SALESPEOPLE > 0
        validations['generator_sales_range'] = 0 < self.GENERATOR_MIN_SALES <= self.GENERATOR_MAX_SALES
        validations['generator_quantity'] = self.GENERATOR_MAX_QUANTITY > 0
        validations['generator_error_rate'] = 0.0 <= self.GENERATOR_ERROR_RATE <= 1.0

        # Validate log level
        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        validations['log_level'] = self.LOG_LEVEL.upper() in valid_log_levels

        return validations

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            attr: getattr(self, attr)
            for attr in dir(self)
            if not attr.startswith('_') and not callable(getattr(self, attr))
        }

    def save_to_file(self, file_path: str) -> None:
        """Save configuration to JSON file."""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

    @classmethod
    def load_from_file(cls, file_path: str) -> 'Config':
        """Load configuration from JSON file."""
        with open(file_path, 'r') as f:
            config_dict = json.load(f)
        return cls(config_dict)

    def __str__(self) -> str:
        """String representation of configuration."""
        lines = ["Configuration Settings:"]
        config_dict = self.to_dict()
        for key, value in sorted(config_dict.items()):
            lines.append(f"  {key}: {value}")
        return "\n".join(lines)
