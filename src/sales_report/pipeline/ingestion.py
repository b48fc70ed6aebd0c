# ========================
# src/sales_report/pipeline/ingestion.py
# ========================

"""
Data Ingestion Module

Line-oriented reading of ``;``-delimited flat files and discovery of
transaction files in a directory.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

Record = Tuple[int, List[str]]


def split_fields(line: str, delimiter: str = ';') -> List[str]:
    """
    Split a line into trimmed fields.

    Trailing empty fields are dropped, so ``"1;3;"`` yields two fields and
    ``"CC;"`` yields one.
    """
    fields = [value.strip() for value in line.split(delimiter)]
    while fields and not fields[-1]:
        fields.pop()
    return fields


class DelimitedFileReader:
    """
    Reads a delimited text file one record per line.
    Blank lines are skipped but still counted, so reported line numbers
    always match the physical line in the file.
    """

    def __init__(self, file_path, delimiter: str = ';', encoding: str = 'utf-8'):
        """
        Initialize the reader.

        Args:
            file_path (str | Path): Path to the file to read
            delimiter (str): Field separator
            encoding (str): Text encoding; undecodable bytes are replaced
        """
        self.file_path = Path(file_path)
        self.delimiter = delimiter
        self.encoding = encoding
        logger.debug(f"Initialized DelimitedFileReader for file: {self.file_path}")

    @property
    def name(self) -> str:
        return self.file_path.name

    def read_records(self) -> Iterator[Record]:
        """
        A generator that yields ``(line_number, fields)`` for every non-blank line.

        The file handle is closed when the generator is exhausted, closed
        or garbage collected.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be opened
        """
        with open(self.file_path, 'r', encoding=self.encoding, errors='replace') as f:
            line_count = 0
            for line_number, line in enumerate(f, start=1):
                line_count = line_number
                if not line.strip():
                    continue
                yield line_number, split_fields(line, self.delimiter)

        logger.debug(f"Total lines read from {self.name}: {line_count}")


class TransactionScanner:
    """Finds transaction files in a directory by exact prefix and suffix."""

    def __init__(self, directory, prefix: str = 'ventas_', suffix: str = '.txt'):
        self.directory = Path(directory)
        self.prefix = prefix
        self.suffix = suffix

    def matches(self, file_name: str) -> bool:
        return file_name.startswith(self.prefix) and file_name.endswith(self.suffix)

    def scan(self) -> List[str]:
        """
        List transaction file names in the directory.

        Returns:
            list[str]: Sorted matching file names; empty if the directory
                       cannot be read.
        """
        try:
            entries = os.listdir(self.directory)
        except OSError as e:
            logger.warning(f"Could not access directory {self.directory}: {e}")
            return []

        names = sorted(
            name for name in entries
            if self.matches(name) and (self.directory / name).is_file()
        )
        logger.info(f"Found {len(names)} transaction files in {self.directory}")
        return names

    def scan_paths(self) -> List[Path]:
        return [self.directory / name for name in self.scan()]
