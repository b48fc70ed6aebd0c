# ========================
# tests/test_ingestion.py
# ========================

import unittest
import tempfile
import os
import sys
from pathlib import Path

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from sales_report.pipeline.ingestion import DelimitedFileReader, TransactionScanner, split_fields


class TestDelimitedFileReader(unittest.TestCase):
    """Test the delimited file reader."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir_path = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, name, content):
        file_path = self.dir_path / name
        file_path.write_text(content, encoding='utf-8')
        return file_path

    def test_reader_skips_blank_lines_and_keeps_line_numbers(self):
        """Blank lines are skipped but reported line numbers stay physical."""
        file_path = self._write('productos.txt', "1;Mouse;10000.00\n\n   \n2;Pad;5\n\n")

        records = list(DelimitedFileReader(file_path).read_records())

        self.assertEqual(records, [
            (1, ['1', 'Mouse', '10000.00']),
            (4, ['2', 'Pad', '5']),
        ])

    def test_reader_trims_fields_and_drops_trailing_separator(self):
        file_path = self._write('ventas_x.txt', "CC ; 555\n 1 ; 3 ;\n")

        records = list(DelimitedFileReader(file_path).read_records())

        self.assertEqual(records[0][1], ['CC', '555'])
        self.assertEqual(records[1][1], ['1', '3'])

    def test_reader_file_not_found(self):
        """Test reader behavior with non-existent file."""
        reader = DelimitedFileReader(self.dir_path / "missing.txt")

        with self.assertRaises(FileNotFoundError):
            list(reader.read_records())

    def test_reader_empty_file(self):
        file_path = self._write('empty.txt', "")

        self.assertEqual(list(DelimitedFileReader(file_path).read_records()), [])

    def test_reader_replaces_undecodable_bytes(self):
        file_path = self.dir_path / 'latin.txt'
        file_path.write_bytes("1;Cami\xf3n;10\n".encode('latin-1'))

        records = list(DelimitedFileReader(file_path).read_records())

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0][1][0], '1')
        self.assertEqual(records[0][1][2], '10')

    def test_split_fields(self):
        self.assertEqual(split_fields("CC;"), ['CC'])
        self.assertEqual(split_fields("1;3;"), ['1', '3'])
        self.assertEqual(split_fields("a;;b"), ['a', '', 'b'])
        self.assertEqual(split_fields(";;"), [])


class TestTransactionScanner(unittest.TestCase):
    """Test transaction file discovery."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir_path = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_scan_matches_prefix_and_suffix_exactly(self):
        for name in ['ventas_b.txt', 'ventas_a.txt', 'Ventas_c.txt', 'ventas_d.csv',
                     'ventas_e.TXT', 'other.txt', 'productos.txt']:
            (self.dir_path / name).write_text("CC;1\n", encoding='utf-8')
        (self.dir_path / 'ventas_dir.txt').mkdir()

        names = TransactionScanner(self.dir_path).scan()

        self.assertEqual(names, ['ventas_a.txt', 'ventas_b.txt'])

    def test_scan_custom_pattern(self):
        (self.dir_path / 'sales-1.dat').write_text("CC;1\n", encoding='utf-8')
        (self.dir_path / 'ventas_1.txt').write_text("CC;1\n", encoding='utf-8')

        scanner = TransactionScanner(self.dir_path, prefix='sales-', suffix='.dat')

        self.assertEqual(scanner.scan(), ['sales-1.dat'])
        self.assertEqual(scanner.scan_paths(), [self.dir_path / 'sales-1.dat'])

    def test_scan_missing_directory_returns_empty(self):
        scanner = TransactionScanner(self.dir_path / 'missing')

        with self.assertLogs('sales_report', level='WARNING'):
            self.assertEqual(scanner.scan(), [])


if __name__ == '__main__':
    unittest.main()
