"""
CSV data provider implementation.

This module reads an RFC-4180 style CSV file whose first record is the header
row and turns every following record into a dict keyed by column name.
"""

import csv
import logging
import time
from typing import List, Tuple, Optional

from .base import DataProvider, Row
from ..utils.errors import DataSourceError, validate_data_source

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class CSVProvider(DataProvider):
    """
    Data provider that reads job listings from a CSV file.
    
    Records whose field count differs from the header are treated as a
    malformed file rather than padded or truncated.
    """
    
    def __init__(self,
                 source_path: str,
                 delimiter: str = ',',
                 quotechar: str = '"',
                 encoding: str = 'utf-8'):
        """
        Initialize the CSV provider.
        
        Args:
            source_path: Path to the CSV file
            delimiter: Field delimiter
            quotechar: Quote character for fields containing delimiters
            encoding: File encoding
        """
        super().__init__(source_path)
        self.delimiter = delimiter
        self.quotechar = quotechar
        self.encoding = encoding
    
    def read(self) -> Tuple[List[str], List[Row]]:
        """
        Parse the CSV file.
        
        Returns:
            Tuple of (headers, rows)
            
        Raises:
            DataSourceError: If the file is missing, unreadable, empty or has
                records with the wrong number of fields
        """
        is_valid, error = validate_data_source(self.source_path)
        if not is_valid:
            raise DataSourceError(error, details={'source_path': self.source_path})
        
        start_time = time.time()
        
        try:
            with open(self.source_path, 'r', newline='', encoding=self.encoding) as csvfile:
                reader = csv.reader(
                    csvfile,
                    delimiter=self.delimiter,
                    quotechar=self.quotechar,
                    strict=True
                )
                headers = self._read_headers(reader)
                rows = [self._to_row(headers, record, reader.line_num)
                        for record in reader if record]
        except (OSError, LookupError, UnicodeDecodeError, csv.Error) as e:
            raise DataSourceError(
                f"Error reading CSV file {self.source_path}: {e}",
                details={'source_path': self.source_path, 'error_type': type(e).__name__}
            ) from e
        
        self.check_rows(headers, rows)
        
        load_time = time.time() - start_time
        logger.info(f"Read {len(rows)} rows and {len(headers)} columns from "
                    f"{self.source_path} in {load_time:.4f} seconds")
        return headers, rows
    
    def _read_headers(self, reader) -> List[str]:
        header_record: Optional[List[str]] = next((record for record in reader if record), None)
        if not header_record:
            raise DataSourceError(
                f"CSV file {self.source_path} has no header row",
                details={'source_path': self.source_path}
            )
        # Drop a UTF-8 byte order mark left on the first column name
        header_record[0] = header_record[0].lstrip('\ufeff')
        return header_record
    
    def _to_row(self, headers: List[str], record: List[str], line_num: int) -> Row:
        if len(record) != len(headers):
            raise DataSourceError(
                f"Line {line_num} of {self.source_path} has {len(record)} fields, "
                f"expected {len(headers)}",
                details={
                    'source_path': self.source_path,
                    'line': line_num,
                    'fields': len(record),
                    'expected': len(headers)
                }
            )
        return dict(zip(headers, record))
