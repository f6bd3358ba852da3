"""
Base data provider definition.

This module provides the abstract base class for job data providers. A
provider knows how to produce a header and a list of rows; the store decides
when to ask for them and owns the result.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Tuple

from ..utils.errors import DataSourceError

Row = Dict[str, str]


class DataProvider(ABC):
    """
    Abstract base class for all job data providers.
    
    Subclasses implement `read`. The shared `check_rows` helper enforces the
    row/header invariant every provider must honour.
    """
    
    def __init__(self, source_path: str):
        """
        Initialize the data provider.
        
        Args:
            source_path: Path (or descriptive URI) of the data source
        """
        self.source_path = source_path
    
    @abstractmethod
    def read(self) -> Tuple[List[str], List[Row]]:
        """
        Read the whole data source.
        
        Returns:
            Tuple of (headers, rows), rows in source order
            
        Raises:
            DataSourceError: If the source cannot be read or is malformed
        """
        pass
    
    def check_rows(self, headers: List[str], rows: List[Row]) -> None:
        """
        Verify every row carries exactly the header's columns.
        
        Args:
            headers: Column names
            rows: Parsed rows
            
        Raises:
            DataSourceError: On duplicate header names or a mismatched row
        """
        if len(set(headers)) != len(headers):
            raise DataSourceError(
                f"Duplicate column names in header of {self.source_path}",
                details={'source_path': self.source_path, 'headers': list(headers)}
            )
        
        expected = set(headers)
        for index, row in enumerate(rows):
            if set(row) != expected:
                raise DataSourceError(
                    f"Row {index + 1} of {self.source_path} does not match the header",
                    details={
                        'source_path': self.source_path,
                        'row': index + 1,
                        'missing': sorted(expected - set(row)),
                        'extra': sorted(set(row) - expected)
                    }
                )
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source_path!r})"
