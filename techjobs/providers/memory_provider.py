"""
In-memory data provider.

Serves rows that were already parsed elsewhere, mostly fixture data for tests
and callers that assemble job listings in code.
"""

from typing import List, Dict, Tuple, Optional

from .base import DataProvider, Row


class InMemoryProvider(DataProvider):
    """
    Data provider backed by a list of dicts.
    
    Attributes:
        headers: Column names in display order
        rows: Job listings, copied on every read
    """
    
    def __init__(self, rows: List[Dict[str, str]], headers: Optional[List[str]] = None):
        """
        Initialize the provider.
        
        Args:
            rows: Job listings
            headers: Column names; inferred from the first row when omitted
        """
        super().__init__("memory://jobs")
        self.rows = rows
        if headers is None:
            headers = list(rows[0].keys()) if rows else []
        self.headers = list(headers)
    
    def read(self) -> Tuple[List[str], List[Row]]:
        rows = [dict(row) for row in self.rows]
        self.check_rows(self.headers, rows)
        return list(self.headers), rows
