"""
Test utilities for techjobs.

This module provides fixtures shared by the test modules: sample job
listings, a provider that counts how often it is read, and helpers for
temporary CSV files.

Example:
    path = create_temp_csv(SAMPLE_JOBS)
    store = JobStore(path)
    assert len(store.find_all()) == 3
"""

import os
import csv
import tempfile
from typing import List, Dict, Any, Optional, Tuple

from techjobs.providers.base import DataProvider, Row
from techjobs.utils.errors import DataSourceError

SAMPLE_JOBS = [
    {'employer': 'Acme', 'skill': 'Java'},
    {'employer': 'Acme Sub', 'skill': 'Go'},
    {'employer': 'Globex', 'skill': 'Java'},
]


class CountingProvider(DataProvider):
    """
    Mock data provider that records every read.
    
    Attributes:
        records: Rows served on each read
        reads: Number of times `read` was called
        fail: When set, every read raises this DataSourceError
    """
    
    def __init__(self, records: List[Dict[str, Any]],
                 headers: Optional[List[str]] = None,
                 fail: Optional[DataSourceError] = None):
        super().__init__("mock://jobs")
        self.records = records
        self.headers = headers if headers is not None else (
            list(records[0].keys()) if records else [])
        self.fail = fail
        self.reads = 0
    
    def read(self) -> Tuple[List[str], List[Row]]:
        self.reads += 1
        if self.fail is not None:
            raise self.fail
        return list(self.headers), [dict(record) for record in self.records]


def create_temp_csv(records: List[Dict[str, Any]],
                    fieldnames: Optional[List[str]] = None) -> str:
    """
    Create a temporary CSV file with the given records.
    
    Args:
        records: List of records to write
        fieldnames: List of field names (if None, inferred from records)
        
    Returns:
        Path to the temporary CSV file
    """
    if not records:
        raise ValueError("No records provided")
    
    if fieldnames is None:
        fieldnames = list(records[0].keys())
    
    fd, path = tempfile.mkstemp(suffix='.csv')
    
    try:
        with os.fdopen(fd, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for record in records:
                writer.writerow(record)
    except Exception:
        os.unlink(path)
        raise
    
    return path


def write_temp_file(content: str, suffix: str = '.csv') -> str:
    """
    Write raw text to a temporary file and return its path.
    """
    fd, path = tempfile.mkstemp(suffix=suffix)
    with os.fdopen(fd, 'w', newline='', encoding='utf-8') as f:
        f.write(content)
    return path


def cleanup_temp_files(*paths: str) -> None:
    for path in paths:
        if path and os.path.exists(path):
            os.unlink(path)
