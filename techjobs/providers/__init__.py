"""
Job data providers.
"""

from .base import DataProvider, Row
from .csv_provider import CSVProvider
from .memory_provider import InMemoryProvider

__all__ = [
    'DataProvider',
    'Row',
    'CSVProvider',
    'InMemoryProvider'
]
