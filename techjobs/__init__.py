"""
TechJobs - an in-memory query layer over a job listings CSV file.
"""

from .store import JobStore
from .config.settings import StoreConfig, load_config
from .providers.base import DataProvider
from .providers.csv_provider import CSVProvider
from .providers.memory_provider import InMemoryProvider
from .utils.errors import (
    TechJobsError,
    ConfigurationError,
    DataSourceError,
    DataNotLoadedError,
    MissingColumnError
)

__version__ = '0.1.0'

__all__ = [
    'JobStore',
    'StoreConfig',
    'load_config',
    'DataProvider',
    'CSVProvider',
    'InMemoryProvider',
    'TechJobsError',
    'ConfigurationError',
    'DataSourceError',
    'DataNotLoadedError',
    'MissingColumnError'
]
