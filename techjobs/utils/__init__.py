"""
Utils package for techjobs.
Contains the error hierarchy and validation helpers.
"""

from .errors import (
    TechJobsError,
    ConfigurationError,
    DataSourceError,
    DataNotLoadedError,
    MissingColumnError,
    validate_data_source
)

__all__ = [
    'TechJobsError',
    'ConfigurationError',
    'DataSourceError',
    'DataNotLoadedError',
    'MissingColumnError',
    'validate_data_source'
]
