"""
Error handling utilities for techjobs.

This module provides the exception hierarchy used throughout the techjobs
package, plus a small validation helper for data source paths.

Example:
    try:
        employers = store.find_all_values("employer")
    except MissingColumnError as e:
        logger.error(f"Unknown column: {e}")
"""

import os
from typing import Any, Optional, Tuple, Dict


class TechJobsError(Exception):
    """Base exception for all techjobs errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(TechJobsError):
    """Exception raised for configuration errors."""
    pass


class DataSourceError(TechJobsError):
    """Exception raised when the job data cannot be loaded."""
    pass


class DataNotLoadedError(DataSourceError):
    """Exception raised when a query runs against a store whose load failed."""
    pass


class MissingColumnError(TechJobsError, KeyError):
    """Exception raised when a query names a column absent from the header."""
    
    def __init__(self, column: str, headers: Optional[list] = None):
        self.column = column
        super().__init__(
            f"Column '{column}' not found in job data",
            details={'column': column, 'available': list(headers or [])}
        )


SUPPORTED_EXTENSIONS = ['.csv', '.txt', '.tsv']


def validate_data_source(source_path: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a data source path.
    
    Args:
        source_path: Path to the data source
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not source_path:
        return False, "Data source path is empty"
    
    if not os.path.exists(source_path):
        return False, f"Data source not found: {source_path}"
    
    if not os.path.isfile(source_path):
        return False, f"Data source is not a file: {source_path}"
    
    _, ext = os.path.splitext(source_path)
    
    if ext.lower() not in SUPPORTED_EXTENSIONS:
        return False, f"Unsupported file type: {ext}"
    
    return True, None
