"""
Configuration settings for the techjobs data layer.

This module provides the configuration for locating and parsing the job
listings file. The defaults match the bundled dataset, so most callers never
need a config file at all.

Example:
    # Load configuration
    config = load_config('techjobs.config.json')
    
    # Build a store from it
    store = JobStore.from_config(config)
"""

import os
import json
import codecs
import logging
from typing import Dict, Any, Optional

from ..utils.errors import ConfigurationError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DATA_FILE = os.path.join('resources', 'job_data.csv')

DEFAULT_CSV_SETTINGS = {
    'delimiter': ',',
    'quotechar': '"',
    'encoding': 'utf-8'
}

CONFIG_FILE_NAMES = ['techjobs.config.json', 'config.json']


class StoreConfig:
    """
    Configuration settings for a job store.
    
    Attributes:
        data_file: Path to the delimited job listings file
        csv_settings: Dialect settings (delimiter, quotechar, encoding)
    """
    
    def __init__(self,
                 data_file: Optional[str] = None,
                 csv_settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the store configuration.
        
        Args:
            data_file: Path to the job listings file
            csv_settings: CSV dialect settings, merged over the defaults
            
        Raises:
            ConfigurationError: If a CSV setting is unusable
        """
        if data_file is not None and not isinstance(data_file, str):
            raise ConfigurationError(
                f"Setting 'data_file' must be a path string, got {data_file!r}",
                details={'key': 'data_file', 'value': data_file}
            )
        if csv_settings is not None and not isinstance(csv_settings, dict):
            raise ConfigurationError(
                f"Setting 'csv_settings' must be an object, got {csv_settings!r}",
                details={'key': 'csv_settings', 'value': csv_settings}
            )
        
        self.data_file = data_file or DATA_FILE
        self.csv_settings = dict(DEFAULT_CSV_SETTINGS)
        if csv_settings:
            self.csv_settings.update(csv_settings)
        
        self._validate()
    
    def _validate(self) -> None:
        for key in ('delimiter', 'quotechar'):
            value = self.csv_settings.get(key)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationError(
                    f"CSV setting '{key}' must be a single character, got {value!r}",
                    details={'key': key, 'value': value}
                )
        encoding = self.csv_settings.get('encoding')
        if not isinstance(encoding, str) or not encoding:
            raise ConfigurationError("CSV setting 'encoding' must not be empty")
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigurationError(
                f"Unknown encoding {encoding!r}",
                details={'key': 'encoding', 'value': encoding}
            )
    
    def get_csv_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a specific CSV setting.
        
        Args:
            key: Setting key
            default: Default value if not found
            
        Returns:
            Setting value
        """
        return self.csv_settings.get(key, default)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'data_file': self.data_file,
            'csv_settings': dict(self.csv_settings)
        }
    
    def save(self, file_path: str) -> bool:
        """
        Save configuration to a JSON file.
        
        Args:
            file_path: Path to save the configuration
            
        Returns:
            True if successful, False otherwise
        """
        try:
            with open(file_path, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            return False
    
    @classmethod
    def load(cls, file_path: str) -> 'StoreConfig':
        """
        Load configuration from a JSON file.
        
        An unreadable or malformed file falls back to the default
        configuration. Values that are present but invalid still raise.
        
        Args:
            file_path: Path to the configuration file
            
        Returns:
            StoreConfig instance
            
        Raises:
            ConfigurationError: If a setting has the wrong type or value
        """
        try:
            with open(file_path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration from {file_path}: {e}")
            return cls()
        
        if not isinstance(data, dict):
            logger.error(f"Configuration in {file_path} is not a JSON object")
            return cls()
        
        return cls(
            data_file=data.get('data_file'),
            csv_settings=data.get('csv_settings')
        )


def load_config(file_path: Optional[str] = None) -> StoreConfig:
    """
    Load configuration from a file or return default configuration.
    
    Args:
        file_path: Path to the configuration file (optional)
        
    Returns:
        StoreConfig instance
    """
    if file_path and os.path.exists(file_path):
        return StoreConfig.load(file_path)
    
    for name in CONFIG_FILE_NAMES:
        location = os.path.join(os.getcwd(), name)
        if os.path.exists(location):
            logger.info(f"Using configuration from {location}")
            return StoreConfig.load(location)
    
    logger.info("Using default configuration")
    return StoreConfig()
