"""
Configuration module for techjobs.

Example:
    from techjobs.config import load_config
    
    config = load_config()
    print(config.data_file)
"""

from .settings import StoreConfig, load_config, DATA_FILE

__all__ = ['StoreConfig', 'load_config', 'DATA_FILE']
