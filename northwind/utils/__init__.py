"""
Utility modules for the Northwind data services
"""
from .config_loader import NorthwindConfig, load_northwind_config
from .memo_cache import COLLECTION_KEY, CachePolicy, MemoCache

__all__ = [
    'NorthwindConfig',
    'load_northwind_config',
    'COLLECTION_KEY',
    'CachePolicy',
    'MemoCache',
]
