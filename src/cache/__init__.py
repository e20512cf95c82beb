"""
Gita Cache Layer
Expiring key/value cache over SQLite or in-memory substrates
"""

from .backends import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from .store import CacheError, CacheStore

__all__ = [
    'CacheError',
    'CacheStore',
    'KeyValueStore',
    'MemoryKeyValueStore',
    'SQLiteKeyValueStore',
]
