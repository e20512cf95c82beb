"""
Gita Reader
Cached chapter data access for the Bhagavad Gita
"""

from .chapters import CHAPTERS, ChapterInfo
from .errors import FetchError, GitaError, NotFoundError, ParseError, StructureError
from .loader import ChapterDataLoader, build_loader

__all__ = [
    'CHAPTERS',
    'ChapterDataLoader',
    'ChapterInfo',
    'FetchError',
    'GitaError',
    'NotFoundError',
    'ParseError',
    'StructureError',
    'build_loader',
]
