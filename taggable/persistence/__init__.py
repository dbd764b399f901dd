"""
Persistence package.
"""

from .arango_client import DatabaseLike, SafeDatabase, create_arango_client
from .db import Database

__all__ = [
    "Database",
    "DatabaseLike",
    "SafeDatabase",
    "create_arango_client",
]
