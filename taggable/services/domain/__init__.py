"""
Domain services package.
"""

from .taggable_svc import TaggableService

__all__ = [
    "TaggableService",
]
