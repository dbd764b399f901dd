"""
Platform package.
"""

from .arango_bootstrap_comp import ensure_taggable_schema

__all__ = [
    "ensure_taggable_schema",
]
