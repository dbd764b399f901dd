"""
Workflows package.
"""

from .tags_index.rebuild_tags_index_wf import rebuild_tags_index_workflow

__all__ = [
    "rebuild_tags_index_workflow",
]
