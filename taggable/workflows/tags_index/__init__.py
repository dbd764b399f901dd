"""Tags index package."""

from .rebuild_tags_index_wf import rebuild_tags_index_workflow

__all__ = [
    "rebuild_tags_index_workflow",
]
