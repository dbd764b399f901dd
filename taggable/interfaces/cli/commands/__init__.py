"""
Commands package.
"""

from .find import cmd_find
from .list_tags import cmd_list_tags
from .rebuild_index import cmd_rebuild_index

__all__ = [
    "cmd_find",
    "cmd_list_tags",
    "cmd_rebuild_index",
]
