"""Tag list parsing for display strings.

Converts between the delimited display string a caller sets or reads
(e.g. "food, ant ,bee") and the canonical TagSet stored on a document.

Parsing never fails: malformed input degrades to fewer or no tags.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from taggable.helpers.dto.tags_dto import TagSet


def parse_tag_list(raw: str | None, separator: str) -> TagSet:
    """
    Split a display string into a TagSet.

    Each token is stripped of surrounding whitespace; tokens that are empty
    after stripping are dropped. Order and duplicates are kept as given.

    Args:
        raw: Delimited tag string, or None
        separator: Single separator character

    Returns:
        Tuple of trimmed, non-empty tags (empty tuple for None/blank input)

    Example:
        >>> parse_tag_list("now ,  with, some spaces  , in places ", ",")
        ('now', 'with', 'some spaces', 'in places')
    """
    if raw is None or not raw.strip():
        return ()
    return tuple(token.strip() for token in raw.split(separator) if token.strip())


def join_tag_list(tags: Iterable[str], separator: str) -> str:
    """Render a TagSet back to its display string."""
    return separator.join(tags)


def flatten_tag_args(*tags: Any) -> list[str]:
    """
    Flatten varargs and nested lists/tuples into one flat list of tags.

    Strings are leaves; they are never iterated character by character.

    Example:
        >>> flatten_tag_args("a", ["b", ("c",)])
        ['a', 'b', 'c']
    """
    flat: list[str] = []
    for item in tags:
        if isinstance(item, list | tuple | set | frozenset):
            flat.extend(flatten_tag_args(*item))
        elif item is not None:
            flat.append(str(item))
    return flat
