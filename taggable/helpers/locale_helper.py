"""
Current-locale accessor for localized tag collections.

The current locale is context-local (safe across threads and asyncio tasks).
Queries and index reads resolve it at call time; nothing stores it.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from contextvars import ContextVar

LocaleProvider = Callable[[], str]

DEFAULT_LOCALE = "en"

_default_locale = DEFAULT_LOCALE
_current_locale: ContextVar[str | None] = ContextVar("taggable_current_locale", default=None)


def get_current_locale() -> str:
    """Return the locale active in this context, or the process default."""
    return _current_locale.get() or _default_locale


def set_default_locale(locale: str) -> None:
    """Set the process-wide fallback locale (normally from config ``default_locale``)."""
    global _default_locale
    _default_locale = locale


@contextlib.contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """
    Activate a locale for the duration of a with-block.

    Example:
        >>> with use_locale("pt-BR"):
        ...     service.tags()
    """
    token = _current_locale.set(locale)
    try:
        yield locale
    finally:
        _current_locale.reset(token)
