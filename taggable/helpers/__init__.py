"""
Helpers package.
"""

from .exceptions import DocumentNotFoundError, TaggableConfigError
from .locale_helper import LocaleProvider, get_current_locale, set_default_locale, use_locale

__all__ = [
    "DocumentNotFoundError",
    "LocaleProvider",
    "TaggableConfigError",
    "get_current_locale",
    "set_default_locale",
    "use_locale",
]
