"""
taggable - tag lists and a rebuildable tag frequency index for ArangoDB collections.

Typical use:

    from taggable import ConfigService, Database, TaggableService

    config_service = ConfigService()
    config = config_service.get_taggable_config("articles")
    db = Database.connect(config, **config_service.get_connection_params())
    service = TaggableService(db)  # creates missing collections and indexes

    article = service.new({"title": "Hello"})
    article.set_tags("food, ant, bee")
    service.save(article)

    service.tags_with_weight()
    service.find(service.tagged_with_any("food", "juice"))
"""

from .__version__ import __version__
from .components.tagging import FlatTagCollection, LocalizedTagCollection, TagCollection, TagQuery
from .helpers.dto import IndexEntry, TaggableConfig
from .helpers.exceptions import DocumentNotFoundError, TaggableConfigError
from .helpers.locale_helper import get_current_locale, use_locale
from .persistence.db import Database
from .services.config_service import ConfigService, build_taggable_config
from .services.domain.taggable_svc import TaggableService

__all__ = [
    "ConfigService",
    "Database",
    "DocumentNotFoundError",
    "FlatTagCollection",
    "IndexEntry",
    "LocalizedTagCollection",
    "TagCollection",
    "TagQuery",
    "TaggableConfig",
    "TaggableConfigError",
    "TaggableService",
    "__version__",
    "build_taggable_config",
    "get_current_locale",
    "use_locale",
]
