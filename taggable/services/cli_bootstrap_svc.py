"""
CLI Bootstrap Service - Service Container for CLI Commands

Architecture:
- This is a SERVICE layer module (interfaces -> services)
- CLI commands should NOT import persistence modules directly
- CLI commands SHOULD use these bootstrap functions to get service instances
"""

from __future__ import annotations

import logging

from taggable.helpers.locale_helper import set_default_locale
from taggable.persistence.db import Database
from taggable.services.config_service import ConfigService
from taggable.services.domain.taggable_svc import TaggableService

logger = logging.getLogger(__name__)


def get_config_service() -> ConfigService:
    """Get ConfigService instance for CLI operations."""
    return ConfigService()


def get_taggable_service(collection_name: str, config_service: ConfigService | None = None) -> TaggableService:
    """
    Build a TaggableService for one collection (the service ensures its schema).

    Reads connection params and the collection's taggable options from
    ConfigService, seeds the default locale, and connects to ArangoDB.

    Raises:
        TaggableConfigError: Invalid options for the collection
        arango.exceptions.ServerConnectionError: ArangoDB unreachable
    """
    config_service = config_service or get_config_service()
    config = config_service.get_taggable_config(collection_name)
    set_default_locale(config_service.get("default_locale", "en"))

    db = Database.connect(config, **config_service.get_connection_params())
    service = TaggableService(db)
    logger.debug(f"[CLI Bootstrap] Service ready for {collection_name}")
    return service
