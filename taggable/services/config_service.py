#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML, overrides, env vars
#  - Caches composed config for performance
#  - Validates per-collection taggable options (fail fast)
# ======================================================================

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from taggable.helpers.dto.config_dto import TaggableConfig
from taggable.helpers.exceptions import TaggableConfigError

# Options accepted under collections.<name> (and by build_taggable_config)
TAGGABLE_OPTIONS = {"enable_index", "separator", "tags_index_collection_name", "localized"}

# Environment variable -> top-level config key
ENV_OVERRIDES = {
    "TAGGABLE_ARANGO_HOSTS": "arango_hosts",
    "TAGGABLE_ARANGO_USERNAME": "arango_username",
    "TAGGABLE_ARANGO_PASSWORD": "arango_password",
    "TAGGABLE_ARANGO_DB": "arango_db",
    "TAGGABLE_DEFAULT_LOCALE": "default_locale",
}


def build_taggable_config(collection_name: str, options: Mapping[str, Any] | None = None) -> TaggableConfig:
    """
    Validate taggable options for one collection and build its config.

    Args:
        collection_name: Document collection name
        options: Optional overrides (enable_index, separator,
                 tags_index_collection_name, localized)

    Returns:
        Immutable TaggableConfig

    Raises:
        TaggableConfigError: Unknown option or invalid value

    Example:
        >>> build_taggable_config("my_models", {"separator": ";"}).tags_index_collection_name
        'my_models_tags_index'
    """
    options = dict(options or {})

    if not isinstance(collection_name, str) or not collection_name.strip():
        raise TaggableConfigError("collection_name must be a non-empty string")

    unknown = sorted(set(options) - TAGGABLE_OPTIONS)
    if unknown:
        raise TaggableConfigError(f"Unknown taggable option(s) for '{collection_name}': {', '.join(unknown)}")

    for flag in ("enable_index", "localized"):
        if flag in options and not isinstance(options[flag], bool):
            raise TaggableConfigError(f"'{flag}' must be a boolean, got {options[flag]!r}")

    separator = options.get("separator", ",")
    if not isinstance(separator, str) or len(separator) != 1:
        raise TaggableConfigError(f"'separator' must be a single character, got {separator!r}")

    index_name = options.get("tags_index_collection_name") or ""
    if not isinstance(index_name, str):
        raise TaggableConfigError(f"'tags_index_collection_name' must be a string, got {index_name!r}")

    return TaggableConfig(
        collection_name=collection_name,
        enable_index=options.get("enable_index", True),
        separator=separator,
        tags_index_collection_name=index_name,
        localized=options.get("localized", False),
    )


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults -> YAML -> overrides -> env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("collections.articles.separator", ",")
            ';'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def get_taggable_config(self, collection_name: str) -> TaggableConfig:
        """
        Build the validated TaggableConfig for a collection.

        Collections without a ``collections.<name>`` section get the defaults.

        Raises:
            TaggableConfigError: If the section holds unknown or invalid options
        """
        options = self.get(f"collections.{collection_name}") or {}
        if not isinstance(options, dict):
            raise TaggableConfigError(f"collections.{collection_name} must be a mapping")
        return build_taggable_config(collection_name, options)

    def get_connection_params(self) -> dict[str, str]:
        """ArangoDB connection parameters for create_arango_client()."""
        cfg = self.get_config()
        return {
            "hosts": cfg["arango_hosts"],
            "username": cfg["arango_username"],
            "password": cfg["arango_password"],
            "db_name": cfg["arango_db"],
        }

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/taggable/config.yaml  (if present)
          3) ./config/taggable.yaml
          4) $TAGGABLE_CONFIG_PATH (if set)
          5) overrides dict passed to the constructor
          6) Environment variables (TAGGABLE_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/taggable/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "taggable.yaml")))

        env_path = os.getenv("TAGGABLE_CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults."""
        return {
            "arango_hosts": "http://localhost:8529",
            "arango_username": "root",
            "arango_password": "",
            "arango_db": "taggable",
            "default_locale": "en",
            # Per-collection taggable options, keyed by collection name
            "collections": {},
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[ConfigService] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        for env_key, cfg_key in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is not None:
                cfg[cfg_key] = value
