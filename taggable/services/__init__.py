"""
Services package.
"""

from .config_service import ConfigService, build_taggable_config
from .domain.taggable_svc import TaggableService

__all__ = [
    "ConfigService",
    "TaggableService",
    "build_taggable_config",
]
