from __future__ import annotations

"""Public configuration API for SiteQuery."""

from SiteQuery.config.app import (
    DEFAULT_CONFIG,
    AppConfig,
    default_config,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from SiteQuery.config.output import OutputConfig
from SiteQuery.config.query import QueryConfig
from SiteQuery.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "QueryConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG",
    "default_config",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
