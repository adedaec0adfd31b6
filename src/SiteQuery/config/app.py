from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SiteQuery.config.output import OutputConfig, check_output, load_output
from SiteQuery.config.query import QueryConfig, check_query, load_query
from SiteQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG: Mapping[str, Any] = {
    "log": {"level": "INFO", "to_file": False, "dir": "log"},
    "query": {
        "site": "github.com",
        "types": ["frontend"],
        "keyword_join": "OR",
        "presets": {"Frontend": ["react", "typescript"]},
        "extra_keywords": "",
        "countries": [],
        "cities": [],
        "excludes": "",
    },
    "output": {"base_dir": "output", "formats": ["console"]},
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    query: QueryConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    query = load_query(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_query(query)
    check_output(output)

    return AppConfig(runtime=runtime, query=query, output=output)


def default_config() -> AppConfig:
    """Return the built-in configuration."""
    return parse_config_dict(deepcopy(DEFAULT_CONFIG))


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path, default_path: Path | None = None) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override YAML file.
        default_path: Base YAML file; the built-in defaults when None.
    """
    if default_path is None:
        base = deepcopy(dict(DEFAULT_CONFIG))
    else:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; lists and scalars in `override` replace."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
