"""Output renderers for built queries.

Exports the OutputWriter base for new formats and a factory that builds the
writers named in the configuration.
"""

from __future__ import annotations

from SiteQuery.config import OutputConfig
from SiteQuery.renderers.base import MultiOutputWriter, OutputWriter
from SiteQuery.renderers.console import ConsoleOutputWriter, render_text
from SiteQuery.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: OutputConfig, *, show_url: bool = True) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Output configuration.
        show_url: Whether console output includes the search URL.

    Returns:
        A MultiOutputWriter over every configured format.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.formats:
        writers.append(ConsoleOutputWriter(show_url=show_url))
    if "json" in config.formats:
        writers.append(JsonFileWriter(config.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
