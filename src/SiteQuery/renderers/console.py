"""Console output for built queries.

The query (and its URL) go to stdout so they can be piped; everything else is
logged.
"""

from __future__ import annotations

import click

from SiteQuery.core.query import QueryResult
from SiteQuery.renderers.base import OutputWriter
from SiteQuery.utils.log import log


def render_text(result: QueryResult, *, show_url: bool = True) -> str:
    """Render a result as plain text lines.

    Args:
        result: Built query result.
        show_url: Whether to append the search URL line.

    Returns:
        The query on the first line, the URL on the second when requested,
        or an empty string for an empty query.
    """
    if not result.query:
        return ""
    lines = [result.query]
    if show_url and result.url:
        lines.append(result.url)
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Echo results to stdout."""

    def __init__(self, show_url: bool = True) -> None:
        self.show_url = show_url

    def write_result(self, result: QueryResult) -> None:
        text = render_text(result, show_url=self.show_url)
        if not text:
            log.warning("No filters selected; query is empty")
            return
        click.echo(text, nl=False)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
