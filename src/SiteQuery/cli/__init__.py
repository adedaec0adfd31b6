"""CLI package for SiteQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from SiteQuery.cli.runner import CommandRunner
from SiteQuery.cli.ui import cli


def main() -> None:
    """Run SiteQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
