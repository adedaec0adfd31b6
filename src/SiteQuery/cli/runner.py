"""Command runner for coordinating CLI execution.

Configures logging, wires components, and converts failures into a clean
click abort.
"""

from __future__ import annotations

import click

from SiteQuery.cli.commands import BuildCommand, SelectionOverrides
from SiteQuery.config import AppConfig
from SiteQuery.core.query import QueryResult
from SiteQuery.renderers import create_output_writer
from SiteQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling for
    CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def configure(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_build(
        self,
        action: str,
        overrides: SelectionOverrides | None = None,
        *,
        show_url: bool = True,
    ) -> QueryResult:
        """Build the configured query and write it to every configured output.

        Args:
            action: The CLI command name (e.g., 'build').
            overrides: Command-line changes to the configured selection.
            show_url: Whether console output includes the search URL.

        Returns:
            The built result.

        Raises:
            click.Abort: When building or writing fails.
        """
        self.configure(action)
        try:
            selection = self.config.query.selection
            if overrides is not None:
                selection = overrides.apply(selection)
            output_writer = create_output_writer(self.config.output, show_url=show_url)
            result = BuildCommand(selection=selection, output_writer=output_writer).execute()
            output_writer.finalize(action)
            return result
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Build failed: %s", e)
            raise click.Abort from e
