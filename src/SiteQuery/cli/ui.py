"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to their
runners.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
import yaml
from dotenv import load_dotenv

from SiteQuery.catalog import COUNTRIES, PRESETS, SITE_SUGGESTIONS, TYPE_OPTIONS, find_country
from SiteQuery.cli.commands import SelectionOverrides
from SiteQuery.cli.runner import CommandRunner
from SiteQuery.config import AppConfig, default_config, load_config_with_defaults


@click.group(help="SiteQuery: build Google site: boolean search queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="SITEQUERY_CONFIG",
    default=None,
    help="YAML config merged over the built-in defaults (env: SITEQUERY_CONFIG).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from a .env file and records the config path;
    commands that need the config load it themselves.
    """
    load_dotenv()
    ctx.obj = config_path if config_path is not None else _env_config_path()


def _load_config(config_path: Path | None) -> AppConfig:
    try:
        return load_config_with_defaults(config_path) if config_path else default_config()
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config: {e}") from e


def _check_countries(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> tuple[str, ...]:
    for code in value:
        if find_country(code) is None:
            raise click.BadParameter(f"not a known country code: {code}", ctx=ctx, param=param)
    return value


def _env_config_path() -> Path | None:
    # click resolves envvar before load_dotenv runs; pick up values set only in .env.
    value = os.environ.get("SITEQUERY_CONFIG", "").strip()
    return Path(value) if value else None


@cli.command("build")
@click.option("--site", default=None, help="Site domain; an empty string clears it.")
@click.option("--type", "types", multiple=True, help="Add a job type (repeatable).")
@click.option("--keyword", "keywords", multiple=True, help="Add a keyword (repeatable).")
@click.option(
    "--join",
    "keyword_join",
    type=click.Choice(["AND", "OR"], case_sensitive=False),
    default=None,
    help="Operator between keywords.",
)
@click.option(
    "--country",
    "countries",
    multiple=True,
    callback=_check_countries,
    help="Add a country code (repeatable); see `catalog countries`.",
)
@click.option("--city", "cities", multiple=True, help="Add a city (repeatable).")
@click.option("--exclude", "excludes", multiple=True, help="Add an excluded term (repeatable).")
@click.option("--url/--no-url", "show_url", default=True, show_default=True, help="Print the search URL.")
@click.pass_context
def build_cmd(
    ctx: click.Context,
    site: str | None,
    types: tuple[str, ...],
    keywords: tuple[str, ...],
    keyword_join: str | None,
    countries: tuple[str, ...],
    cities: tuple[str, ...],
    excludes: tuple[str, ...],
    show_url: bool,
) -> None:
    """Build the query from config plus command-line selections and print it."""
    overrides = SelectionOverrides(
        site=site,
        types=types,
        keywords=keywords,
        keyword_join=keyword_join,
        countries=countries,
        cities=cities,
        excludes=excludes,
    )
    runner = CommandRunner(_load_config(ctx.obj))
    runner.run_build(action=ctx.command.name, overrides=overrides, show_url=show_url)


@cli.command("catalog")
@click.argument(
    "section",
    type=click.Choice(["sites", "types", "presets", "countries"], case_sensitive=False),
    default="presets",
)
def catalog_cmd(section: str) -> None:
    """List the built-in choices for SECTION."""
    section = section.lower()
    if section == "sites":
        lines = list(SITE_SUGGESTIONS)
    elif section == "types":
        lines = list(TYPE_OPTIONS)
    elif section == "presets":
        lines = [f"{group}: {', '.join(terms)}" for group, terms in PRESETS.items()]
    else:
        lines = [f"{c.code}  {c.name}: {', '.join(c.cities)}" for c in COUNTRIES]
    for line in lines:
        click.echo(line)
