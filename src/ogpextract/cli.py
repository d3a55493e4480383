"""Command-line interface for ogpextract."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional, TextIO

import click
import structlog
import yaml
from bs4.builder import builder_registry
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ogpextract import __version__
from ogpextract.config import Config, find_config_file
from ogpextract.models import ParseResult
from ogpextract.observability import configure_logging
from ogpextract.opengraph import OpenGraphParser

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger(__name__)


def load_config(config_path: Optional[Path]) -> Config:
    """Load configuration from an explicit file, a discovered file or the environment."""
    path = config_path or find_config_file()
    if path is None:
        return Config()
    return Config.from_yaml(path)


def render_table(result: ParseResult) -> Table:
    table = Table(title="Open Graph Properties")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("title", result.title)
    table.add_row("type", result.type)
    table.add_row("url", result.url)
    if result.description is not None:
        table.add_row("description", result.description)
    if result.site_name is not None:
        table.add_row("site_name", result.site_name)
    for i, image in enumerate(result.images):
        table.add_row(f"image[{i}]", image.image or "")
        for name in ("url", "secure_url", "type"):
            value = getattr(image, name)
            if value is not None:
                table.add_row(f"image[{i}]:{name}", value)
        table.add_row(f"image[{i}]:size", f"{image.width}x{image.height}")
    if result.profile is not None:
        table.add_row("profile", result.profile)
    if result.article is not None:
        article = result.article
        for name in ("section", "published_time", "modified_time", "expiration_time"):
            value = getattr(article, name)
            if value is not None:
                table.add_row(f"article:{name}", value)
        for author in article.authors or ():
            table.add_row("article:author", author)
    return table


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides configuration)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """ogpextract - Open Graph Protocol metadata extractor."""
    ctx.ensure_object(dict)
    try:
        settings = load_config(Path(config) if config else None)
    except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    if log_level:
        settings.monitoring.log_level = log_level.upper()
    configure_logging(settings.monitoring)
    ctx.obj["config"] = settings


@cli.command()
@click.argument("path", type=click.File("r", encoding="utf-8"))
@click.option(
    "--html-parser",
    default=None,
    type=click.Choice(["html.parser", "lxml", "html5lib"]),
    help="BeautifulSoup tree builder (overrides configuration)",
)
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(["json", "table"]),
    help="Output format",
)
@click.pass_context
def parse(ctx: click.Context, path: TextIO, html_parser: Optional[str], output_format: str) -> None:
    """Extract Open Graph properties from an HTML file (or - for stdin)."""
    settings: Config = ctx.obj["config"]
    html_parser = html_parser or settings.parser.html_parser
    if builder_registry.lookup(html_parser) is None:
        raise click.UsageError(
            f"HTML parser '{html_parser}' is not installed; install it with: pip install ogpextract[{html_parser}]"
        )

    with structlog.contextvars.bound_contextvars(document_id=path.name):
        html = path.read()
        logger.info("Parsing document", size=len(html), html_parser=html_parser)
        result = OpenGraphParser.parse(html, html_parser=html_parser)

    if result is None:
        err_console.print(f"[red]{path.name}: no conforming Open Graph metadata found[/red]", soft_wrap=True)
        sys.exit(1)

    if output_format == "table":
        console.print(render_table(result))
    else:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


@cli.command("show-config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration."""
    settings: Config = ctx.obj["config"]
    click.echo(json.dumps(settings.model_dump(), indent=2))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
