"""Main CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sendermeta import __version__
from sendermeta.core.config.settings import Settings
from sendermeta.core.geo.geoip_service import GeoIPService
from sendermeta.core.language.preferences import parse_preferences
from sendermeta.core.log import configure_logging
from sendermeta.core.sender.derivation import ACCEPT_LANGUAGE, USER_AGENT, SenderMetadataDeriver
from sendermeta.core.sender.sources import HeaderMapSource

app = typer.Typer(
    name="sendermeta",
    help="Sender metadata for real-time messaging connections",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

FIELDS = ("ua", "addr", "city", "region", "country")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]sendermeta[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """sendermeta - describe the originator of a connection."""
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command("parse-language")
def parse_language(
    header: Annotated[str, typer.Argument(help="Accept-Language header value")],
) -> None:
    """Show the ranked languages for an Accept-Language header."""
    for rank, lang in enumerate(parse_preferences(header), start=1):
        console.print(f"{rank}. {escape(lang)}")


@app.command()
def lookup(
    ip: Annotated[str, typer.Argument(help="Remote address to describe")],
    accept_language: Annotated[
        str | None,
        typer.Option("--accept-language", "-l", help="Accept-Language header value"),
    ] = None,
    user_agent: Annotated[
        str | None,
        typer.Option("--user-agent", "-u", help="User-Agent header value"),
    ] = None,
    database: Annotated[
        Path | None,
        typer.Option("--database", "-d", help="GeoIP City database (.mmdb)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML configuration file"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print JSON instead of a table"),
    ] = False,
) -> None:
    """Derive sender metadata for an address."""
    settings = Settings.from_yaml(config_file) if config_file else Settings()
    if database is not None:
        settings.geoip.database_path = database

    try:
        geo = GeoIPService.from_settings(settings)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    headers: dict[str, str | bytes] = {}
    if accept_language is not None:
        headers[ACCEPT_LANGUAGE] = accept_language
    if user_agent is not None:
        headers[USER_AGENT] = user_agent

    try:
        sender = SenderMetadataDeriver(geo).derive(HeaderMapSource(headers=headers, addr=ip))
    finally:
        if geo is not None:
            geo.close()

    if as_json:
        console.print_json(sender.to_json())
        return

    table = Table(title="Sender")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name in FIELDS:
        value = getattr(sender, name)
        # Header values are shown verbatim, never parsed as markup.
        table.add_row(name, Text(value) if value is not None else "-")
    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
