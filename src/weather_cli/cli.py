"""Command-line entry point: ``weather-cli -c <city> [--details]``."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import click
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from weather_cli import __version__
from weather_cli._logging import LOG_FILE_ENV_VAR, configure_logging
from weather_cli.client import WeatherClient
from weather_cli.config import load_config
from weather_cli.exceptions import WeatherError
from weather_cli.render import render_report
from weather_cli.styles import RichStyler


class WeatherCommand(TyperCommand):
    """Loads `.env` before options are parsed and reports usage errors with exit code 1."""

    def make_context(
        self,
        info_name: Optional[str],
        args: list[str],
        parent: Optional[click.Context] = None,
        **extra: Any,
    ) -> click.Context:
        # Must run before parsing so `envvar=` options see values from the file.
        load_dotenv(Path.cwd() / ".env")
        return super().make_context(info_name, args, parent=parent, **extra)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
# Icons are literal characters; `:name:` codes in city names must stay as typed.
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"weather-cli {__version__}")
        raise typer.Exit()


@app.command(cls=WeatherCommand, epilog="For more information, visit https://openweathermap.org/current")
def weather(
    city: Annotated[
        Optional[str],
        typer.Option("--city", "-c", help="Name of the city to fetch weather for.", show_default=False),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="Show more detailed weather information."),
    ] = False,
    log_file: Annotated[
        Optional[str],
        typer.Option("--log-file", envvar=LOG_FILE_ENV_VAR, help="Append API call logs to this file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log at DEBUG level (needs --log-file)."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Fetch current weather for a city from OpenWeatherMap."""
    configure_logging(log_file, verbose=verbose)

    try:
        request = load_config(city, details)
        console.print(f"[blue]Fetching weather for [bold]{escape(request.city)}[/bold]...[/blue]")
        with WeatherClient(request.api_key) as client:
            reading = client.current_weather(request.city)
    except WeatherError as exc:
        err_console.print(f"\n[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print()
    for line in render_report(reading, request.show_details, RichStyler()):
        console.print(line, soft_wrap=True)


def main() -> None:
    app()
