"""CLI principal (Typer).

Flujo por invocación:
- Typer parsea los argumentos (help/version/usage los genera la librería).
- Se carga la configuración del usuario; si falta o es inválida se imprime
  un mensaje y se sale sin hacer peticiones.
- Se despacha un único comando contra el servidor y se imprime el resultado.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_client
from adapters.redirect_client import RedirectClient
from cli import __version__
from cli.logging_utils import configure_logging
from cli.ui_components import render_outcome
from core.config import AppSettings, load_settings
from core.domain.models import Command, CreateRedirect, DeleteRedirect, ListRedirects
from core.errors import (
    ConfigFileInvalidError,
    ConfigFileMissingError,
    HomeDirectoryNotFoundError,
    ServerUnreachableError,
)
from core.services.dispatcher import dispatch

logger = logging.getLogger(__name__)

MISSING_CONFIG_MESSAGE = (
    "Unable to read config file! Create a new one at `$HOME/.config/fallo/config.toml`"
)
INVALID_CONFIG_MESSAGE = "Unable to parse config file! Make sure it contains everything it should."
NO_HOME_MESSAGE = "Unable to find your home directory"
UNREACHABLE_MESSAGE = "Unable to send request"

app = typer.Typer(
    name="fallo",
    help="client for the fallo server - a redirect service",
    no_args_is_help=True,
    add_completion=False,
)

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fallo {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logging()


def _load_settings_or_exit() -> AppSettings:
    try:
        return load_settings()
    except HomeDirectoryNotFoundError as exc:
        logger.debug("Home directory lookup failed: %s", exc)
        _err_console.print(Text(NO_HOME_MESSAGE), soft_wrap=True)
        raise typer.Exit(code=1) from exc
    except ConfigFileMissingError as exc:
        _console.print(Text(MISSING_CONFIG_MESSAGE), soft_wrap=True)
        raise typer.Exit(code=0) from exc
    except ConfigFileInvalidError as exc:
        _console.print(Text(INVALID_CONFIG_MESSAGE), soft_wrap=True)
        raise typer.Exit(code=0) from exc


def _execute(command: Command) -> None:
    settings = _load_settings_or_exit()

    with build_client() as http:
        backend = RedirectClient(settings, http)
        try:
            outcome = dispatch(command, backend)
        except ServerUnreachableError as exc:
            logger.debug("Aborting: %s", exc)
            _err_console.print(Text(UNREACHABLE_MESSAGE), soft_wrap=True)
            raise typer.Exit(code=1) from exc

    render_outcome(_console, outcome)


@app.command("new")
def new(
    link: str = typer.Argument(..., metavar="LINK", help="full link to redirect to"),
    short: str = typer.Argument(..., metavar="SHORT", help="short part after the URL"),
) -> None:
    """Adds a new redirect"""

    _execute(CreateRedirect(destination=link, short_name=short))


@app.command("list")
def list_() -> None:
    """Gets a list of all redirects"""

    _execute(ListRedirects())


@app.command("delete")
def delete(
    short: str = typer.Argument(..., metavar="SHORT", help="short part after the URL"),
) -> None:
    """Removes a redirect (alias: rm)"""

    _execute(DeleteRedirect(short_name=short))


app.command("rm", help="Removes a redirect (alias of delete)")(delete)


def run() -> None:
    app()
