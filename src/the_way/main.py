from pathlib import Path
from typing import Annotated, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from typer import Argument, Exit, Option, Typer

from .config import ConfigManager
from .errors import TheWayError
from .location import ENV_CONFIG_PATH
from .logging_config import setup_logging

app = Typer(no_args_is_help=True)
config_app = Typer(
    help=f"Manage the configuration file. Set ${ENV_CONFIG_PATH} to use a non-default file.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


def get_manager() -> ConfigManager:
    return ConfigManager()


def report_error(error: TheWayError) -> None:
    console = Console(stderr=True)
    body = Text(error.message, style="bold")
    cause = error.__cause__
    if cause is not None and str(cause) not in error.message:
        body.append(f"\n\nCaused by: {cause}")
    if error.suggestion:
        body.append("\n\nSuggestion: ", style="bold cyan")
        body.append(error.suggestion)
    console.print(
        Panel(body, title="Error", title_align="left", border_style="bold red")
    )


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        Option("--log-level", help="Logging level (debug, info, warning, error)."),
    ] = None,
) -> None:
    """Personal code snippet manager."""
    setup_logging(level=log_level)


@config_app.command("default")
def config_default(
    file: Annotated[
        Optional[Path],
        Argument(help="File to save the configuration to. Prints to stdout if omitted."),
    ] = None,
) -> None:
    """Prints / writes the default configuration options."""
    try:
        get_manager().default_config(file)
    except TheWayError as exc:
        report_error(exc)
        raise Exit(code=1)


@config_app.command("get")
def config_get() -> None:
    """Prints location of currently set configuration file."""
    try:
        get_manager().print_config_location()
    except TheWayError as exc:
        report_error(exc)
        raise Exit(code=1)
