# src/cloudaccounts/cli/main.py
"""
This module is the main entry point for the cloudaccounts CLI.

It aggregates all commands from the submodules (accounts, providers).
"""

import logging

import typer

from ..core.config import config
from . import accounts, providers

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="cloudaccounts",
    help="Resolve the cloud accounts, providers and availability zones a deployment may use.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of cloudaccounts.
    """
    if value:
        from .. import __version__

        typer.echo(f"cloudaccounts version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of cloudaccounts.
    """
    from .. import __version__

    typer.echo(f"cloudaccounts version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    cloudaccounts CLI main entry point.
    """
    pass


# Register command sub-apps
app.add_typer(accounts.app, name="accounts")
app.add_typer(providers.app, name="providers")


if __name__ == "__main__":
    app()
