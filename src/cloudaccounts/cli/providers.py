# src/cloudaccounts/cli/providers.py
"""
Implements the `providers` commands of the cloudaccounts CLI.
"""

import asyncio
import json
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.exceptions import FetchError
from ..core.factory import get_account_service
from ..models.settings import ApplicationContext
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Resolve the cloud providers enabled for an application.", add_completion=False)


@app.command("list")
def list_providers(
    cloud_providers: Annotated[
        Optional[str],
        typer.Option(
            "--cloud-providers",
            help="Comma-separated providers declared by the application (e.g. 'aws,gce').",
        ),
    ] = None,
    available: Annotated[
        bool, typer.Option("--available", help="List every available provider, ignoring defaults.")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
):
    """
    List the providers enabled for an application.

    Without --cloud-providers the configured default providers apply.
    """
    service = get_account_service()
    application = ApplicationContext(attributes={"cloudProviders": cloud_providers}) if cloud_providers else None

    try:
        if available:
            result = asyncio.run(service.get_available_providers())
        else:
            result = asyncio.run(service.list_providers(application))
    except FetchError as e:
        logger.error(f"Failed to resolve providers: {e}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result))
    else:
        ConsoleReporter().report_providers(result)
