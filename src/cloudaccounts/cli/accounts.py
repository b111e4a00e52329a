# src/cloudaccounts/cli/accounts.py
"""
Implements the `accounts` commands of the cloudaccounts CLI.
"""

import asyncio
import json
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.exceptions import FetchError
from ..core.factory import get_account_service
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Inspect accounts and their availability zones.", add_completion=False)


@app.command("list")
def list_accounts(
    provider: Annotated[Optional[str], typer.Option(help="Only list accounts of this provider type.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
):
    """
    List the accounts known to the credentials service.
    """
    service = get_account_service()
    try:
        accounts = asyncio.run(service.list_accounts(provider))
    except FetchError as e:
        logger.error(f"Failed to list accounts: {e}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([{"name": a.name, "type": a.type} for a in accounts], indent=2))
    else:
        ConsoleReporter().report_accounts(accounts, provider=provider)


@app.command("zones")
def zones(
    provider: Annotated[str, typer.Argument(help="Provider type, e.g. 'aws'.")],
    account: Annotated[str, typer.Argument(help="Account name.")],
    region: Annotated[str, typer.Argument(help="Region name.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
):
    """
    Show the preferred availability zones that are actually available for an account and region.
    """
    service = get_account_service()
    result = asyncio.run(service.get_availability_zones(provider, account, region))

    if as_json:
        typer.echo(json.dumps(result))
    else:
        ConsoleReporter().report_zones(provider, account, region, result)
