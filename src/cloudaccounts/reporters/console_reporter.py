# src/cloudaccounts/reporters/console_reporter.py
"""
A reporter that displays resolved accounts, zones and providers in formatted
tables in the console.
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from ..models.account import Account

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """
    Renders resolution results to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report_accounts(self, accounts: List[Account], provider: str | None = None):
        if not accounts:
            self.console.print("No accounts found.", style="yellow")
            return

        title = f"Accounts ({provider})" if provider else "Accounts"
        table = Table(title=title, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Provider", style="green")

        for account in accounts:
            table.add_row(account.name, account.type)

        self.console.print(table)

    def report_zones(self, provider: str, account_name: str, region_name: str, zones: List[str]):
        if not zones:
            self.console.print(
                f"No usable availability zones for {provider}/{account_name} in {region_name}.", style="yellow"
            )
            return

        table = Table(title=f"Availability Zones: {account_name} / {region_name}", header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Zone", style="cyan")

        for index, zone in enumerate(zones, start=1):
            table.add_row(str(index), zone)

        self.console.print(table)

    def report_providers(self, providers: List[str]):
        if not providers:
            self.console.print("No providers enabled.", style="yellow")
            return

        table = Table(title="Enabled Providers", header_style="bold magenta")
        table.add_column("Provider", style="green")
        for provider in providers:
            table.add_row(provider)

        self.console.print(table)
