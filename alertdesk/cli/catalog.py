"""Reference catalog commands for alertdesk CLI."""

from typing import Optional

import click
from rich.table import Table

from alertdesk import catalog
from alertdesk.cli.common import console


@click.command("reports")
@click.option("--search", "-s", "query", default="", help="Match report name or commodity.")
@click.option("--geography", type=click.Choice(catalog.report_geographies()), default=None,
              help="Only reports for this geography.")
@click.option("--commodity", type=click.Choice(catalog.report_commodities()), default=None,
              help="Only reports for this commodity.")
def list_reports(query: str, geography: Optional[str], commodity: Optional[str]) -> None:
    """Browse the report catalog.

    Use the IDs shown here with 'alertdesk create report NAME --report ID'.
    """
    reports = catalog.search_reports(query, geography=geography, commodity=commodity)
    if not reports:
        console.print("[dim]No reports match. Try adjusting your search or filters.[/dim]")
        return

    table = Table(title="Reports", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Geography")
    table.add_column("Commodity")
    table.add_column("Type", style="dim")

    for report in reports:
        table.add_row(report.id, report.name, report.geography, report.commodity, report.type)

    console.print(table)
    console.print(f"\n[dim]{len(reports)} of {len(catalog.AVAILABLE_REPORTS)} reports[/dim]")


@click.command("symbols")
def list_symbols() -> None:
    """List price symbols available for price alerts."""
    table = Table(title="Price Symbols", show_header=True, header_style="bold cyan")
    table.add_column("Symbol", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Commodity", style="dim")

    for symbol in catalog.PRICE_SYMBOLS:
        table.add_row(symbol.symbol, symbol.name, symbol.commodity)

    console.print(table)
