"""Alert management commands for alertdesk CLI.

Handles listing, showing, creating, editing, toggling, duplicating and
deleting alerts. This module is the view layer: it renders store state,
validates user input through ``AlertForm`` and calls the store.
"""

from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from alertdesk import catalog
from alertdesk.cli.common import (
    console,
    fail,
    get_store,
    print_load_error,
    run,
)
from alertdesk.forms import AlertForm
from alertdesk.models import (
    ALERT_TYPE_LABELS,
    ALERT_TYPES,
    DAY_NAMES,
    FREQUENCIES,
    FREQUENCY_LABELS,
    PRICE_CONDITION_LABELS,
    PRICE_CONDITIONS,
    Alert,
    is_news_alert,
    is_price_alert,
    is_publication_alert,
    is_report_alert,
    is_scheduled_alert,
)

TYPE_STYLES = {
    "report": "blue",
    "price": "green",
    "news": "magenta",
    "publication": "cyan",
    "scheduled": "yellow",
}


def config_options(func):
    """Attach the per-type config options shared by create and edit."""
    options = [
        click.option("--frequency", type=click.Choice(FREQUENCIES), default=None,
                     help="Delivery frequency."),
        click.option("--report", "report_ids", multiple=True,
                     type=click.Choice([r.id for r in catalog.AVAILABLE_REPORTS]),
                     help="Report ID to include (repeatable)."),
        click.option("--symbol", default=None,
                     type=click.Choice([s.symbol for s in catalog.PRICE_SYMBOLS], case_sensitive=False),
                     help="Price symbol code."),
        click.option("--condition", type=click.Choice(PRICE_CONDITIONS), default=None,
                     help="Price condition."),
        click.option("--threshold", default=None, help="Price threshold (percent for change_percent)."),
        click.option("--keywords", default=None, help="Comma-separated news keywords."),
        click.option("--topic", "topics", multiple=True, type=click.Choice(catalog.NEWS_TOPICS),
                     help="News topic (repeatable)."),
        click.option("--source", "sources", multiple=True, type=click.Choice(catalog.NEWS_SOURCES),
                     help="News source (repeatable)."),
        click.option("--publication", "publications", multiple=True,
                     type=click.Choice(catalog.PUBLICATIONS), help="Publication (repeatable)."),
        click.option("--time", "schedule_time", default=None, help="Digest time, HH:MM."),
        click.option("--day", "schedule_days", multiple=True, type=click.IntRange(0, 6),
                     help="Digest weekday, 0=Sunday (repeatable)."),
        click.option("--include", "included_alert_types", multiple=True,
                     type=click.Choice(ALERT_TYPES), help="Alert type in the digest (repeatable)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def apply_options(form: AlertForm, options: dict) -> None:
    """Copy the options the user actually gave onto the form."""
    for field in ("frequency", "condition", "threshold", "keywords", "schedule_time"):
        if options.get(field) is not None:
            setattr(form, field, options[field])
    if options.get("symbol") is not None:
        form.symbol = options["symbol"].upper()
    for field in ("report_ids", "topics", "sources", "publications",
                  "schedule_days", "included_alert_types"):
        if options.get(field):
            setattr(form, field, list(options[field]))


def describe_config(alert: Alert) -> list[tuple[str, str]]:
    """Label/value rows describing an alert's config."""
    config = alert.config
    rows = [("Frequency", FREQUENCY_LABELS[config.frequency])]

    if is_report_alert(alert):
        rows.append(("Reports", str(len(config.reports))))
        for report in config.reports:
            rows.append(("", f"{report.name} [dim]({report.geography} · {report.commodity})[/dim]"))
    elif is_price_alert(alert):
        suffix = "%" if config.condition == "change_percent" else ""
        rows.append(("Symbol", config.symbol))
        rows.append(("Name", config.symbol_name))
        rows.append(("Condition", PRICE_CONDITION_LABELS[config.condition]))
        rows.append(("Threshold", f"{config.threshold:g}{suffix}"))
        if config.current_price is not None:
            rows.append(("Current Price", f"${config.current_price:.2f}"))
    elif is_news_alert(alert):
        rows.append(("Keywords", escape(", ".join(config.keywords)) or "None"))
        if config.sources:
            rows.append(("Sources", escape(", ".join(config.sources))))
        if config.topics:
            rows.append(("Topics", escape(", ".join(config.topics))))
    elif is_publication_alert(alert):
        rows.append(("Publications", escape(", ".join(config.publications)) or "None selected"))
        if config.categories:
            rows.append(("Categories", ", ".join(config.categories)))
    elif is_scheduled_alert(alert):
        rows.append(("Time", config.schedule_time))
        rows.append(("Days", ", ".join(DAY_NAMES[d] for d in config.schedule_days)))
        rows.append((
            "Includes",
            ", ".join(ALERT_TYPE_LABELS[t] for t in config.included_alert_types) or "None",
        ))
    return rows


def render_alert(alert: Alert, title: str = "Alert", border_style: str = "cyan") -> Panel:
    status = "[green]● Active[/green]" if alert.is_active else "[dim]○ Inactive[/dim]"
    lines = [
        f"[bold]{escape(alert.name)}[/bold]",
        "",
        f"ID:        {alert.id}",
        f"Type:      [{TYPE_STYLES[alert.type]}]{ALERT_TYPE_LABELS[alert.type]}[/]",
        f"Status:    {status}",
        f"Created:   {alert.created_at:%Y-%m-%d %H:%M}",
        f"Updated:   {alert.updated_at:%Y-%m-%d %H:%M}",
        "",
    ]
    for label, value in describe_config(alert):
        heading = f"{label}:" if label else ""
        lines.append(f"{heading:<14} {value}")
    return Panel("\n".join(lines), title=f"[bold]{title}[/bold]", border_style=border_style)


@click.command("list")
@click.option("--search", "-s", "query", default="", help="Filter by name or type.")
@click.pass_context
def list_alerts(ctx: click.Context, query: str) -> None:
    """List alerts, newest first.

    \b
    Examples:
      alertdesk list                # All alerts
      alertdesk list --search opec  # Alerts whose name or type contains "opec"
    """
    store = get_store(ctx)

    async def _load():
        await store.load()
        store.set_search_query(query)
        return store.filtered_alerts

    alerts = run(_load())
    print_load_error(store)

    if not alerts:
        hint = "Try adjusting your search terms." if query.strip() else (
            "Use 'alertdesk create TYPE NAME' to create one."
        )
        console.print(Panel(
            f"[dim]No alerts found. {hint}[/dim]",
            title="[bold]Alerts[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Alerts", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Frequency")
    table.add_column("Updated", style="dim")
    table.add_column("Status", justify="center")

    for alert in alerts:
        table.add_row(
            alert.id,
            escape(alert.name),
            f"[{TYPE_STYLES[alert.type]}]{alert.type}[/]",
            FREQUENCY_LABELS[alert.config.frequency],
            alert.updated_at.strftime("%Y-%m-%d %H:%M"),
            "[green]●[/green]" if alert.is_active else "[dim]○[/dim]",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(alerts)} of {len(store.alerts)} alerts[/dim]")


@click.command("show")
@click.argument("alert_id")
@click.pass_context
def show_alert(ctx: click.Context, alert_id: str) -> None:
    """Show one alert and its configuration."""
    store = get_store(ctx)
    run(store.load())
    print_load_error(store)

    alert = store.get_by_id(alert_id)
    if alert is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return
    console.print(render_alert(alert, title="Alert Details"))


@click.command("create")
@click.argument("alert_type", metavar="TYPE", type=click.Choice(ALERT_TYPES))
@click.argument("name")
@config_options
@click.pass_context
def create_alert(ctx: click.Context, alert_type: str, name: str, **options) -> None:
    """Create an alert of TYPE named NAME.

    \b
    Examples:
      alertdesk create report "My Energy Docs" --report rep-005 --report rep-007
      alertdesk create price "Brent" --symbol PCAAS00 --condition above --threshold 80
      alertdesk create news "OPEC" --keywords "OPEC, production cuts" --topic "Oil & Gas"
      alertdesk create publication "Gas" --publication "Gas Daily" --frequency daily
      alertdesk create scheduled "Digest" --time 07:30 --day 1 --day 3 --include news
    """
    form = AlertForm()
    form.select_type(alert_type)
    form.name = name
    apply_options(form, options)

    error = form.next_step()
    if error:
        fail(error)

    try:
        draft = form.to_draft()
    except ValueError as e:
        fail(f"Invalid alert settings:\n\n{e}")

    store = get_store(ctx)

    async def _create():
        await store.load()
        return await store.add(draft)

    alert = run(_create())
    console.print(render_alert(alert, title="New Alert", border_style="green"))


@click.command("edit")
@click.argument("alert_id")
@click.option("--name", default=None, help="New alert name.")
@config_options
@click.pass_context
def edit_alert(ctx: click.Context, alert_id: str, name: Optional[str], **options) -> None:
    """Edit an alert's name and configuration.

    Only the options given are changed.
    """
    store = get_store(ctx)
    run(store.load())
    print_load_error(store)

    alert = store.get_by_id(alert_id)
    if alert is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return

    form = AlertForm.from_alert(alert)
    if name is not None:
        form.name = name
    apply_options(form, options)

    error = form.next_step()
    if error:
        fail(error)

    try:
        changes = form.changes()
    except ValueError as e:
        fail(f"Invalid alert settings:\n\n{e}")

    async def _update():
        await store.load()
        return await store.update(alert_id, **changes)

    try:
        updated = run(_update())
    except (TypeError, ValueError) as e:
        fail(f"Could not update alert:\n\n{e}")

    if updated is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return
    console.print(render_alert(updated, title="Alert Updated", border_style="green"))


@click.command("toggle")
@click.argument("alert_id")
@click.pass_context
def toggle_alert(ctx: click.Context, alert_id: str) -> None:
    """Activate or deactivate an alert."""
    store = get_store(ctx)

    async def _toggle():
        await store.load()
        return await store.toggle_active(alert_id)

    alert = run(_toggle())
    print_load_error(store)
    if alert is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return

    state = "[green]activated[/green]" if alert.is_active else "[dim]deactivated[/dim]"
    console.print(f"✓ {escape(alert.name)} ({alert.id}) {state}")


@click.command("duplicate")
@click.argument("alert_id")
@click.pass_context
def duplicate_alert(ctx: click.Context, alert_id: str) -> None:
    """Copy an alert under a new ID."""
    store = get_store(ctx)

    async def _duplicate():
        await store.load()
        return await store.duplicate(alert_id)

    clone = run(_duplicate())
    print_load_error(store)
    if clone is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return
    console.print(render_alert(clone, title="Duplicated Alert", border_style="green"))


@click.command("delete")
@click.argument("alert_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def delete_alert(ctx: click.Context, alert_id: str, yes: bool) -> None:
    """Delete an alert."""
    store = get_store(ctx)
    run(store.load())
    print_load_error(store)

    alert = store.get_by_id(alert_id)
    if alert is None:
        console.print(f"[yellow]Alert {alert_id} not found[/yellow]")
        return

    if not yes and not click.confirm(f"Delete alert '{alert.name}'?", default=False):
        console.print("[dim]Cancelled[/dim]")
        return

    async def _delete():
        await store.load()
        return await store.delete(alert_id)

    run(_delete())
    console.print(f"[green]✓ Deleted alert {alert_id} ({escape(alert.name)})[/green]")
