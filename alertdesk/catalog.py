"""Static reference data used when building alert configs."""

from typing import Iterable, Optional

from alertdesk.models import PriceSymbol, Report

AVAILABLE_REPORTS: tuple[Report, ...] = (
    Report(
        id="rep-001",
        name="Analytics Year-End Report",
        geography="Global",
        commodity="Multi-commodity",
        type="Analytics Report",
    ),
    Report(
        id="rep-002",
        name="Australia Coal Data",
        geography="Asia Pacific",
        commodity="Coal",
        type="Market Data",
    ),
    Report(
        id="rep-003",
        name="Basic Market Model: Gulf Demand",
        geography="North America",
        commodity="Oil",
        type="Market Model",
    ),
    Report(
        id="rep-004",
        name="Canadian Observer History",
        geography="North America",
        commodity="Natural Gas",
        type="Market Report",
    ),
    Report(
        id="rep-005",
        name="Megawatt Daily",
        geography="North America",
        commodity="Power",
        type="Market Report",
    ),
    Report(
        id="rep-006",
        name="Power Sales Analysis",
        geography="North America",
        commodity="Power",
        type="Analytics Report",
    ),
    Report(
        id="rep-007",
        name="Gas Daily",
        geography="North America",
        commodity="Natural Gas",
        type="Market Report",
    ),
    Report(
        id="rep-008",
        name="Inside FERC",
        geography="North America",
        commodity="Power",
        type="Market Report",
    ),
    Report(
        id="rep-009",
        name="European Gas Markets",
        geography="Europe",
        commodity="Natural Gas",
        type="Market Report",
    ),
    Report(
        id="rep-010",
        name="LNG Daily",
        geography="Global",
        commodity="LNG",
        type="Market Report",
    ),
    Report(
        id="rep-011",
        name="Crude Oil Marketwire",
        geography="Global",
        commodity="Oil",
        type="Market Report",
    ),
    Report(
        id="rep-012",
        name="Metals Daily",
        geography="Global",
        commodity="Metals",
        type="Market Report",
    ),
)

PRICE_SYMBOLS: tuple[PriceSymbol, ...] = (
    PriceSymbol(symbol="AAGPL00", name="US Northeast Power", commodity="Power"),
    PriceSymbol(symbol="AAGNG00", name="Henry Hub Natural Gas", commodity="Natural Gas"),
    PriceSymbol(symbol="PCAAS00", name="Brent Crude", commodity="Oil"),
    PriceSymbol(symbol="PCAAC00", name="WTI Crude", commodity="Oil"),
    PriceSymbol(symbol="MTAAU00", name="Gold Spot", commodity="Metals"),
    PriceSymbol(symbol="MTAAG00", name="Silver Spot", commodity="Metals"),
    PriceSymbol(symbol="AAGNB00", name="NBP Natural Gas", commodity="Natural Gas"),
    PriceSymbol(symbol="AETDH00", name="East Texas Agua Dulce Hub", commodity="Natural Gas"),
)

NEWS_TOPICS: tuple[str, ...] = (
    "Oil & Gas",
    "Power & Renewables",
    "Metals & Mining",
    "Petrochemicals",
    "Agriculture",
    "Shipping",
    "Carbon & ESG",
    "Economics",
    "Geopolitics",
)

NEWS_SOURCES: tuple[str, ...] = (
    "S&P Global Platts",
    "S&P Global Market Intelligence",
    "Reuters",
    "Bloomberg",
    "Financial Times",
    "Wall Street Journal",
)

PUBLICATIONS: tuple[str, ...] = (
    "Gas Daily",
    "Megawatt Daily",
    "Power Markets Week",
    "Oil Daily",
    "European Gas Markets",
    "LNG Daily",
    "Metals Weekly",
    "Petrochemical Alert",
)


def get_report(report_id: str) -> Optional[Report]:
    """Look up a catalog report by ID."""
    for report in AVAILABLE_REPORTS:
        if report.id == report_id:
            return report
    return None


def get_reports(report_ids: Iterable[str]) -> list[Report]:
    """Return the catalog reports whose IDs are selected, in catalog order.

    Unknown IDs are ignored.
    """
    selected = set(report_ids)
    return [report for report in AVAILABLE_REPORTS if report.id in selected]


def get_price_symbol(symbol: str) -> Optional[PriceSymbol]:
    """Look up a price symbol by code (case-insensitive)."""
    code = symbol.strip().upper()
    for price_symbol in PRICE_SYMBOLS:
        if price_symbol.symbol == code:
            return price_symbol
    return None


def search_reports(
    query: str = "",
    geography: Optional[str] = None,
    commodity: Optional[str] = None,
) -> list[Report]:
    """Filter the report catalog.

    Args:
        query: Substring matched case-insensitively against name or commodity.
        geography: Exact geography to keep, or None for all.
        commodity: Exact commodity to keep, or None for all.

    Returns:
        Matching reports in catalog order.
    """
    needle = query.strip().lower()
    results = []
    for report in AVAILABLE_REPORTS:
        if needle and needle not in report.name.lower() and needle not in report.commodity.lower():
            continue
        if geography and report.geography != geography:
            continue
        if commodity and report.commodity != commodity:
            continue
        results.append(report)
    return results


def report_geographies() -> list[str]:
    return sorted({report.geography for report in AVAILABLE_REPORTS})


def report_commodities() -> list[str]:
    return sorted({report.commodity for report in AVAILABLE_REPORTS})
