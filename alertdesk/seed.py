"""Seed dataset adopted on first run, when nothing is stored yet."""

from alertdesk.catalog import AVAILABLE_REPORTS
from alertdesk.models import Alert

_SEED_DATA: list[dict] = [
    {
        "id": "alert-001",
        "name": "My Energy Docs",
        "type": "report",
        "isActive": True,
        "createdAt": "2024-01-15T10:00:00Z",
        "updatedAt": "2024-01-20T14:30:00Z",
        "config": {
            "frequency": "realtime",
            "reports": [report.model_dump() for report in AVAILABLE_REPORTS[:6]],
        },
    },
    {
        "id": "alert-002",
        "name": "US Northeast Power",
        "type": "price",
        "isActive": True,
        "createdAt": "2024-01-10T09:00:00Z",
        "updatedAt": "2024-01-18T11:00:00Z",
        "config": {
            "frequency": "realtime",
            "symbol": "AAGPL00",
            "symbolName": "US Northeast Power",
            "condition": "above",
            "threshold": 75.0,
            "currentPrice": 72.5,
        },
    },
    {
        "id": "alert-003",
        "name": "OPEC News",
        "type": "news",
        "isActive": True,
        "createdAt": "2024-01-08T08:00:00Z",
        "updatedAt": "2024-01-19T16:00:00Z",
        "config": {
            "frequency": "realtime",
            "keywords": ["OPEC", "oil production", "crude output"],
            "sources": ["Reuters", "Bloomberg", "S&P Global"],
            "topics": ["Energy", "Oil & Gas"],
        },
    },
    {
        "id": "alert-004",
        "name": "Gas and Power",
        "type": "publication",
        "isActive": True,
        "createdAt": "2024-01-05T07:00:00Z",
        "updatedAt": "2024-01-17T09:00:00Z",
        "config": {
            "frequency": "daily",
            "publications": ["Gas Daily", "Megawatt Daily", "Power Markets Week"],
            "categories": ["Natural Gas", "Power"],
        },
    },
    {
        "id": "alert-005",
        "name": "My Daily Digest",
        "type": "scheduled",
        "isActive": True,
        "createdAt": "2024-01-01T06:00:00Z",
        "updatedAt": "2024-01-16T08:00:00Z",
        "config": {
            "frequency": "daily",
            "scheduleTime": "08:00",
            "scheduleDays": [1, 2, 3, 4, 5],
            "includedAlertTypes": ["report", "price", "news"],
        },
    },
    {
        "id": "alert-006",
        "name": "OPEC News",
        "type": "news",
        "isActive": True,
        "createdAt": "2024-01-12T10:00:00Z",
        "updatedAt": "2024-01-21T12:00:00Z",
        "config": {
            "frequency": "realtime",
            "keywords": ["OPEC+", "Saudi Arabia", "production cuts"],
            "sources": ["S&P Global Platts"],
        },
    },
    {
        "id": "alert-007",
        "name": "Gas and Power",
        "type": "price",
        "isActive": True,
        "createdAt": "2024-01-14T11:00:00Z",
        "updatedAt": "2024-01-22T15:00:00Z",
        "config": {
            "frequency": "realtime",
            "symbol": "AAGNG00",
            "symbolName": "Henry Hub Natural Gas",
            "condition": "change_percent",
            "threshold": 5.0,
            "currentPrice": 2.85,
        },
    },
    {
        "id": "alert-008",
        "name": "East Texas Agua Dulce Hub",
        "type": "price",
        "isActive": True,
        "createdAt": "2024-01-13T09:30:00Z",
        "updatedAt": "2024-01-23T10:00:00Z",
        "config": {
            "frequency": "realtime",
            "symbol": "AETDH00",
            "symbolName": "East Texas Agua Dulce Hub",
            "condition": "below",
            "threshold": 2.50,
            "currentPrice": 2.65,
        },
    },
]


def seed_alerts() -> list[Alert]:
    """Return a fresh copy of the seed dataset."""
    return [Alert.model_validate(data) for data in _SEED_DATA]
