"""Illustrative market trend statistics.

The numbers are random and never derived from the dataset; the endpoint
exists so clients can exercise the response shape.
"""

import random
from datetime import datetime, timezone
from typing import Any, Mapping

from cre_mock.query.filters import parse_date

DEFAULT_METRICS = "totalSalesVolume,averagePricePerSqft,transactionCount"
YEARS_BACK = 2


def build_trends(
    params: Mapping[str, str],
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Build a mock ``/v1/trends`` response.

    One interval per year from two years ago up to the current year,
    skipping years outside ``startDate``/``endDate``. Only the metrics named
    in the comma-separated ``metrics`` parameter are included.

    Parameters
    ----------
    params : Mapping[str, str]
        Raw query parameters; echoed back under ``metadata.filters``.
    now : datetime | None
        Reference time (defaults to the current UTC time).
    rng : random.Random | None
        Random source (defaults to a new unseeded ``random.Random``).
    """
    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()
    metrics = set((params.get("metrics") or DEFAULT_METRICS).split(","))
    start_year = _year_of(params.get("startDate"))
    end_year = _year_of(params.get("endDate"))

    data = []
    for year in range(now.year - YEARS_BACK, now.year + 1):
        if start_year is not None and year < start_year:
            continue
        if end_year is not None and year > end_year:
            continue

        interval: dict[str, Any] = {"interval": str(year)}
        if "totalSalesVolume" in metrics:
            interval["totalSalesVolume"] = rng.randrange(100_000_000, 600_000_000)
        if "averagePricePerSqft" in metrics:
            interval["averagePricePerSqft"] = round(rng.uniform(200, 500), 2)
        if "transactionCount" in metrics:
            interval["transactionCount"] = rng.randrange(50, 200)
        if "leaseRateAverage" in metrics:
            interval["leaseRateAverage"] = round(rng.uniform(20, 60), 2)
        if "buyerTypeDistribution" in metrics:
            interval["buyerTypeDistribution"] = {
                "Private Equity": rng.randrange(0, 50),
                "REIT": rng.randrange(0, 30),
                "Private Buyer": rng.randrange(0, 70),
            }
        data.append(interval)

    return {
        "metadata": {"filters": dict(params), "lastUpdated": now.isoformat()},
        "data": data,
    }


def _year_of(raw: str | None) -> int | None:
    """Year of an ISO date string, ``None`` when absent or unparseable."""
    if not raw:
        return None
    parsed = parse_date(raw)
    return parsed.year if parsed is not None else None
