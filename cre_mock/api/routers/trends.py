"""Mock market trend statistics."""

from typing import Any

from fastapi import APIRouter, Request

from cre_mock.trends import build_trends

router = APIRouter(prefix="/v1/trends", tags=["trends"])


@router.get("")
def get_trends(request: Request) -> dict[str, Any]:
    """Yearly illustrative statistics.

    Accepts ``startDate``, ``endDate``, ``transactionType``, ``country``,
    ``state``, ``city``, ``aggregationInterval`` and ``metrics``; only the
    date range and metric list shape the output.
    """
    return build_trends(dict(request.query_params))
