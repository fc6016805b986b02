"""Transaction listing and lookup endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from cre_mock.api.dependencies import get_query_service
from cre_mock.query.facade import QueryService, TransactionQuery
from cre_mock.sinks.serialization import enriched_to_dict, serialize_value

router = APIRouter(prefix="/v1/transactions", tags=["transactions"])


# ---------------------------------------------------------------------------
# GET /v1/transactions: filtered, sorted, paginated list
# ---------------------------------------------------------------------------

@router.get("")
def list_transactions(
    start_date: str | None = Query(default=None, alias="startDate", description="ISO date, inclusive"),
    end_date: str | None = Query(default=None, alias="endDate", description="ISO date, inclusive"),
    buyer_type: str | None = Query(default=None, alias="buyerType"),
    transaction_type: str | None = Query(default=None, alias="transactionType"),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    country: str | None = Query(default=None),
    state: str | None = Query(default=None),
    city: str | None = Query(default=None),
    limit: str = Query(default="20"),
    offset: str = Query(default="0"),
    sort_by: str = Query(default="transactionDate", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
    service: QueryService = Depends(get_query_service),
) -> dict[str, Any]:
    """Return one page of enriched transactions plus result metadata."""
    query = TransactionQuery.from_params(
        {
            "startDate": start_date,
            "endDate": end_date,
            "buyerType": buyer_type,
            "transactionType": transaction_type,
            "minPrice": min_price,
            "maxPrice": max_price,
            "country": country,
            "state": state,
            "city": city,
            "limit": limit,
            "offset": offset,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
    )
    page = service.list_transactions(query)

    return {
        "metadata": {
            "totalRecords": page.metadata.total_records,
            "limit": page.metadata.limit,
            "offset": page.metadata.offset,
            "lastUpdated": serialize_value(page.metadata.last_updated),
        },
        "data": [enriched_to_dict(t) for t in page.data],
    }


# ---------------------------------------------------------------------------
# GET /v1/transactions/{transaction_id}
# ---------------------------------------------------------------------------

@router.get("/{transaction_id}")
def get_transaction(
    transaction_id: str,
    service: QueryService = Depends(get_query_service),
) -> dict[str, Any]:
    """Return a single enriched transaction (404 ``NOT_FOUND`` if unknown)."""
    return enriched_to_dict(service.get_transaction(transaction_id))
