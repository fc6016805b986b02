"""Filter -> sort -> paginate -> enrich pipeline behind the API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping

from cre_mock.models.cre import EnrichedTransaction
from cre_mock.query.enrich import enrich_page, enrich_transaction
from cre_mock.query.filters import FilterOptions, filter_transactions
from cre_mock.query.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    paginate,
    parse_pagination,
    validate_pagination,
)
from cre_mock.query.sorting import SortField, SortOrder, sort_transactions
from cre_mock.store.handle import StoreHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionQuery:
    """Everything ``GET /v1/transactions`` can ask for."""

    filters: FilterOptions = field(default_factory=FilterOptions)
    sort_by: SortField = SortField.TRANSACTION_DATE
    sort_order: SortOrder = SortOrder.DESC
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> TransactionQuery:
        """Build a query from raw query parameters.

        Raises
        ------
        InvalidPaginationError
            If ``limit`` or ``offset`` is not an integer, ``limit <= 0`` or
            ``offset < 0``.
        """
        limit, offset = parse_pagination(params.get("limit"), params.get("offset"))
        return cls(
            filters=FilterOptions.from_params(params),
            sort_by=SortField.parse(params.get("sortBy")),
            sort_order=SortOrder.parse(params.get("sortOrder")),
            limit=limit,
            offset=offset,
        )


@dataclass(frozen=True)
class PageMetadata:
    total_records: int
    limit: int
    offset: int
    last_updated: datetime


@dataclass(frozen=True)
class TransactionPage:
    metadata: PageMetadata
    data: list[EnrichedTransaction]


class QueryService:
    """Runs transaction queries against the current generation.

    Each call reads the generation from the handle once, so a concurrent
    reset never mixes two datasets inside one response.
    """

    def __init__(self, handle: StoreHandle) -> None:
        self.handle = handle

    def list_transactions(self, query: TransactionQuery) -> TransactionPage:
        """Filter, sort and paginate transactions; enrich only the returned page."""
        validate_pagination(query.limit, query.offset)
        generation = self.handle.snapshot()

        filtered = filter_transactions(generation.transactions, query.filters, generation)
        ordered = sort_transactions(filtered, query.sort_by, query.sort_order, generation)
        page = paginate(ordered, query.limit, query.offset)

        logger.debug(
            "Transaction query matched %d of %d, returning %d",
            len(filtered),
            len(generation.transactions),
            len(page),
        )

        return TransactionPage(
            metadata=PageMetadata(
                total_records=len(filtered),
                limit=query.limit,
                offset=query.offset,
                last_updated=datetime.now(timezone.utc),
            ),
            data=enrich_page(page, generation),
        )

    def get_transaction(self, transaction_id: str) -> EnrichedTransaction:
        """Return one enriched transaction.

        Raises
        ------
        EntityNotFoundError
            If the id is unknown in the current generation.
        """
        generation = self.handle.snapshot()
        return enrich_transaction(generation.get_transaction(transaction_id), generation)

    def reset(self) -> dict[str, int]:
        """Regenerate the dataset and return the new entity counts.

        Raises
        ------
        RegenerationError
            If generation fails; the previous dataset stays in place.
        """
        return self.handle.regenerate().summary()
