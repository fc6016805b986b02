"""Predicate filtering over the transactions of a generation."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Mapping

from cre_mock.models.cre import EnrichedTransaction, Transaction
from cre_mock.query.enrich import enrich_transaction
from cre_mock.store.cre import Generation

# Year, or year and month, with no day
_REDUCED_DATE = re.compile(r"([0-9]{4})(?:-([0-9]{2}))?")

# Query parameter name -> FilterOptions attribute
PARAM_NAMES: dict[str, str] = {
    "startDate": "start_date",
    "endDate": "end_date",
    "transactionType": "transaction_type",
    "buyerType": "buyer_type",
    "minPrice": "min_price",
    "maxPrice": "max_price",
    "country": "country",
    "state": "state",
    "city": "city",
}


@dataclass(frozen=True)
class FilterOptions:
    """Optional transaction filters, combined with AND.

    A field left at ``None`` imposes no constraint.

    Attributes
    ----------
    start_date, end_date : date | None
        Inclusive bounds on the transaction date.
    transaction_type : str | None
        Exact match on the transaction type value (e.g. ``"lease"``).
    buyer_type : str | None
        Exact match on the buyer party's classification (e.g. ``"REIT"``).
        Transactions whose buyer does not resolve never match.
    min_price, max_price : Decimal | None
        Inclusive bounds on the price. Inverted bounds match nothing.
    country, state, city : str | None
        Exact match on the resolved property address. Transactions whose
        property does not resolve never match.
    invalid : tuple[str, ...]
        Query parameters whose value could not be parsed. A non-empty
        tuple makes the whole filter match nothing, the way a malformed
        date or number compares false against every transaction.
    """

    start_date: date | None = None
    end_date: date | None = None
    transaction_type: str | None = None
    buyer_type: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    invalid: tuple[str, ...] = ()

    @classmethod
    def from_params(cls, params: Mapping[str, str | None]) -> FilterOptions:
        """Build options from raw query parameters (camelCase names).

        Missing and empty values are treated as absent.
        """
        values: dict[str, object] = {}
        invalid: list[str] = []
        for param, attr in PARAM_NAMES.items():
            raw = params.get(param)
            if raw is None or raw == "":
                continue
            if attr in ("start_date", "end_date"):
                parsed = parse_date(raw)
            elif attr in ("min_price", "max_price"):
                parsed = _parse_decimal(raw)
            else:
                parsed = raw
            if parsed is None:
                invalid.append(param)
            else:
                values[attr] = parsed
        return cls(**values, invalid=tuple(invalid))

    @property
    def has_location(self) -> bool:
        """Whether any address predicate is set."""
        return any(v is not None for v in (self.country, self.state, self.city))

    @property
    def is_empty(self) -> bool:
        """Whether no predicate is set at all."""
        return all(getattr(self, f.name) in (None, ()) for f in fields(self))


def filter_transactions(
    transactions: list[Transaction] | tuple[Transaction, ...],
    options: FilterOptions,
    generation: Generation,
) -> list[Transaction]:
    """Return the transactions that satisfy every option, in input order.

    Cheap predicates on the transaction itself (and the buyer lookup) run
    first. Address predicates need the resolved property, so only the
    surviving candidates are enriched for them; the enriched copies are
    discarded and the raw transactions are returned.
    """
    if options.invalid:
        return []

    candidates = [t for t in transactions if _matches_direct(t, options, generation)]

    if not options.has_location:
        return candidates

    enriched = [enrich_transaction(t, generation) for t in candidates]
    return [e.transaction for e in enriched if _matches_location(e, options)]


def _matches_direct(transaction: Transaction, options: FilterOptions, generation: Generation) -> bool:
    if options.start_date is not None and transaction.transaction_date < options.start_date:
        return False
    if options.end_date is not None and transaction.transaction_date > options.end_date:
        return False
    if (
        options.transaction_type is not None
        and transaction.transaction_type.value != options.transaction_type
    ):
        return False
    if options.min_price is not None and transaction.price < options.min_price:
        return False
    if options.max_price is not None and transaction.price > options.max_price:
        return False
    if options.buyer_type is not None:
        buyer = generation.parties.get(transaction.buyer_id)
        if buyer is None or buyer.classification.value != options.buyer_type:
            return False
    return True


def _matches_location(enriched: EnrichedTransaction, options: FilterOptions) -> bool:
    if enriched.property is None:
        return False
    address = enriched.property.address
    if options.country is not None and address.country != options.country:
        return False
    if options.state is not None and address.state != options.state:
        return False
    if options.city is not None and address.city != options.city:
        return False
    return True


def parse_date(raw: str) -> date | None:
    """Parse an ISO date or datetime, returning its date.

    Reduced forms ``YYYY`` and ``YYYY-MM`` mean the first day of that year
    or month. Returns ``None`` when ``raw`` is not a date.
    """
    match = _REDUCED_DATE.fullmatch(raw.strip())
    if match is not None:
        year, month = match.groups()
        try:
            return date(int(year), int(month or 1), 1)
        except ValueError:
            return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def _parse_decimal(raw: str) -> Decimal | None:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None
