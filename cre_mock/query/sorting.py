"""Ordering of transaction lists by a closed set of sort keys."""

from __future__ import annotations

import locale
from enum import Enum
from typing import Any, Callable

from cre_mock.models.cre import Transaction
from cre_mock.store.cre import Generation


class SortField(str, Enum):
    TRANSACTION_DATE = "transactionDate"
    PRICE = "price"
    BUYER_TYPE = "buyerType"
    PROPERTY_TYPE = "propertyType"
    SQUARE_FOOTAGE = "squareFootage"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @classmethod
    def parse(cls, value: str | None) -> SortField:
        """Map a ``sortBy`` value to a field; anything unknown sorts by transaction date."""
        try:
            return cls(value)
        except ValueError:
            return cls.TRANSACTION_DATE


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> SortOrder:
        """Map a ``sortOrder`` value; anything but ``asc``/``desc`` is descending."""
        try:
            return cls(value)
        except ValueError:
            return cls.DESC


# A sort key is (has_value, value). Missing values get (False, <zero>) so
# they compare lower than every present value.
SortKey = tuple[bool, Any]
KeyFunction = Callable[[Transaction, Generation], SortKey]


def _text(value: str | None) -> SortKey:
    if value is None:
        return (False, "")
    return (True, locale.strxfrm(value))


def _number(value: Any) -> SortKey:
    if value is None:
        return (False, 0)
    return (True, value)


def _buyer_type(t: Transaction, g: Generation) -> SortKey:
    buyer = g.parties.get(t.buyer_id)
    return _text(buyer.classification.value if buyer else None)


def _property_type(t: Transaction, g: Generation) -> SortKey:
    prop = g.properties.get(t.property_id)
    return _text(prop.property_type.value if prop else None)


def _square_footage(t: Transaction, g: Generation) -> SortKey:
    prop = g.properties.get(t.property_id)
    return _number(prop.square_footage if prop else None)


KEY_FUNCTIONS: dict[SortField, KeyFunction] = {
    SortField.TRANSACTION_DATE: lambda t, g: (True, t.transaction_date.toordinal()),
    SortField.PRICE: lambda t, g: (True, t.price),
    SortField.BUYER_TYPE: _buyer_type,
    SortField.PROPERTY_TYPE: _property_type,
    SortField.SQUARE_FOOTAGE: _square_footage,
    SortField.CREATED_AT: lambda t, g: (True, t.created_at.timestamp()),
    SortField.UPDATED_AT: lambda t, g: (True, t.updated_at.timestamp()),
}


def sort_key(transaction: Transaction, field: SortField, generation: Generation) -> SortKey:
    """Comparable key of ``transaction`` for ``field``."""
    return KEY_FUNCTIONS[field](transaction, generation)


def sort_transactions(
    transactions: list[Transaction] | tuple[Transaction, ...],
    field: SortField,
    order: SortOrder,
    generation: Generation,
) -> list[Transaction]:
    """Return a new list ordered by ``field``.

    Strings compare with the current locale's collation, dates and
    timestamps by their numeric value. A buyer or property that does not
    resolve counts as the lowest value. The relative order of transactions
    with equal keys is unspecified.
    """
    key_function = KEY_FUNCTIONS[field]
    return sorted(
        transactions,
        key=lambda t: key_function(t, generation),
        reverse=order == SortOrder.DESC,
    )
