"""Serialization of models to the camelCase JSON shape used on the wire."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from cre_mock.models.cre import EnrichedTransaction

# Field names whose wire name is not the plain camelCase conversion
KEY_OVERRIDES: dict[str, str] = {
    "street": "streetAddress",
}


def to_camel(name: str) -> str:
    """Convert a snake_case field name to its camelCase wire name."""
    if name in KEY_OVERRIDES:
        return KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_dict(obj: Any) -> dict:
    """Convert a model (or plain dict) to a JSON-ready dictionary."""
    if isinstance(obj, EnrichedTransaction):
        return enriched_to_dict(obj)
    if is_dataclass(obj):
        return {to_camel(f.name): serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def enriched_to_dict(enriched: EnrichedTransaction) -> dict:
    """Flatten an enriched transaction: transaction fields plus embedded entities.

    Unresolved ``property``/``buyer``/``seller`` are emitted as ``null``.
    """
    result = to_dict(enriched.transaction)
    result["property"] = serialize_value(enriched.property)
    result["buyer"] = serialize_value(enriched.buyer)
    result["seller"] = serialize_value(enriched.seller)
    result["brokers"] = serialize_value(enriched.brokers)
    result["documents"] = serialize_value(enriched.documents)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Money is emitted as a number: integral amounts as ``int``, the rest as
    ``float``.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
