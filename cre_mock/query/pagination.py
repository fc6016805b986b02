"""Offset/limit pagination."""

import re
from typing import Sequence, TypeVar

from cre_mock.exceptions import InvalidPaginationError

T = TypeVar("T")

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0

# Optional sign and ASCII digits at the start; trailing text is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def validate_pagination(limit: int, offset: int) -> None:
    """Raise :class:`InvalidPaginationError` unless ``limit > 0`` and ``offset >= 0``."""
    if limit <= 0 or offset < 0:
        raise InvalidPaginationError("Invalid limit or offset parameters.")


def parse_pagination(limit: str | None, offset: str | None) -> tuple[int, int]:
    """Parse raw ``limit``/``offset`` query values.

    Only the leading integer of each value counts, so ``"5abc"`` is 5 and
    ``"1.5"`` is 1. Missing or empty values fall back to the defaults
    (20 and 0).

    Raises
    ------
    InvalidPaginationError
        If a value does not start with an integer or fails
        :func:`validate_pagination`.
    """
    parsed_limit = _leading_int(limit, DEFAULT_LIMIT)
    parsed_offset = _leading_int(offset, DEFAULT_OFFSET)
    validate_pagination(parsed_limit, parsed_offset)
    return parsed_limit, parsed_offset


def _leading_int(raw: str | None, default: int) -> int:
    if raw is None or raw == "":
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        raise InvalidPaginationError("Invalid limit or offset parameters.")
    return int(match.group(1))


def paginate(items: Sequence[T], limit: int, offset: int) -> list[T]:
    """Return at most ``limit`` items starting at ``offset``.

    Empty when ``offset`` is past the end of ``items``.
    """
    validate_pagination(limit, offset)
    return list(items[offset : offset + limit])
