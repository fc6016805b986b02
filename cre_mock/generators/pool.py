"""Pre-generated value pools for fast data generation.

Replaces per-call Faker invocations with O(1) random.choice() lookups
from pre-populated pools.  The pools are also deliberately small for
location fields so that city/state filters on the API hit a useful
number of transactions.

Usage::

    pool = FakerPool(seed=42)
    name = pool.company()       # random.choice from 500 company names
    uid  = pool.uuid()          # UUID4 string
"""

from __future__ import annotations

import os
import random
import uuid as _uuid

from faker import Faker


class UUIDPool:
    """Batch-generated UUID4 strings.

    Without a seed the batch is read from ``os.urandom`` in one call.
    With a seed the bytes come from a private ``random.Random`` so that a
    seeded dataset gets the same ids on every run.

    Parameters
    ----------
    batch_size : int
        Number of UUIDs to generate per batch (default 4096).
    seed : int | None
        Seed for reproducible ids.
    """

    __slots__ = ("_batch_size", "_pool", "_index", "_rng")

    def __init__(self, batch_size: int = 4096, seed: int | None = None) -> None:
        self._batch_size = batch_size
        self._rng = random.Random(seed) if seed is not None else None
        self._pool: list[str] = []
        self._index = 0
        self._refill()

    def _refill(self) -> None:
        """Generate a new batch of UUIDs."""
        size = 16 * self._batch_size
        raw = self._rng.randbytes(size) if self._rng is not None else os.urandom(size)
        self._pool = [
            str(_uuid.UUID(bytes=raw[i : i + 16], version=4))
            for i in range(0, len(raw), 16)
        ]
        self._index = 0

    def next(self) -> str:
        """Return next UUID string, refilling pool when exhausted."""
        if self._index >= len(self._pool):
            self._refill()
        val = self._pool[self._index]
        self._index += 1
        return val


class FakerPool:
    """Pre-generated pools of Faker values for fast random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    # City and state pools stay small so location filters match something
    DEFAULT_SIZES: dict[str, int] = {
        "name": 2000,
        "company": 500,
        "city": 12,
        "state": 8,
        "street": 1000,
        "postcode": 500,
        "lender": 50,
    }

    LENDER_SUFFIXES = ["Bank", "Capital", "Financial", "Credit", "Lending Corp"]

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
            random.seed(seed)

        self._names: list[str] = [fake.name() for _ in range(sizes["name"])]
        self._companies: list[str] = [fake.company() for _ in range(sizes["company"])]
        self._cities: list[str] = _unique(fake.city, sizes["city"])
        self._states: list[str] = _unique(fake.state_abbr, sizes["state"])
        self._streets: list[str] = [fake.street_address() for _ in range(sizes["street"])]
        self._postcodes: list[str] = [fake.postcode() for _ in range(sizes["postcode"])]
        self._lenders: list[str] = [
            f"{fake.last_name()} {random.choice(self.LENDER_SUFFIXES)}"
            for _ in range(sizes["lender"])
        ]

        self._uuid_pool = UUIDPool(seed=seed)

    # --- Public accessors (O(1) random.choice) ---

    def uuid(self) -> str:
        """Return a unique UUID4 string."""
        return self._uuid_pool.next()

    def name(self) -> str:
        """Return a random full name."""
        return random.choice(self._names)

    def company(self) -> str:
        """Return a random company name."""
        return random.choice(self._companies)

    def city(self) -> str:
        """Return a random city name."""
        return random.choice(self._cities)

    def state(self) -> str:
        """Return a random state abbreviation."""
        return random.choice(self._states)

    def street(self) -> str:
        """Return a random street address (number and street name)."""
        return random.choice(self._streets)

    def postcode(self) -> str:
        """Return a random postal code."""
        return random.choice(self._postcodes)

    def lender(self) -> str:
        """Return a random lender name."""
        return random.choice(self._lenders)


def _unique(factory, count: int, max_attempts: int = 1000) -> list[str]:
    """Draw up to ``count`` distinct values from a Faker method."""
    values: list[str] = []
    for _ in range(max_attempts):
        if len(values) >= count:
            break
        value = factory()
        if value not in values:
            values.append(value)
    return values
