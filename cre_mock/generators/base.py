"""Base generator class and the seeding rules shared by all generators."""

from __future__ import annotations

from abc import ABC

from faker import Faker

from cre_mock.generators.pool import FakerPool


class BaseGenerator(ABC):
    """Base class for all data generators.

    Seeding works at two levels. The :class:`FakerPool` owns the global
    ``random`` state: building a pool with a seed reseeds ``random`` once,
    and every generator sharing that pool then draws from one continuous
    sequence. Each generator also gets its own Faker instance for the
    free-text values the pool does not cover, seeded with the same seed.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    pool : FakerPool | None
        Pool shared with the other generators of the same dataset (see
        :meth:`shared_pool`). A generator built without one creates and
        seeds a private pool.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pool: FakerPool | None = None,
    ) -> None:
        self.seed = seed
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
        self.pool = pool if pool is not None else self.shared_pool(seed, locale)

    @staticmethod
    def shared_pool(seed: int | None = None, locale: str = "en_US") -> FakerPool:
        """Build the pool every generator of one dataset should share.

        With a seed this resets ``random``, so call it once per dataset,
        before any generator draws values.
        """
        return FakerPool(locale=locale, seed=seed)
