"""Address generation factory for property locations."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from faker import Faker

from cre_mock.generators.pool import FakerPool
from cre_mock.models.base import Address


@dataclass(frozen=True)
class CountryDistribution:
    """Weighted distribution of countries for address generation.

    Parameters
    ----------
    weights : dict[str, float]
        Mapping of country name (as exposed on the API) to weight.
        Weights are relative (do not need to sum to 1.0).
    """

    weights: dict[str, float] = field(default_factory=lambda: {"USA": 1.0})

    @classmethod
    def usa_only(cls) -> "CountryDistribution":
        """100% US addresses."""
        return cls(weights={"USA": 1.0})

    @classmethod
    def north_america(cls) -> "CountryDistribution":
        """Mostly US with some Canadian properties."""
        return cls(weights={"USA": 0.85, "Canada": 0.15})


# Mapping of country name -> Faker locale
LOCALE_MAP: dict[str, str] = {
    "USA": "en_US",
    "Canada": "en_CA",
    "United Kingdom": "en_GB",
    "Australia": "en_AU",
}


class AddressFactory:
    """Generate property addresses.

    US addresses are drawn from the shared ``FakerPool``; any other country
    in the distribution gets a dedicated locale-specific Faker instance.

    Parameters
    ----------
    pool : FakerPool
        Pre-generated value pool used for US addresses.
    distribution : CountryDistribution | None
        Country weight distribution. Defaults to ``usa_only()``.
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(
        self,
        pool: FakerPool,
        distribution: CountryDistribution | None = None,
        seed: int | None = None,
    ) -> None:
        self._pool = pool
        self._distribution = distribution or CountryDistribution.usa_only()
        self._countries = list(self._distribution.weights.keys())
        self._weights = list(self._distribution.weights.values())
        self._fakers: dict[str, Faker] = {}

        for country in self._countries:
            if country == "USA":
                continue
            faker_instance = Faker(LOCALE_MAP.get(country, "en_US"))
            if seed is not None:
                faker_instance.seed_instance(seed)
            self._fakers[country] = faker_instance

    def generate(self, country: str | None = None) -> Address:
        """Generate an address, optionally for a specific country.

        Parameters
        ----------
        country : str | None
            Country name. If ``None``, picks based on the configured
            distribution.

        Returns
        -------
        Address
            Generated address.
        """
        if country is None:
            country = random.choices(self._countries, weights=self._weights, k=1)[0]

        if country == "USA":
            return Address(
                street=self._pool.street(),
                city=self._pool.city(),
                state=self._pool.state(),
                postal_code=self._pool.postcode(),
                country="USA",
            )

        fake = self._fakers.get(country)
        if fake is None:
            fake = Faker(LOCALE_MAP.get(country, "en_US"))
            self._fakers[country] = fake
        return Address(
            street=fake.street_address(),
            city=fake.city(),
            state=_administrative_area(fake),
            postal_code=fake.postcode(),
            country=country,
        )


def _administrative_area(fake: Faker) -> str:
    """Best available state/province field for a locale."""
    for method in ("province_abbr", "state_abbr", "county", "state"):
        provider = getattr(fake, method, None)
        if provider is not None:
            return provider()
    return ""
