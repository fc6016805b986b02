"""Property generator."""

from __future__ import annotations

import random
from typing import Iterator

from cre_mock.generators.address import AddressFactory, CountryDistribution
from cre_mock.generators.base import BaseGenerator
from cre_mock.generators.pool import FakerPool
from cre_mock.models.cre import Property, PropertyType


class PropertyGenerator(BaseGenerator):
    """Generate synthetic commercial properties."""

    PROPERTY_TYPES = list(PropertyType)
    ZONING_CODES = ["C-1", "C-2", "C-3", "I-1", "I-2", "R-M", "PUD"]

    # Square footage range by property type
    SQFT_RANGES = {
        PropertyType.OFFICE: (2_000, 500_000),
        PropertyType.RETAIL: (1_000, 250_000),
        PropertyType.INDUSTRIAL: (10_000, 500_000),
        PropertyType.MULTIFAMILY: (5_000, 400_000),
        PropertyType.LAND: (1_000, 500_000),
        PropertyType.HOSPITALITY: (5_000, 300_000),
        PropertyType.SPECIAL_PURPOSE: (1_000, 150_000),
        PropertyType.MIXED_USE: (5_000, 400_000),
    }

    YEAR_BUILT_PROBABILITY = 0.8
    DESCRIPTION_PROBABILITY = 0.6

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
        country_distribution: CountryDistribution | None = None,
    ) -> None:
        super().__init__(seed, pool=pool)
        self._address_factory = AddressFactory(
            self.pool,
            distribution=country_distribution,
            seed=seed,
        )

    def generate(self) -> Property:
        """Generate a single property.

        Returns
        -------
        Property
            Generated property.
        """
        property_id = self.pool.uuid()
        property_type = random.choice(self.PROPERTY_TYPES)
        low, high = self.SQFT_RANGES[property_type]

        year_built = None
        if property_type != PropertyType.LAND and random.random() < self.YEAR_BUILT_PROBABILITY:
            year_built = random.randint(1960, 2023)

        description = None
        if random.random() < self.DESCRIPTION_PROBABILITY:
            description = f"{property_type.value} property. {self.fake.sentence(nb_words=10)}"

        return Property(
            property_id=property_id,
            address=self._address_factory.generate(),
            property_type=property_type,
            square_footage=random.randint(low, high),
            zoning=random.choice(self.ZONING_CODES),
            year_built=year_built,
            description=description,
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate()
