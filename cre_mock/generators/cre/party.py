"""Party and broker generators."""

from __future__ import annotations

import random
from typing import Iterator

from cre_mock.generators.base import BaseGenerator
from cre_mock.models.cre import Broker, BrokerRole, BuyerType, Party


class PartyGenerator(BaseGenerator):
    """Generate buyers and sellers."""

    CLASSIFICATIONS = list(BuyerType)
    # Private buyers and PE funds dominate CRE deal flow
    CLASSIFICATION_WEIGHTS = [0.20, 0.10, 0.22, 0.05, 0.13, 0.05, 0.15, 0.10]

    def generate(self) -> Party:
        """Generate a single party."""
        classification = random.choices(
            self.CLASSIFICATIONS, weights=self.CLASSIFICATION_WEIGHTS, k=1
        )[0]

        if classification == BuyerType.PRIVATE_BUYER:
            name = self.pool.name()
        elif classification == BuyerType.GOVERNMENT:
            name = f"{self.pool.city()} {random.choice(['County', 'City', 'Port Authority'])}"
        elif classification == BuyerType.REIT:
            name = f"{self.pool.company()} Realty Trust"
        else:
            name = self.pool.company()

        return Party(
            party_id=self.pool.uuid(),
            name=name,
            classification=classification,
        )

    def generate_batch(self, count: int) -> Iterator[Party]:
        """Generate multiple parties."""
        for _ in range(count):
            yield self.generate()


class BrokerGenerator(BaseGenerator):
    """Generate brokers."""

    ROLES = list(BrokerRole)
    AGENCY_SUFFIXES = ["Realty", "Commercial", "Partners", "Advisors", "Real Estate Group"]

    def generate(self) -> Broker:
        """Generate a single broker."""
        return Broker(
            broker_id=self.pool.uuid(),
            name=self.pool.name(),
            agency=f"{self.fake.last_name()} {random.choice(self.AGENCY_SUFFIXES)}",
            role=random.choice(self.ROLES),
        )

    def generate_batch(self, count: int) -> Iterator[Broker]:
        """Generate multiple brokers."""
        for _ in range(count):
            yield self.generate()
