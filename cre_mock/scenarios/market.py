"""CRE market scenario: the full dataset served by the mock API."""

import logging
import random
from datetime import datetime

from cre_mock.config import GenerationConfig
from cre_mock.generators.address import CountryDistribution
from cre_mock.generators.cre import (
    BrokerGenerator,
    DocumentGenerator,
    PartyGenerator,
    PropertyGenerator,
    TransactionGenerator,
)
from cre_mock.generators.base import BaseGenerator
from cre_mock.store.cre import CreDataStore, Generation

logger = logging.getLogger(__name__)


class CreMarketScenario:
    """Generate a referentially valid CRE market.

    Independent entities (properties, parties, brokers) are generated
    first; each transaction then links to a random property, two distinct
    parties, one to three brokers and zero to four freshly generated
    documents.
    """

    MAX_BROKERS_PER_TRANSACTION = 3
    MAX_DOCUMENTS_PER_TRANSACTION = 4

    def __init__(
        self,
        num_properties: int = 200,
        num_parties: int = 400,
        num_brokers: int = 100,
        num_transactions: int = 1000,
        seed: int | None = None,
        country_distribution: CountryDistribution | None = None,
    ) -> None:
        """Initialize CRE market scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to generate.
        num_parties : int
            Number of buyer/seller parties to generate (at least 2).
        num_brokers : int
            Number of brokers to generate.
        num_transactions : int
            Number of transactions to generate.
        seed : int | None
            Random seed for reproducibility.
        country_distribution : CountryDistribution | None
            Countries of generated property addresses (default: USA only).
        """
        self.config = GenerationConfig(
            num_properties=num_properties,
            num_parties=num_parties,
            num_brokers=num_brokers,
            num_transactions=num_transactions,
        )
        self.config.validate()
        self.seed = seed
        self.country_distribution = country_distribution

    @classmethod
    def from_config(cls, config: GenerationConfig, seed: int | None = None) -> "CreMarketScenario":
        """Build a scenario from a :class:`GenerationConfig`."""
        return cls(
            num_properties=config.num_properties,
            num_parties=config.num_parties,
            num_brokers=config.num_brokers,
            num_transactions=config.num_transactions,
            seed=seed,
        )

    def generate(self, now: datetime | None = None) -> CreDataStore:
        """Generate all data for the scenario.

        Parameters
        ----------
        now : datetime | None
            Upper bound for ``updated_at`` timestamps (default: current time).

        Returns
        -------
        CreDataStore
            Store containing all generated data.
        """
        pool = BaseGenerator.shared_pool(self.seed)
        property_gen = PropertyGenerator(
            seed=self.seed, pool=pool, country_distribution=self.country_distribution
        )
        party_gen = PartyGenerator(seed=self.seed, pool=pool)
        broker_gen = BrokerGenerator(seed=self.seed, pool=pool)
        document_gen = DocumentGenerator(seed=self.seed, pool=pool)
        transaction_gen = TransactionGenerator(seed=self.seed, pool=pool)

        store = CreDataStore()
        for prop in property_gen.generate_batch(self.config.num_properties):
            store.add_property(prop)
        for party in party_gen.generate_batch(self.config.num_parties):
            store.add_party(party)
        for broker in broker_gen.generate_batch(self.config.num_brokers):
            store.add_broker(broker)

        property_ids = list(store.properties)
        party_ids = list(store.parties)
        broker_ids = list(store.brokers)
        max_brokers = min(self.MAX_BROKERS_PER_TRANSACTION, len(broker_ids))
        now = now or datetime.now()

        for _ in range(self.config.num_transactions):
            buyer_id, seller_id = random.sample(party_ids, 2)
            documents = list(
                document_gen.generate_for_transaction(self.MAX_DOCUMENTS_PER_TRANSACTION)
            )
            for document in documents:
                store.add_document(document)

            transaction = transaction_gen.generate(
                property_id=random.choice(property_ids),
                buyer_id=buyer_id,
                seller_id=seller_id,
                broker_ids=random.sample(broker_ids, random.randint(1, max_brokers)),
                document_ids=[d.document_id for d in documents],
                now=now,
            )
            store.add_transaction(transaction)

        summary = store.summary()
        logger.info(
            "Generated CRE market: %d properties, %d parties, %d brokers, "
            "%d documents, %d transactions",
            summary["properties"],
            summary["parties"],
            summary["brokers"],
            summary["documents"],
            summary["transactions"],
        )
        return store

    def generate_generation(self) -> Generation:
        """Generate the dataset and freeze it into a :class:`Generation`."""
        return self.generate().freeze()
