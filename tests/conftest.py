"""Pytest configuration and fixtures."""

from datetime import date, datetime, timezone
from decimal import Decimal
from types import MappingProxyType

import pytest

from cre_mock.models.base import Address
from cre_mock.models.cre import (
    Broker,
    BrokerRole,
    BuyerType,
    Document,
    Party,
    Property,
    PropertyType,
    Transaction,
    TransactionType,
)
from cre_mock.scenarios.market import CreMarketScenario
from cre_mock.store.cre import Generation

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def small_scenario(seed: int) -> CreMarketScenario:
    """A seeded scenario small enough for fast tests."""
    return CreMarketScenario(
        num_properties=20,
        num_parties=30,
        num_brokers=10,
        num_transactions=120,
        seed=seed,
    )


@pytest.fixture
def generated(small_scenario: CreMarketScenario) -> Generation:
    """Frozen generation produced by the small scenario."""
    return small_scenario.generate(now=FIXED_NOW).freeze()


def make_property(property_id: str, **overrides) -> Property:
    """Property with sensible defaults."""
    values = {
        "property_id": property_id,
        "address": Address(
            street="100 Main St",
            city="Metropolis",
            state="NY",
            postal_code="10001",
        ),
        "property_type": PropertyType.OFFICE,
        "square_footage": 10_000,
        "zoning": "C-1",
    }
    values.update(overrides)
    return Property(**values)


def make_transaction(transaction_id: str, **overrides) -> Transaction:
    """Standard-sale transaction with sensible defaults."""
    values = {
        "transaction_id": transaction_id,
        "transaction_date": date(2020, 1, 15),
        "transaction_type": TransactionType.STANDARD_SALE,
        "price": Decimal("1000000"),
        "currency": "USD",
        "property_id": "prop-1",
        "buyer_id": "party-a",
        "seller_id": "party-b",
        "broker_ids": ("broker-1",),
        "created_at": datetime(2019, 12, 1, 9, 0, 0),
        "updated_at": datetime(2020, 2, 1, 9, 0, 0),
    }
    values.update(overrides)
    return Transaction(**values)


@pytest.fixture
def sample_generation() -> Generation:
    """Hand-built generation, including one transaction with dangling references.

    ========  ==========  ==================  =========  =========  ======  =====  ========
    id        date        type                price      property   buyer   sqft   city
    ========  ==========  ==================  =========  =========  ======  =====  ========
    txn-1     2020-01-15  lease               1,000,000  prop-1     a REIT  10000  Metropolis
    txn-2     2021-06-01  standard_sale       5,000,000  prop-2     b PE     5000  Gotham
    txn-3     2019-03-10  mortgagee_sale        250,000  prop-3     c Gov   50000  Toronto
    txn-4     2022-11-30  going_concern_sale    750,000  (missing)  (miss.)     -  -
    txn-5     2020-01-15  sublease            1,000,000  prop-1     a REIT  10000  Metropolis
    ========  ==========  ==================  =========  =========  ======  =====  ========
    """
    properties = {
        "prop-1": make_property("prop-1"),
        "prop-2": make_property(
            "prop-2",
            address=Address(street="5 Wayne Ave", city="Gotham", state="NJ", postal_code="07001"),
            property_type=PropertyType.RETAIL,
            square_footage=5_000,
        ),
        "prop-3": make_property(
            "prop-3",
            address=Address(
                street="1 Bay St", city="Toronto", state="ON", postal_code="M5J", country="Canada"
            ),
            property_type=PropertyType.INDUSTRIAL,
            square_footage=50_000,
        ),
    }
    parties = {
        "party-a": Party("party-a", "Alpha Realty Trust", BuyerType.REIT),
        "party-b": Party("party-b", "Beta Capital", BuyerType.PRIVATE_EQUITY),
        "party-c": Party("party-c", "Gotham County", BuyerType.GOVERNMENT),
    }
    brokers = {
        "broker-1": Broker("broker-1", "Jane Broker", "Doe Realty", BrokerRole.BUYER_AGENT),
        "broker-2": Broker("broker-2", "John Agent", "Roe Commercial", BrokerRole.SELLER_AGENT),
    }
    documents = {
        "doc-1": Document("doc-1", "http://example.com/docs/doc-1.pdf", "Deed", "Deed Document Ref doc-1"),
    }
    transactions = (
        make_transaction(
            "txn-1",
            transaction_type=TransactionType.LEASE,
            lease_terms="Term: 5 years, Rate: $42.00/sqft/yr",
            buyer_id="party-a",
            seller_id="party-b",
            document_ids=("doc-1",),
            created_at=datetime(2019, 12, 1, 9, 0, 0),
            updated_at=datetime(2020, 3, 1, 9, 0, 0),
        ),
        make_transaction(
            "txn-2",
            transaction_date=date(2021, 6, 1),
            price=Decimal("5000000"),
            property_id="prop-2",
            buyer_id="party-b",
            seller_id="party-a",
            broker_ids=("broker-1", "broker-2"),
            created_at=datetime(2021, 1, 1, 9, 0, 0),
            updated_at=datetime(2021, 7, 1, 9, 0, 0),
        ),
        make_transaction(
            "txn-3",
            transaction_date=date(2019, 3, 10),
            transaction_type=TransactionType.MORTGAGEE_SALE,
            mortgagee_conditions="Sold As-Is via foreclosure auction.",
            price=Decimal("250000"),
            property_id="prop-3",
            buyer_id="party-c",
            seller_id="party-a",
            created_at=datetime(2018, 5, 1, 9, 0, 0),
            updated_at=datetime(2019, 4, 1, 9, 0, 0),
        ),
        make_transaction(
            "txn-4",
            transaction_date=date(2022, 11, 30),
            transaction_type=TransactionType.GOING_CONCERN_SALE,
            price=Decimal("750000"),
            property_id="missing-prop",
            buyer_id="missing-party",
            seller_id="party-a",
            broker_ids=("missing-broker", "broker-2"),
            document_ids=("missing-doc", "doc-1"),
            created_at=datetime(2022, 1, 1, 9, 0, 0),
            updated_at=datetime(2023, 1, 1, 9, 0, 0),
        ),
        make_transaction(
            "txn-5",
            transaction_type=TransactionType.SUBLEASE,
            lease_terms="Term: 2 years, Rate: $30.00/sqft/yr",
            buyer_id="party-a",
            seller_id="party-c",
            created_at=datetime(2019, 11, 1, 9, 0, 0),
            updated_at=datetime(2020, 5, 1, 9, 0, 0),
        ),
    )
    return Generation(
        properties=MappingProxyType(properties),
        parties=MappingProxyType(parties),
        brokers=MappingProxyType(brokers),
        documents=MappingProxyType(documents),
        transactions=transactions,
        generated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
