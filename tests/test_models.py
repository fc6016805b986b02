"""Tests for domain models."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from cre_mock.models.base import Address
from cre_mock.models.cre import (
    BrokerRole,
    BuyerType,
    EnrichedTransaction,
    Financing,
    HistoricalPricing,
    PropertyType,
    TransactionType,
)
from tests.conftest import make_property, make_transaction


class TestAddress:
    """Tests for Address model."""

    def test_default_country(self) -> None:
        address = Address(street="1 Main St", city="Metropolis", state="NY", postal_code="10001")
        assert address.country == "USA"

    def test_is_frozen(self) -> None:
        address = Address(street="1 Main St", city="Metropolis", state="NY", postal_code="10001")
        with pytest.raises(dataclasses.FrozenInstanceError):
            address.city = "Gotham"  # type: ignore[misc]


class TestEnums:
    """Wire values of the enumerations."""

    def test_transaction_type_values(self) -> None:
        assert [t.value for t in TransactionType] == [
            "lease",
            "sublease",
            "going_concern_sale",
            "mortgagee_sale",
            "standard_sale",
        ]

    def test_is_lease(self) -> None:
        assert TransactionType.LEASE.is_lease
        assert TransactionType.SUBLEASE.is_lease
        assert not TransactionType.MORTGAGEE_SALE.is_lease
        assert not TransactionType.STANDARD_SALE.is_lease
        assert not TransactionType.GOING_CONCERN_SALE.is_lease

    def test_buyer_type_values(self) -> None:
        assert BuyerType("REIT") is BuyerType.REIT
        assert BuyerType("Publicly Listed Company") is BuyerType.PUBLICLY_LISTED_COMPANY
        assert len(BuyerType) == 8

    def test_property_type_values(self) -> None:
        assert PropertyType.SPECIAL_PURPOSE.value == "Special Purpose"
        assert PropertyType.MIXED_USE.value == "Mixed Use"
        assert len(PropertyType) == 8

    def test_broker_roles(self) -> None:
        assert {r.value for r in BrokerRole} == {
            "buyer_agent",
            "seller_agent",
            "dual_agent",
            "consultant",
            "other",
        }

    def test_str_enum_compares_to_value(self) -> None:
        assert TransactionType.LEASE == "lease"


class TestFinancing:
    """Tests for Financing."""

    def test_ltv_rounds_to_two_decimals(self) -> None:
        assert Financing.ltv(Decimal("2000000"), Decimal("3000000")) == Decimal("0.67")

    def test_ltv_none_for_non_positive_price(self) -> None:
        assert Financing.ltv(Decimal("100"), Decimal("0")) is None

    def test_optional_fields_default_to_none(self) -> None:
        financing = Financing(loan_amount=Decimal("500000"), lender="First Bank", loan_type="CMBS")
        assert financing.interest_rate is None
        assert financing.loan_to_value_ratio is None


class TestTransaction:
    """Tests for Transaction and EnrichedTransaction."""

    def test_defaults(self) -> None:
        txn = make_transaction("txn-x")
        assert txn.lease_terms is None
        assert txn.mortgagee_conditions is None
        assert txn.financing is None
        assert txn.document_ids == ()
        assert txn.historical_pricing == ()

    def test_is_frozen(self) -> None:
        txn = make_transaction("txn-x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.price = Decimal("1")  # type: ignore[misc]

    def test_historical_pricing_entry(self) -> None:
        entry = HistoricalPricing(date=date(2010, 5, 1), price=Decimal("800000"), source="Appraisal")
        txn = make_transaction("txn-x", historical_pricing=(entry,))
        assert txn.historical_pricing[0].source == "Appraisal"

    def test_enriched_defaults(self) -> None:
        enriched = EnrichedTransaction(transaction=make_transaction("txn-x"))
        assert enriched.property is None
        assert enriched.buyer is None
        assert enriched.seller is None
        assert enriched.brokers == ()
        assert enriched.documents == ()

    def test_property_optional_fields(self) -> None:
        prop = make_property("prop-x")
        assert prop.year_built is None
        assert prop.description is None
