"""Transaction model for commercial real estate."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from cre_mock.models.cre.document import Document
from cre_mock.models.cre.enums import TransactionType
from cre_mock.models.cre.party import Broker, Party
from cre_mock.models.cre.property import Property


@dataclass(frozen=True)
class Financing:
    """Debt financing of a transaction."""

    loan_amount: Decimal
    lender: str
    loan_type: str  # CMBS, Portfolio, Bridge, Construction
    interest_rate: Decimal | None = None  # Annual percentage, e.g. 6.25
    loan_to_value_ratio: Decimal | None = None

    @staticmethod
    def ltv(loan_amount: Decimal, price: Decimal) -> Decimal | None:
        """Loan-to-value ratio rounded to 2 decimals, ``None`` if price is not positive."""
        if price <= 0:
            return None
        return (loan_amount / price).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class HistoricalPricing:
    """Earlier price point recorded for the same property."""

    date: date
    price: Decimal
    source: str  # Previous Sale, Appraisal, Tax Assessment


@dataclass(frozen=True)
class Transaction:
    """CRE transaction as held in the store (related entities by id only)."""

    transaction_id: str
    transaction_date: date
    transaction_type: TransactionType
    price: Decimal
    currency: str
    property_id: str
    buyer_id: str
    seller_id: str
    broker_ids: tuple[str, ...]
    created_at: datetime
    updated_at: datetime

    # Present only for lease/sublease
    lease_terms: str | None = None
    # Present only for mortgagee sales
    mortgagee_conditions: str | None = None

    financing: Financing | None = None
    document_ids: tuple[str, ...] = ()
    historical_pricing: tuple[HistoricalPricing, ...] = ()


@dataclass(frozen=True)
class EnrichedTransaction:
    """Transaction with its foreign keys resolved for output.

    ``property``, ``buyer`` and ``seller`` are ``None`` when the id does not
    resolve in the generation the transaction was enriched against.
    """

    transaction: Transaction
    property: Property | None = None
    buyer: Party | None = None
    seller: Party | None = None
    brokers: tuple[Broker, ...] = field(default_factory=tuple)
    documents: tuple[Document, ...] = field(default_factory=tuple)
