"""Commercial real-estate domain models."""

from cre_mock.models.cre.document import Document
from cre_mock.models.cre.enums import (
    BrokerRole,
    BuyerType,
    PropertyType,
    TransactionType,
)
from cre_mock.models.cre.party import Broker, Party
from cre_mock.models.cre.property import Property
from cre_mock.models.cre.transaction import (
    EnrichedTransaction,
    Financing,
    HistoricalPricing,
    Transaction,
)

__all__ = [
    "Broker",
    "BrokerRole",
    "BuyerType",
    "Document",
    "EnrichedTransaction",
    "Financing",
    "HistoricalPricing",
    "Party",
    "Property",
    "PropertyType",
    "Transaction",
    "TransactionType",
]
