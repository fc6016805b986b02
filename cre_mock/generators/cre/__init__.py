"""Commercial real-estate generators."""

from cre_mock.generators.cre.document import DocumentGenerator
from cre_mock.generators.cre.party import BrokerGenerator, PartyGenerator
from cre_mock.generators.cre.property import PropertyGenerator
from cre_mock.generators.cre.transaction import TransactionGenerator

__all__ = [
    "BrokerGenerator",
    "DocumentGenerator",
    "PartyGenerator",
    "PropertyGenerator",
    "TransactionGenerator",
]
