"""Party and broker models."""

from dataclasses import dataclass

from cre_mock.models.cre.enums import BrokerRole, BuyerType


@dataclass(frozen=True)
class Party:
    """Buyer or seller in a transaction."""

    party_id: str
    name: str
    classification: BuyerType


@dataclass(frozen=True)
class Broker:
    """Broker involved in a transaction."""

    broker_id: str
    name: str
    agency: str
    role: BrokerRole
