"""CRE data store with referential integrity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

from cre_mock.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from cre_mock.models.cre import (
    Broker,
    Document,
    Party,
    Property,
    Transaction,
    TransactionType,
)


@dataclass
class CreDataStore:
    """Mutable in-memory store used while a dataset is being generated.

    Every ``add_*`` call checks the references of the record being added,
    so a store that was filled without errors is referentially valid.
    Call :meth:`freeze` to obtain the read-only :class:`Generation` that
    the query engine works on.
    """

    properties: dict[str, Property] = field(default_factory=dict)
    parties: dict[str, Party] = field(default_factory=dict)
    brokers: dict[str, Broker] = field(default_factory=dict)
    documents: dict[str, Document] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)

    def add_property(self, prop: Property) -> None:
        """Add a property to the store."""
        self.properties[prop.property_id] = prop

    def add_party(self, party: Party) -> None:
        """Add a buyer/seller party to the store."""
        self.parties[party.party_id] = party

    def add_broker(self, broker: Broker) -> None:
        """Add a broker to the store."""
        self.brokers[broker.broker_id] = broker

    def add_document(self, document: Document) -> None:
        """Add a document to the store."""
        self.documents[document.document_id] = document

    def add_transaction(self, transaction: Transaction) -> None:
        """Add a transaction to the store.

        Raises
        ------
        ReferentialIntegrityError
            If the property, either party, a broker or a document is unknown.
        InvalidEntityStateError
            If buyer and seller are the same party, or the lease terms /
            mortgagee conditions do not match the transaction type.
        """
        if transaction.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {transaction.property_id} not found")
        for party_id in (transaction.buyer_id, transaction.seller_id):
            if party_id not in self.parties:
                raise ReferentialIntegrityError(f"Party {party_id} not found")
        for broker_id in transaction.broker_ids:
            if broker_id not in self.brokers:
                raise ReferentialIntegrityError(f"Broker {broker_id} not found")
        for document_id in transaction.document_ids:
            if document_id not in self.documents:
                raise ReferentialIntegrityError(f"Document {document_id} not found")

        if transaction.buyer_id == transaction.seller_id:
            raise InvalidEntityStateError(
                f"Transaction {transaction.transaction_id} has the same buyer and seller"
            )
        if (transaction.lease_terms is not None) != transaction.transaction_type.is_lease:
            raise InvalidEntityStateError(
                f"Transaction {transaction.transaction_id}: lease terms must be set "
                "exactly for lease and sublease transactions"
            )
        is_mortgagee_sale = transaction.transaction_type == TransactionType.MORTGAGEE_SALE
        if (transaction.mortgagee_conditions is not None) != is_mortgagee_sale:
            raise InvalidEntityStateError(
                f"Transaction {transaction.transaction_id}: mortgagee conditions must be set "
                "exactly for mortgagee sales"
            )

        self.transactions.append(transaction)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "parties": len(self.parties),
            "brokers": len(self.brokers),
            "documents": len(self.documents),
            "transactions": len(self.transactions),
        }

    def freeze(self, generated_at: datetime | None = None) -> "Generation":
        """Snapshot the store into an immutable :class:`Generation`."""
        return Generation(
            properties=MappingProxyType(dict(self.properties)),
            parties=MappingProxyType(dict(self.parties)),
            brokers=MappingProxyType(dict(self.brokers)),
            documents=MappingProxyType(dict(self.documents)),
            transactions=tuple(self.transactions),
            generated_at=generated_at or datetime.now(timezone.utc),
        )


@dataclass(frozen=True)
class Generation:
    """One complete, internally consistent snapshot of the dataset.

    Instances are never modified; a reset produces a new one.
    """

    properties: Mapping[str, Property]
    parties: Mapping[str, Party]
    brokers: Mapping[str, Broker]
    documents: Mapping[str, Document]
    transactions: tuple[Transaction, ...]
    generated_at: datetime
    transaction_index: Mapping[str, Transaction] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = MappingProxyType({t.transaction_id: t for t in self.transactions})
        object.__setattr__(self, "transaction_index", index)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Look up a transaction by id.

        Raises
        ------
        EntityNotFoundError
            If no transaction has this id in the generation.
        """
        try:
            return self.transaction_index[transaction_id]
        except KeyError:
            raise EntityNotFoundError(
                f"Transaction with ID '{transaction_id}' not found."
            ) from None

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "parties": len(self.parties),
            "brokers": len(self.brokers),
            "documents": len(self.documents),
            "transactions": len(self.transactions),
        }
