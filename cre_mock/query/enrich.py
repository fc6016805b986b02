"""Resolve a transaction's foreign keys into embedded entities."""

from cre_mock.models.cre import EnrichedTransaction, Transaction
from cre_mock.store.cre import Generation


def enrich_transaction(transaction: Transaction, generation: Generation) -> EnrichedTransaction:
    """Embed the property, parties, brokers and documents of a transaction.

    Ids that do not resolve in ``generation`` are dropped: property, buyer
    and seller become ``None`` and missing brokers/documents are skipped
    while the remaining ones keep their order. Neither the transaction nor
    the generation is modified.
    """
    return EnrichedTransaction(
        transaction=transaction,
        property=generation.properties.get(transaction.property_id),
        buyer=generation.parties.get(transaction.buyer_id),
        seller=generation.parties.get(transaction.seller_id),
        brokers=tuple(
            generation.brokers[broker_id]
            for broker_id in transaction.broker_ids
            if broker_id in generation.brokers
        ),
        documents=tuple(
            generation.documents[document_id]
            for document_id in transaction.document_ids
            if document_id in generation.documents
        ),
    )


def enrich_page(transactions: list[Transaction], generation: Generation) -> list[EnrichedTransaction]:
    """Enrich every transaction of a page."""
    return [enrich_transaction(t, generation) for t in transactions]
