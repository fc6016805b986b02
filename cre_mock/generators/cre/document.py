"""Document generator."""

from __future__ import annotations

import random
from typing import Iterator

from cre_mock.generators.base import BaseGenerator
from cre_mock.models.cre import Document


class DocumentGenerator(BaseGenerator):
    """Generate documents attached to transactions."""

    DOCUMENT_TYPES = ["Deed", "Listing Flyer", "Appraisal", "Environmental Report", "Lease Agreement"]
    BASE_URL = "http://example.com/docs"

    def generate(self, document_type: str | None = None) -> Document:
        """Generate a single document.

        Parameters
        ----------
        document_type : str | None
            Document type. Random when ``None``.

        Returns
        -------
        Document
            Generated document.
        """
        document_id = self.pool.uuid()
        document_type = document_type or random.choice(self.DOCUMENT_TYPES)
        return Document(
            document_id=document_id,
            url=f"{self.BASE_URL}/{document_id}.pdf",
            type=document_type,
            description=f"{document_type} Document Ref {document_id}",
        )

    def generate_for_transaction(self, max_documents: int = 4) -> Iterator[Document]:
        """Generate between 0 and ``max_documents`` documents for one transaction."""
        for _ in range(random.randint(0, max_documents)):
            yield self.generate()
