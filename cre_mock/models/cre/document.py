"""Document model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """Supporting document attached to a transaction (deed, appraisal, ...)."""

    document_id: str
    url: str
    type: str
    description: str | None = None
