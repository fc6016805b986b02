"""Domain models for the CRE mock dataset."""

from cre_mock.models.base import Address

__all__ = ["Address"]
