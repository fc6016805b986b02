"""HTTP surface of the CRE mock API."""

from cre_mock.api.app import create_app

__all__ = ["create_app"]
