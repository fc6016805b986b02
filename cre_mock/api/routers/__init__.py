"""API routers."""

from cre_mock.api.routers import admin, transactions, trends

__all__ = ["admin", "transactions", "trends"]
