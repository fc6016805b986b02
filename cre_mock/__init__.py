"""Mock REST API for synthetic commercial real-estate transaction data."""

__version__ = "0.1.0"
