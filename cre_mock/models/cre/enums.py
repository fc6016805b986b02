"""Enumeration types for commercial real-estate entities."""

from enum import Enum


class TransactionType(str, Enum):
    LEASE = "lease"
    SUBLEASE = "sublease"
    GOING_CONCERN_SALE = "going_concern_sale"
    MORTGAGEE_SALE = "mortgagee_sale"
    STANDARD_SALE = "standard_sale"

    @property
    def is_lease(self) -> bool:
        """Whether the transaction carries lease terms."""
        return self in (TransactionType.LEASE, TransactionType.SUBLEASE)


class BuyerType(str, Enum):
    PRIVATE_EQUITY = "Private Equity"
    PUBLICLY_LISTED_COMPANY = "Publicly Listed Company"
    PRIVATE_BUYER = "Private Buyer"
    VENTURE_CAPITAL = "Venture Capital"
    REIT = "REIT"
    GOVERNMENT = "Government"
    INSTITUTIONAL_INVESTOR = "Institutional Investor"
    OTHER = "Other"


class PropertyType(str, Enum):
    OFFICE = "Office"
    RETAIL = "Retail"
    INDUSTRIAL = "Industrial"
    MULTIFAMILY = "Multifamily"
    LAND = "Land"
    HOSPITALITY = "Hospitality"
    SPECIAL_PURPOSE = "Special Purpose"
    MIXED_USE = "Mixed Use"


class BrokerRole(str, Enum):
    BUYER_AGENT = "buyer_agent"
    SELLER_AGENT = "seller_agent"
    DUAL_AGENT = "dual_agent"
    CONSULTANT = "consultant"
    OTHER = "other"
