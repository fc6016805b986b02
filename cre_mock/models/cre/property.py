"""Property model for commercial real estate."""

from dataclasses import dataclass

from cre_mock.models.base import Address
from cre_mock.models.cre.enums import PropertyType


@dataclass(frozen=True)
class Property:
    """Commercial property that transactions refer to."""

    property_id: str
    address: Address
    property_type: PropertyType
    square_footage: int
    zoning: str  # Municipal zoning code, e.g. C-2
    year_built: int | None = None
    description: str | None = None
