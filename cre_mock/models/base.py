"""Base models shared across domains."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address of a property.

    - street: street number and name
    - state: state/province abbreviation or name
    - postal_code: ZIP or postcode in country-specific format
    - country: country name as shown to API clients (default: ``"USA"``)
    """

    street: str
    city: str
    state: str
    postal_code: str
    country: str = "USA"
