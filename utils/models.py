"""
Test Data Models

Value records passed from test data generation into page objects.
Created fresh per test and discarded at test end.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class DateOfBirth:
    """Date of birth as the signup form's dropdown values."""

    day: str
    month: str
    year: str


@dataclass
class Address:
    """Address block of the account information form."""

    first_name: str
    last_name: str
    address1: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    company: Optional[str] = None
    address2: Optional[str] = None


@dataclass
class User:
    """A user account to register."""

    name: str
    email: str
    password: str
    title: str  # "Mr" or "Mrs"
    date_of_birth: DateOfBirth
    address: Address
    newsletter: bool = True
    special_offers: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PaymentCard:
    """Card details entered on the payment page."""

    name_on_card: str
    card_number: str
    cvc: str
    expiry_month: str
    expiry_year: str


@dataclass
class Credentials:
    """Email/password pair for the login form."""

    email: str
    password: str


@dataclass
class CartItem:
    """One row of the cart table, as displayed."""

    name: str
    price: str
    quantity: str
    total: str
