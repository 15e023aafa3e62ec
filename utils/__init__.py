"""
Shared helpers for the end-to-end suite: logging, data records and
test data generation.
"""
from . import logger, test_data_helper
from .models import Address, CartItem, Credentials, DateOfBirth, PaymentCard, User
from .test_data import TestData

__all__ = [
    "Address",
    "CartItem",
    "Credentials",
    "DateOfBirth",
    "PaymentCard",
    "TestData",
    "User",
    "logger",
    "test_data_helper",
]
