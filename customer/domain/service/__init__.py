"""Domain services."""

from .base import Service
from .customer_service import CustomerService

__all__ = [
    "Service",
    "CustomerService",
]
