"""Domain value objects."""

from customer.domain.value.identifiers import CustomerId

__all__ = [
    "CustomerId",
]
