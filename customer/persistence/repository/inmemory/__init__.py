"""In-memory repository implementations for testing."""

from .customer import InMemoryCustomerRepository

__all__ = [
    "InMemoryCustomerRepository",
]
