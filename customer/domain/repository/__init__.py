"""Repository interfaces.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from customer.domain.repository.customer import CustomerRepository

__all__ = [
    "CustomerRepository",
]
