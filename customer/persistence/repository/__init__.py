"""PostgreSQL repository implementations."""

from customer.persistence.repository.customer import PostgresCustomerRepository

__all__ = [
    "PostgresCustomerRepository",
]
