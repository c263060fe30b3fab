"""Domain model entities."""

from customer.domain.model.audited import AuditedEntity
from customer.domain.model.customer import Customer

__all__ = [
    "AuditedEntity",
    "Customer",
]
