"""In-memory implementation of Customer repository for testing."""

from copy import deepcopy
from datetime import datetime
from itertools import count
from typing import Optional

from customer.domain.error import NotFoundError, ValidationError
from customer.domain.model import Customer
from customer.domain.repository import CustomerRepository
from customer.domain.value import CustomerId
from customer.persistence.audit import Clock, stamp_created, stamp_updated


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository for testing.

    Ids come from a counter starting at 1, like a database identity column.
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        """Initialize empty repository."""
        self._customers: dict[CustomerId, Customer] = {}
        self._ids = count(1)
        self.clock = clock

    async def save(self, customer: Customer, actor: str) -> Customer:
        """Insert a new customer or update an existing one."""
        if customer.id is not None:
            return await self.update(customer, actor)

        new_id = CustomerId(next(self._ids))
        stamped = stamp_created(
            customer.model_copy(update={"id": new_id}), actor, self.clock()
        )
        self._customers[new_id] = stamped
        return deepcopy(stamped)

    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        """Find a customer by ID."""
        customer = self._customers.get(customer_id)
        return deepcopy(customer) if customer else None

    async def find_all(self) -> list[Customer]:
        """Return every customer ordered by id."""
        return [deepcopy(self._customers[key]) for key in sorted(self._customers)]

    async def update(self, customer: Customer, actor: str) -> Customer:
        """Overwrite a stored customer."""
        if customer.id is None:
            raise ValidationError("Cannot update a customer that has not been saved")

        stored = self._customers.get(customer.id)
        if stored is None:
            raise NotFoundError("Customer", str(customer.id))

        stamped = stamp_updated(customer, stored, actor, self.clock())
        self._customers[customer.id] = stamped
        return deepcopy(stamped)

    async def delete(self, customer_id: CustomerId) -> None:
        """Delete a customer."""
        self._customers.pop(customer_id, None)
