"""Customer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from customer.domain.model import Customer
from customer.domain.value import CustomerId


class CustomerRepository(ABC):
    """Repository for Customer records.

    Implementations own identity assignment and audit stamping: the
    customer object itself never fills in its id or audit fields.
    """

    @abstractmethod
    async def save(self, customer: Customer, actor: str) -> Customer:
        """Persist a customer.

        A customer without an id is inserted: it receives a new id and
        ``created_at``/``created_by`` plus ``updated_at``/``updated_by`` are
        stamped with the current time and ``actor``. A customer that already
        has an id is updated, see :meth:`update`.

        Args:
            customer: Customer to persist
            actor: Who performs the change

        Returns:
            The stored customer
        """
        pass

    @abstractmethod
    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        """Find a customer by ID.

        Args:
            customer_id: Customer identifier

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Customer]:
        """Return every customer ordered by id."""
        pass

    @abstractmethod
    async def update(self, customer: Customer, actor: str) -> Customer:
        """Overwrite a stored customer.

        The stored ``id``, ``created_at`` and ``created_by`` are kept whatever
        the passed object holds; ``updated_at``/``updated_by`` are refreshed.

        Args:
            customer: Customer carrying the new values
            actor: Who performs the change

        Returns:
            The stored customer

        Raises:
            ValidationError: If the customer was never saved
            NotFoundError: If no customer has this id
        """
        pass

    @abstractmethod
    async def delete(self, customer_id: CustomerId) -> None:
        """Delete a customer. Unknown ids are ignored.

        Args:
            customer_id: Customer identifier
        """
        pass
