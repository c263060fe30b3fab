"""Customer domain service."""

from typing import Optional

import logfire

from customer.config import AuditSettings
from customer.domain.error import NotFoundError
from customer.domain.model import Customer
from customer.domain.repository import CustomerRepository
from customer.domain.value import CustomerId

from .base import Service


class CustomerService(Service):
    """Domain service driving the customer lifecycle.

    unpersisted -> persisted -> updated (any number of times) -> deleted
    """

    def __init__(
        self, customer_repository: CustomerRepository, audit_settings: AuditSettings
    ) -> None:
        """Initialize customer service.

        Args:
            customer_repository: Customer repository
            audit_settings: Supplies the fallback actor for audit fields
        """
        self.customer_repository = customer_repository
        self.audit_settings = audit_settings

    def _actor(self, actor: Optional[str]) -> str:
        return actor if actor is not None else self.audit_settings.system_actor

    async def register(
        self, customer: Customer, actor: Optional[str] = None
    ) -> Customer:
        """Persist a new customer.

        Args:
            customer: Customer to store
            actor: Who creates it (defaults to the system actor)

        Returns:
            Stored customer with id and audit fields set
        """
        actor = self._actor(actor)
        with logfire.span("customer_service.register", actor=actor):
            saved = await self.customer_repository.save(customer, actor)
            logfire.info("Customer registered", customer_id=saved.id, actor=actor)
            return saved

    async def get(self, customer_id: CustomerId) -> Customer:
        """Get a customer by ID.

        Raises:
            NotFoundError: If the customer does not exist
        """
        with logfire.span("customer_service.get", customer_id=customer_id):
            customer = await self.customer_repository.find_by_id(customer_id)
            if customer is None:
                logfire.warn("Customer not found", customer_id=customer_id)
                raise NotFoundError("Customer", str(customer_id))
            return customer

    async def list_all(self) -> list[Customer]:
        """Get every customer."""
        with logfire.span("customer_service.list_all"):
            customers = await self.customer_repository.find_all()
            logfire.info("Customers retrieved", count=len(customers))
            return customers

    async def modify(
        self, customer: Customer, actor: Optional[str] = None
    ) -> Customer:
        """Store changes to an existing customer.

        Args:
            customer: Customer carrying the new values
            actor: Who modifies it (defaults to the system actor)

        Returns:
            Stored customer with refreshed update stamp

        Raises:
            ValidationError: If the customer was never saved
            NotFoundError: If the customer does not exist
        """
        actor = self._actor(actor)
        with logfire.span(
            "customer_service.modify", customer_id=customer.id, actor=actor
        ):
            updated = await self.customer_repository.update(customer, actor)
            logfire.info("Customer updated", customer_id=updated.id, actor=actor)
            return updated

    async def remove(self, customer_id: CustomerId) -> None:
        """Delete a customer."""
        with logfire.span("customer_service.remove", customer_id=customer_id):
            await self.customer_repository.delete(customer_id)
            logfire.info("Customer removed", customer_id=customer_id)
