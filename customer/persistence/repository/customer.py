"""PostgreSQL implementation of Customer repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from customer.domain.error import NotFoundError, ValidationError
from customer.domain.model import Customer
from customer.domain.repository import CustomerRepository
from customer.domain.value import CustomerId
from customer.persistence.audit import (
    WRITE_ONCE_FIELDS,
    Clock,
    stamp_created,
    stamp_updated,
)
from customer.persistence.mappers import customer_to_dict, row_to_customer
from customer.persistence.tables import customers_table


class PostgresCustomerRepository(CustomerRepository):
    """PostgreSQL implementation of CustomerRepository."""

    def __init__(self, session: AsyncSession, clock: Clock = datetime.now) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            clock: Source of audit timestamps
        """
        self.session = session
        self.clock = clock

    async def save(self, customer: Customer, actor: str) -> Customer:
        """Insert a new customer or update an existing one."""
        if customer.id is not None:
            return await self.update(customer, actor)

        stamped = stamp_created(customer, actor, self.clock())
        stmt = (
            insert(customers_table)
            .values(**customer_to_dict(stamped))
            .returning(customers_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_customer(dict(row))

    async def find_by_id(self, customer_id: CustomerId) -> Optional[Customer]:
        """Find a customer by ID."""
        stmt = select(customers_table).where(customers_table.c.id == customer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_customer(dict(row)) if row else None

    async def find_all(self) -> list[Customer]:
        """Return every customer ordered by id."""
        stmt = select(customers_table).order_by(customers_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_customer(dict(row)) for row in result.mappings().all()]

    async def update(self, customer: Customer, actor: str) -> Customer:
        """Overwrite the mutable columns of a stored customer."""
        if customer.id is None:
            raise ValidationError("Cannot update a customer that has not been saved")

        stored = await self.find_by_id(customer.id)
        if stored is None:
            raise NotFoundError("Customer", str(customer.id))

        stamped = stamp_updated(customer, stored, actor, self.clock())
        values = {
            column: value
            for column, value in customer_to_dict(stamped).items()
            if column not in WRITE_ONCE_FIELDS
        }
        stmt = (
            update(customers_table)
            .where(customers_table.c.id == customer.id)
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return stamped

    async def delete(self, customer_id: CustomerId) -> None:
        """Delete a customer."""
        stmt = delete(customers_table).where(customers_table.c.id == customer_id)
        await self.session.execute(stmt)
        await self.session.flush()
