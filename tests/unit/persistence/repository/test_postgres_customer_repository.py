"""Unit tests for PostgresCustomerRepository.

The repository is driven against a recording session, and the statements
it hands to the session are compiled with the PostgreSQL dialect.
"""

from datetime import datetime, timedelta
from typing import Any, Optional

import pytest
from sqlalchemy.dialects import postgresql

from customer.domain.error import NotFoundError, ValidationError
from customer.domain.model import Customer
from customer.domain.value import CustomerId
from customer.persistence.repository import PostgresCustomerRepository


class RecordingResult:
    """Stand-in for a SQLAlchemy result over mapping rows."""

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self.rows = rows

    def mappings(self) -> "RecordingResult":
        return self

    def one(self) -> dict[str, Any]:
        assert len(self.rows) == 1
        return self.rows[0]

    def first(self) -> Optional[dict[str, Any]]:
        return self.rows[0] if self.rows else None

    def all(self) -> list[dict[str, Any]]:
        return list(self.rows)


class RecordingSession:
    """Async session that records statements and replays queued rows."""

    def __init__(self) -> None:
        self.statements: list[Any] = []
        self.queued: list[list[dict[str, Any]]] = []
        self.flushes = 0

    def queue(self, *rows: dict[str, Any]) -> None:
        """Rows returned by the next executed statement."""
        self.queued.append(list(rows))

    async def execute(self, statement: Any) -> RecordingResult:
        self.statements.append(statement)
        rows = self.queued.pop(0) if self.queued else []
        return RecordingResult(rows)

    async def flush(self) -> None:
        self.flushes += 1


def compile_pg(statement: Any):
    return statement.compile(dialect=postgresql.dialect())


def customer_row(customer_id: int, stamped_at: datetime, **fields: Any) -> dict:
    row = {
        "id": customer_id,
        "created_at": stamped_at,
        "created_by": "alice",
        "updated_at": stamped_at,
        "updated_by": "alice",
        "first_name": None,
        "last_name": None,
        "email": None,
        "phone_number": None,
        "address": None,
        "city": None,
        "country": None,
        "postal_code": None,
    }
    row.update(fields)
    return row


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def repository(session, frozen_now):
    return PostgresCustomerRepository(session, clock=lambda: frozen_now)


class TestSave:
    """Tests for PostgresCustomerRepository.save()."""

    @pytest.mark.asyncio
    async def test_unsaved_customer_is_inserted_with_returning(
        self, repository, session, frozen_now
    ):
        """An unsaved customer is written with one INSERT ... RETURNING."""
        session.queue(customer_row(7, frozen_now, first_name="Ada"))

        saved = await repository.save(Customer(first_name="Ada"), actor="alice")

        assert len(session.statements) == 1
        compiled = compile_pg(session.statements[0])
        sql = str(compiled)
        assert sql.startswith("INSERT INTO customers")
        assert "RETURNING" in sql
        assert "id" not in compiled.params
        assert compiled.params["created_by"] == "alice"
        assert compiled.params["updated_by"] == "alice"
        assert compiled.params["created_at"] == frozen_now
        assert compiled.params["first_name"] == "Ada"
        assert session.flushes == 1

        assert saved.id == 7
        assert saved.first_name == "Ada"

    @pytest.mark.asyncio
    async def test_saved_customer_goes_through_update(
        self, repository, session, frozen_now
    ):
        """A customer with an id is updated, not inserted again."""
        session.queue(customer_row(7, frozen_now))

        await repository.save(Customer(id=CustomerId(7)), actor="bob")

        kinds = [str(compile_pg(stmt)).split()[0] for stmt in session.statements]
        assert kinds == ["SELECT", "UPDATE"]


class TestUpdate:
    """Tests for PostgresCustomerRepository.update()."""

    @pytest.mark.asyncio
    async def test_write_once_columns_are_not_written(
        self, repository, session, frozen_now
    ):
        """The UPDATE never sets id, created_at or created_by."""
        created = frozen_now - timedelta(days=1)
        session.queue(customer_row(7, created))
        changed = Customer(
            id=CustomerId(7),
            created_at=datetime(1999, 1, 1),
            created_by="mallory",
            first_name="Grace",
        )

        updated = await repository.update(changed, actor="bob")

        compiled = compile_pg(session.statements[-1])
        sql = str(compiled)
        set_clause = sql.split(" SET ", 1)[1].split(" WHERE ", 1)[0]
        assert sql.startswith("UPDATE customers")
        assert {"id", "created_at", "created_by"}.isdisjoint(compiled.params)
        assert "created_at" not in set_clause
        assert "created_by" not in set_clause
        assert compiled.params["id_1"] == 7
        assert compiled.params["updated_by"] == "bob"
        assert compiled.params["updated_at"] == frozen_now
        assert compiled.params["first_name"] == "Grace"

        assert updated.created_at == created
        assert updated.created_by == "alice"
        assert updated.updated_by == "bob"

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, repository, session):
        """Updating an id that is not stored fails after the lookup."""
        with pytest.raises(NotFoundError):
            await repository.update(Customer(id=CustomerId(404)), actor="bob")

        assert len(session.statements) == 1
        assert str(compile_pg(session.statements[0])).startswith("SELECT")
        assert session.flushes == 0

    @pytest.mark.asyncio
    async def test_unsaved_customer_is_rejected(self, repository, session):
        """Updating without an id touches no table."""
        with pytest.raises(ValidationError):
            await repository.update(Customer(first_name="Ada"), actor="bob")

        assert session.statements == []


class TestQueries:
    """Tests for lookups and deletes."""

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, repository):
        assert await repository.find_by_id(CustomerId(1)) is None

    @pytest.mark.asyncio
    async def test_find_all_orders_by_id(self, repository, session, frozen_now):
        session.queue(customer_row(1, frozen_now), customer_row(2, frozen_now))

        found = await repository.find_all()

        assert [c.id for c in found] == [1, 2]
        assert "ORDER BY customers.id" in str(compile_pg(session.statements[0]))

    @pytest.mark.asyncio
    async def test_delete_issues_delete(self, repository, session):
        await repository.delete(CustomerId(3))

        compiled = compile_pg(session.statements[0])
        assert str(compiled).startswith("DELETE FROM customers")
        assert compiled.params["id_1"] == 3
        assert session.flushes == 1
