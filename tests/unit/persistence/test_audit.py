"""Unit tests for audit stamping helpers."""

from datetime import datetime

from customer.domain.model import Customer
from customer.persistence.audit import stamp_created, stamp_updated


class TestStampCreated:
    """Tests for stamp_created()."""

    def test_sets_created_and_updated_stamps(self, frozen_now):
        """Creation stamps both created_* and updated_* fields."""
        stamped = stamp_created(Customer(first_name="Ada"), "alice", frozen_now)

        assert stamped.created_at == frozen_now
        assert stamped.created_by == "alice"
        assert stamped.updated_at == frozen_now
        assert stamped.updated_by == "alice"
        assert stamped.first_name == "Ada"

    def test_does_not_touch_original(self, frozen_now):
        """The passed entity is left unchanged."""
        customer = Customer()

        stamp_created(customer, "alice", frozen_now)

        assert customer.created_at is None
        assert customer.created_by is None


class TestStampUpdated:
    """Tests for stamp_updated()."""

    def test_restores_write_once_fields(self, frozen_now):
        """id and created_* come from the stored version."""
        created = datetime(2023, 3, 1, 8, 0)
        stored = Customer(id=1, created_at=created, created_by="alice")
        tampered = Customer(
            id=1,
            created_at=datetime(1999, 1, 1),
            created_by="mallory",
            city="Paris",
        )

        stamped = stamp_updated(tampered, stored, "bob", frozen_now)

        assert stamped.id == 1
        assert stamped.created_at == created
        assert stamped.created_by == "alice"
        assert stamped.city == "Paris"

    def test_refreshes_update_stamp(self, frozen_now):
        """updated_* reflect the new modification."""
        stored = Customer(
            id=1,
            created_at=datetime(2023, 3, 1),
            created_by="alice",
            updated_at=datetime(2023, 3, 1),
            updated_by="alice",
        )

        stamped = stamp_updated(stored, stored, "bob", frozen_now)

        assert stamped.updated_at == frozen_now
        assert stamped.updated_by == "bob"
