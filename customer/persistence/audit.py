"""Audit stamping for persisted records.

The domain models only declare audit fields; repositories call these
helpers to fill them in on insert and update.
"""

from datetime import datetime
from typing import Callable, TypeVar

from customer.domain.model import AuditedEntity

Clock = Callable[[], datetime]

# Columns that are never rewritten once a record exists
WRITE_ONCE_FIELDS = ("id", "created_at", "created_by")

E = TypeVar("E", bound=AuditedEntity)


def stamp_created(entity: E, actor: str, now: datetime) -> E:
    """Return a copy of ``entity`` stamped as freshly created.

    Args:
        entity: Record about to be inserted
        actor: Who creates it
        now: Creation time

    Returns:
        Copy with created_* and updated_* set to ``now``/``actor``
    """
    return entity.model_copy(
        update={
            "created_at": now,
            "created_by": actor,
            "updated_at": now,
            "updated_by": actor,
        },
        deep=True,
    )


def stamp_updated(entity: E, stored: AuditedEntity, actor: str, now: datetime) -> E:
    """Return a copy of ``entity`` stamped as modified.

    Identity and creation stamps are taken from ``stored`` so that a caller
    cannot rewrite them.

    Args:
        entity: Record carrying the new values
        stored: Currently persisted version of the record
        actor: Who modifies it
        now: Modification time

    Returns:
        Copy with write-once fields restored and updated_* refreshed
    """
    update = {field: getattr(stored, field) for field in WRITE_ONCE_FIELDS}
    update["updated_at"] = now
    update["updated_by"] = actor
    return entity.model_copy(update=update, deep=True)
