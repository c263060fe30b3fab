"""Mappers for converting between database rows and domain models.

Domain models are plain Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from customer.domain.model import Customer
from customer.domain.value import CustomerId


def row_to_customer(row: Dict[str, Any]) -> Customer:
    """Convert database row to Customer domain model.

    Args:
        row: Database row as dict

    Returns:
        Customer domain model
    """
    return Customer(
        id=CustomerId(row["id"]) if row.get("id") is not None else None,
        created_at=row.get("created_at"),
        created_by=row.get("created_by"),
        updated_at=row.get("updated_at"),
        updated_by=row.get("updated_by"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        email=row.get("email"),
        phone_number=row.get("phone_number"),
        address=row.get("address"),
        city=row.get("city"),
        country=row.get("country"),
        postal_code=row.get("postal_code"),
    )


def customer_to_dict(customer: Customer) -> Dict[str, Any]:
    """Convert Customer domain model to database dict.

    The id is left out: the database generates it on insert and it is
    only ever used in WHERE clauses afterwards.

    Args:
        customer: Customer domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return customer.model_dump(exclude={"id"})
