"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are mutable records: attributes may be reassigned after
    construction and are re-validated on assignment.
    """

    model_config = ConfigDict(validate_assignment=True)
