"""Identity and audit metadata shared by persisted records."""

from datetime import datetime
from typing import Optional

from customer.domain.model.common import DomainModel
from customer.domain.value import CustomerId


class AuditedEntity(DomainModel):
    """Identity plus who/when bookkeeping for a persisted record.

    This is a passive holder. The persistence layer assigns ``id`` on first
    save and stamps the audit fields; ``created_at`` and ``created_by`` are
    written once and never change afterwards, while ``updated_at`` and
    ``updated_by`` follow every modification.
    """

    id: Optional[CustomerId] = None
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None
