"""Customer record."""

from typing import Optional

from customer.domain.model.audited import AuditedEntity


class Customer(AuditedEntity):
    """Contact and address details of one customer.

    All attributes are optional and unvalidated, so a customer can be built
    empty and filled in field by field before it is saved.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
