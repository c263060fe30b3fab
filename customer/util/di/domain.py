"""Domain layer DI providers."""

from dishka import Scope, provide

from customer.config import AuditSettings
from customer.domain.repository import CustomerRepository
from customer.domain.service import CustomerService
from customer.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to share the repository session.
    """

    scope = Scope.REQUEST

    @provide
    def get_customer_service(
        self,
        customer_repository: CustomerRepository,
        audit_settings: AuditSettings,
    ) -> CustomerService:
        """Provide customer domain service."""
        return CustomerService(
            customer_repository=customer_repository,
            audit_settings=audit_settings,
        )
