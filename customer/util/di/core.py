"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from customer.config import AuditSettings, Settings
from customer.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_audit_settings(self, settings: Settings) -> AuditSettings:
        """Provide audit settings."""
        return settings.audit
