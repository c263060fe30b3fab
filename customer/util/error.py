"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass


class ConfigurationError(UtilError):
    """Settings cannot be turned into a working component."""

    pass
