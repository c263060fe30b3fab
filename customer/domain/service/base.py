"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services orchestrate repositories and hold logic that does not
    belong to a single entity.
    """

    pass
