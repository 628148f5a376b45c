"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an entity and its repository,
    such as comment threading or denormalized counter upkeep.
    """

    pass
