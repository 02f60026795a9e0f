"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span an aggregate and its
    repositories, or that wrap a primitive (hashing, token signing).
    """

    pass
