"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that apply across content types rather
    than to a single record.
    """

    pass
