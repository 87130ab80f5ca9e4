"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that sit between request validation and
    the external collaborators (hosted API, hub, database).
    """

    pass
