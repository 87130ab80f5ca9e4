"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Client input is malformed.

    Carries the name of the offending field so the interface layer can
    report it back to the caller.
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class AuthError(DomainError):
    """Missing or invalid credential.

    Publishing flows distinguish a missing identity (``no_user``) from a
    missing signing key (``no_signer``); both map to 403.
    """

    def __init__(self, message: str, status_code: int = 401, code: str = "unauthorized"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    @classmethod
    def no_user(cls) -> "AuthError":
        return cls("no_user", status_code=403, code="no_user")

    @classmethod
    def no_signer(cls) -> "AuthError":
        return cls("no_signer", status_code=403, code="no_signer")


class DuplicateError(ValidationError):
    """Raised when a uniqueness rule would be violated."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
