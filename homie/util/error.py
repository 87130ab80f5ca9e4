"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A required setting is missing or invalid.

    Fatal for the operation that needs it and never retried.
    """

    pass
