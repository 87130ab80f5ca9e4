"""Infrastructure layer errors."""

from typing import Any


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class UpstreamError(AdapterError):
    """An external service rejected a request or could not be reached.

    The upstream status code and response body are carried unchanged so
    the interface layer can relay them to the client.
    """

    def __init__(self, service: str, status_code: int, details: Any = None):
        self.service = service
        self.status_code = status_code
        self.details = details
        super().__init__(f"{service} request failed: {status_code}")
