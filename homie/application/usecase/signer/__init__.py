"""Signer use cases."""

from .create_signer import CreateSignerResponse, CreateSignerUseCase
from .get_signer_status import (
    GetSignerStatusRequest,
    GetSignerStatusResponse,
    GetSignerStatusUseCase,
)

__all__ = [
    "CreateSignerResponse",
    "CreateSignerUseCase",
    "GetSignerStatusRequest",
    "GetSignerStatusResponse",
    "GetSignerStatusUseCase",
]
