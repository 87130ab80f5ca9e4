"""Authentication use cases."""

from .resolve_session import (
    ResolveSessionRequest,
    ResolveSessionResponse,
    ResolveSessionUseCase,
)
from .sign_in import SignInProfile, SignInRequest, SignInResponse, SignInUseCase

__all__ = [
    "ResolveSessionRequest",
    "ResolveSessionResponse",
    "ResolveSessionUseCase",
    "SignInProfile",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
]
