"""Cast publishing use cases."""

from .compose import ComposeRequest, ComposeResponse, ComposeUseCase
from .hosted_compose import (
    HostedComposeRequest,
    HostedComposeResponse,
    HostedComposeUseCase,
)
from .react import (
    ReactRequest,
    ReactResponse,
    ReactUseCase,
    UnreactResponse,
    UnreactUseCase,
)
from .reply import ReplyRequest, ReplyResponse, ReplyUseCase

__all__ = [
    "ComposeRequest",
    "ComposeResponse",
    "ComposeUseCase",
    "HostedComposeRequest",
    "HostedComposeResponse",
    "HostedComposeUseCase",
    "ReactRequest",
    "ReactResponse",
    "ReactUseCase",
    "ReplyRequest",
    "ReplyResponse",
    "ReplyUseCase",
    "UnreactResponse",
    "UnreactUseCase",
]
