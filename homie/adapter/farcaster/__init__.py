"""Farcaster protocol adapters: hub submission, custody signing and sign-in."""

from .custody import CustodySigner, MnemonicCustodySigner, MockCustodySigner
from .hub import HubClient, MockHubClient, RealHubClient
from .quick_auth import MockQuickAuthVerifier, QuickAuthVerifier, RealQuickAuthVerifier
from .siwf import FarcasterSiwfVerifier, MockSiwfVerifier, RealSiwfVerifier

__all__ = [
    "CustodySigner",
    "FarcasterSiwfVerifier",
    "HubClient",
    "MnemonicCustodySigner",
    "MockCustodySigner",
    "MockHubClient",
    "MockQuickAuthVerifier",
    "MockSiwfVerifier",
    "QuickAuthVerifier",
    "RealHubClient",
    "RealQuickAuthVerifier",
    "RealSiwfVerifier",
]
