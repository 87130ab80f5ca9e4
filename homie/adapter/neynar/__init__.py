"""Neynar hosted API adapter."""

from .client import MockNeynarClient, NeynarClient, RealNeynarClient

__all__ = ["NeynarClient", "RealNeynarClient", "MockNeynarClient"]
