"""Feed-curation preferences server adapter."""

from .client import CurationClient, MockCurationClient, RealCurationClient

__all__ = ["CurationClient", "RealCurationClient", "MockCurationClient"]
