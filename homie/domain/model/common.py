"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable base for entities mirrored from the network or the database.

    Updates produce a new instance via ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
