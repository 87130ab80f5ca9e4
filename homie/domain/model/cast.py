"""Cast entities.

Casts are immutable once accepted by the network; the hash is assigned
by the network, never locally.
"""

from homie.domain.model.common import DomainModel
from homie.domain.value import Embed, Fid, ReactionType


class CastDraft(DomainModel):
    """A validated cast ready for submission."""

    text: str
    embeds: list[Embed] = []
    parent: str | None = None
    channel_key: str | None = None


class PublishedCast(DomainModel):
    """Receipt for a cast accepted by the network."""

    hash: str
    author_fid: Fid | None = None
    text: str | None = None


class Reaction(DomainModel):
    """A like or recast by a signer on a target cast."""

    signer_uuid: str
    reaction_type: ReactionType
    target: str
