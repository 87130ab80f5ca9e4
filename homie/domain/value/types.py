"""Domain value objects for HomieHouse.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from homie.domain.value.common import ValueObject


class SignerStatus(str, Enum):
    """Lifecycle state of a hosted signer.

    generated -> pending_approval -> approved -> revoked
    """

    GENERATED = "generated"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REVOKED = "revoked"


class ReactionType(str, Enum):
    """Reaction kinds supported by the protocol."""

    LIKE = "like"
    RECAST = "recast"


class FeedType(str, Enum):
    """Feed flavours exposed by the hosted API."""

    FOLLOWING = "following"
    FILTER = "filter"


class Embed(ValueObject):
    """URL attached to a cast."""

    url: str


class FarcasterProfile(ValueObject):
    """Public identity returned after a successful sign-in."""

    fid: int | None = None
    username: str | None = None
    display_name: str | None = None
    avatar: str | None = None
