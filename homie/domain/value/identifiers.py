"""Strongly typed identifiers for HomieHouse domain entities."""

from typing import NewType

# Farcaster protocol identity
Fid = NewType("Fid", int)

# Locally persisted entities (autoincrement keys)
CuratedListId = NewType("CuratedListId", int)
CuratedListItemId = NewType("CuratedListItemId", int)

# Hosted signer handle assigned by Neynar
SignerUuid = NewType("SignerUuid", str)
