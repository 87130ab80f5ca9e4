"""Mock Neynar providers for testing."""

from dishka import Scope, provide

from homie.adapter.neynar import MockNeynarClient
from homie.config import Settings
from homie.domain.service import FarcasterApi
from homie.util.di.infrastructure.neynar import NeynarProvider

USERS = [
    {
        "fid": 3,
        "username": "dwr",
        "display_name": "Dan Romero",
        "pfp_url": "https://i.imgur.com/dwr.png",
        "verified_addresses": {"eth_addresses": ["0xd7029bdea1c17493893aafe29aad69ef892b8ff2"]},
    },
    {
        "fid": 99,
        "username": "homiehouse",
        "display_name": "HomieHouse",
        "pfp_url": "https://i.imgur.com/homie.png",
        "verified_addresses": {"eth_addresses": []},
    },
    {
        "fid": 123,
        "username": "alice",
        "display_name": "Alice",
        "pfp_url": "https://i.imgur.com/alice.png",
        "verified_addresses": {"eth_addresses": ["0x1111111111111111111111111111111111111111"]},
    },
]


class MockNeynarProvider(NeynarProvider):
    """Mock Neynar provider using an in-memory client.

    The configured bot signer starts out approved so hosted casts can fall
    back to it.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_neynar_client(self, settings: Settings) -> FarcasterApi:
        """Provide mock Neynar client."""
        approved = {}
        if settings.neynar.signer_uuid:
            approved[settings.neynar.signer_uuid] = settings.farcaster.app_fid or 1
        return MockNeynarClient(approved_signers=approved, users=USERS)
