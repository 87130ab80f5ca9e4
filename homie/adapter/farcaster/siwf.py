"""Sign-In-With-Farcaster verification.

A SIWF payload is an EIP-4361 message signed by the custody address of
the signing FID. Verification fails closed: anything malformed or
mismatched raises ``AuthError``.
"""

import re
from datetime import datetime, timezone

import logfire
from eth_account import Account
from eth_account.messages import encode_defunct
from pydantic import BaseModel
from web3 import AsyncWeb3, Web3

from homie.adapter.error import UpstreamError
from homie.domain.error import AuthError
from homie.domain.service.auth_service import SiwfVerifier

# IdRegistry on Optimism mainnet
ID_REGISTRY_ADDRESS = Web3.to_checksum_address(
    "0x00000000fc6c5f01fc30151999387bb99a9f489b"
)
ID_REGISTRY_ABI = [
    {
        "inputs": [{"name": "owner", "type": "address"}],
        "name": "idOf",
        "outputs": [{"name": "fid", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    }
]

_HEADER_SUFFIX = " wants you to sign in with your Ethereum account:"
_FID_RESOURCE_RE = re.compile(r"^farcaster://fid/(\d+)$")
_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class SiwfMessage(BaseModel):
    """Fields of a parsed EIP-4361 sign-in message."""

    domain: str
    address: str
    statement: str | None = None
    uri: str | None = None
    version: str | None = None
    chain_id: int | None = None
    nonce: str | None = None
    issued_at: str | None = None
    expiration_time: str | None = None
    resources: list[str] = []

    @property
    def fid(self) -> int | None:
        for resource in self.resources:
            match = _FID_RESOURCE_RE.match(resource.strip())
            if match:
                return int(match.group(1))
        return None


_FIELD_NAMES = {
    "URI": "uri",
    "Version": "version",
    "Chain ID": "chain_id",
    "Nonce": "nonce",
    "Issued At": "issued_at",
    "Expiration Time": "expiration_time",
}


def parse_siwf_message(message: str) -> SiwfMessage:
    """Parse an EIP-4361 message.

    Raises:
        AuthError: If the message does not follow the EIP-4361 layout
    """
    lines = message.strip().splitlines()
    if len(lines) < 2 or not lines[0].endswith(_HEADER_SUFFIX):
        raise AuthError("invalid SIWF message")

    domain = lines[0][: -len(_HEADER_SUFFIX)].strip()
    address = lines[1].strip()
    if not domain or not _ADDRESS_RE.match(address):
        raise AuthError("invalid SIWF message")

    fields: dict = {"domain": domain, "address": address, "resources": []}
    in_resources = False
    for line in lines[2:]:
        if in_resources:
            if line.startswith("- "):
                fields["resources"].append(line[2:].strip())
            continue
        if line == "Resources:":
            in_resources = True
            continue
        key, sep, value = line.partition(": ")
        if sep and key in _FIELD_NAMES:
            fields[_FIELD_NAMES[key]] = value.strip()
        elif line.strip() and "statement" not in fields:
            fields["statement"] = line.strip()

    try:
        return SiwfMessage(**fields)
    except ValueError:
        raise AuthError("invalid SIWF message")


def check_message(
    parsed: SiwfMessage, domain: str, nonce: str | None, now: datetime | None = None
) -> int:
    """Check the claims of a parsed message against the request.

    Args:
        parsed: Parsed SIWF message
        domain: Normalized hostname the client is on
        nonce: Nonce the client was issued (skipped when None)
        now: Current time (defaults to the wall clock)

    Returns:
        FID named by the message resources

    Raises:
        AuthError: On domain or nonce mismatch, expiry, or a missing FID
    """
    message_domain = parsed.domain.split(":")[0].lower()
    if message_domain != domain:
        logfire.warn(
            "SIWF domain mismatch", expected=domain, received=parsed.domain
        )
        raise AuthError("domain mismatch")

    if nonce is not None and parsed.nonce != nonce:
        raise AuthError("nonce mismatch")

    if parsed.expiration_time:
        try:
            expires = datetime.fromisoformat(
                parsed.expiration_time.replace("Z", "+00:00")
            )
        except ValueError:
            raise AuthError("invalid SIWF message")
        if expires.tzinfo is None:
            # EIP-4361 requires an offset; read a bare timestamp as UTC
            expires = expires.replace(tzinfo=timezone.utc)
        if expires <= (now or datetime.now(timezone.utc)):
            raise AuthError("message expired")

    fid = parsed.fid
    if fid is None:
        raise AuthError("missing farcaster fid resource")
    return fid


def recover_address(message: str, signature: str) -> str:
    """Recover the address that signed a personal message.

    Raises:
        AuthError: If the signature is malformed
    """
    try:
        return Account.recover_message(encode_defunct(text=message), signature=signature)
    except Exception as e:
        logfire.warn("SIWF signature recovery failed", error=str(e))
        raise AuthError("signature verification failed")


class FarcasterSiwfVerifier(SiwfVerifier):
    """Base class for SIWF verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealSiwfVerifier(FarcasterSiwfVerifier):
    """Verifies signatures locally and custody on the Optimism IdRegistry."""

    def __init__(self, rpc_url: str, timeout: float = 10.0) -> None:
        """Initialize SIWF verifier.

        Args:
            rpc_url: Optimism JSON-RPC endpoint
            timeout: RPC timeout in seconds
        """
        self.rpc_url = rpc_url
        self.timeout = timeout

    async def custody_fid(self, address: str) -> int:
        """Return the FID whose custody address is ``address`` (0 if none).

        Raises:
            UpstreamError: If the RPC endpoint cannot be queried
        """
        w3 = AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(
                self.rpc_url, request_kwargs={"timeout": self.timeout}
            )
        )
        registry = w3.eth.contract(address=ID_REGISTRY_ADDRESS, abi=ID_REGISTRY_ABI)
        try:
            return await registry.functions.idOf(
                Web3.to_checksum_address(address)
            ).call()
        except Exception as e:
            logfire.error("IdRegistry lookup failed", error=str(e))
            raise UpstreamError("optimism", 502, str(e))

    async def verify(
        self, message: str, signature: str, domain: str, nonce: str | None = None
    ) -> int:
        parsed = parse_siwf_message(message)
        fid = check_message(parsed, domain, nonce)

        recovered = recover_address(message, signature)
        if recovered.lower() != parsed.address.lower():
            logfire.warn("SIWF signer does not match message address", fid=fid)
            raise AuthError("signature verification failed")

        custody = await self.custody_fid(parsed.address)
        if custody != fid:
            logfire.warn("SIWF address is not the custody address", fid=fid)
            raise AuthError("signature verification failed")

        return fid


class MockSiwfVerifier(FarcasterSiwfVerifier):
    """Mock SIWF verifier for testing.

    Parses and checks message claims like the real verifier, but accepts
    any signature and skips the custody lookup.
    """

    async def verify(
        self, message: str, signature: str, domain: str, nonce: str | None = None
    ) -> int:
        parsed = parse_siwf_message(message)
        return check_message(parsed, domain, nonce)
