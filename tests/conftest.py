"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when the container is built, so
# defaults must be in place before any test module imports the app.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("NEYNAR__SIGNER_UUID", "8f0c0e4a-3b1d-4c5e-9f2a-6d7b8c9e0f1a")
os.environ.setdefault("FARCASTER__APP_FID", "99")
os.environ.setdefault(
    "FARCASTER__APP_MNEMONIC",
    "test test test test test test test test test test test junk",
)
os.environ.setdefault("AUTH__QUICK_AUTH_DOMAIN", "homiehouse.xyz")

logfire.configure(send_to_logfire=False, console=False)

BOT_SIGNER_UUID = os.environ["NEYNAR__SIGNER_UUID"]
APP_FID = int(os.environ["FARCASTER__APP_FID"])

CAST_HASH = "0x" + "a1" * 20


def make_siwf_message(
    domain: str = "homiehouse.xyz",
    fid: int = 123,
    nonce: str = "abcd1234",
    address: str = "0x" + "11" * 20,
    expiration_time: str | None = None,
) -> str:
    """Build an EIP-4361 sign-in message the way Farcaster clients do."""
    lines = [
        f"{domain} wants you to sign in with your Ethereum account:",
        address,
        "",
        "Farcaster Auth",
        "",
        f"URI: https://{domain}/login",
        "Version: 1",
        "Chain ID: 10",
        f"Nonce: {nonce}",
        "Issued At: 2025-01-01T00:00:00.000Z",
    ]
    if expiration_time:
        lines.append(f"Expiration Time: {expiration_time}")
    lines += ["Resources:", f"- farcaster://fid/{fid}"]
    return "\n".join(lines)
