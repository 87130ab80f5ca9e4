"""Redaction of sensitive values before they reach a log sink."""

from typing import Any

REDACTED = "[REDACTED]"

SENSITIVE_KEYS = (
    "password",
    "apikey",
    "api_key",
    "api-key",
    "token",
    "secret",
    "mnemonic",
    "privatekey",
    "private_key",
    "authorization",
)


def is_sensitive(key: str) -> bool:
    """Whether a field name looks like it holds a secret."""
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)


def redact(value: Any) -> Any:
    """Return a copy of ``value`` with sensitive fields replaced.

    Dicts are walked recursively (including dicts inside lists); any key
    matching ``SENSITIVE_KEYS`` has its value replaced by ``[REDACTED]``.
    """
    if isinstance(value, dict):
        return {
            key: REDACTED if is_sensitive(str(key)) else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact(item) for item in value]
    return value


def truncate_id(value: str | None, keep: int = 8) -> str | None:
    """Shorten an identifier such as a signer UUID for logging.

    ``"3f1c9a2e-..."`` keeps its first ``keep`` characters followed by ``...``.
    """
    if not value:
        return value
    if len(value) <= keep:
        return value
    return f"{value[:keep]}..."
