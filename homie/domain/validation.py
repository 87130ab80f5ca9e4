"""Input validation for request parameters.

Every validator is a pure function: it takes an untyped value from the
request and either returns the normalized value or raises
``ValidationError`` naming the offending field. Nothing here performs I/O,
so all checks run before any upstream call is attempted.
"""

import re
from typing import Any
from urllib.parse import urlparse

from homie.domain.error import ValidationError
from homie.domain.value import Embed

# Farcaster protocol limits
MAX_CAST_BYTES = 320
MAX_EMBEDS = 2

DEFAULT_LIMIT = 25
DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")

_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_CHANNEL_KEY_RE = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE)
_USERNAME_RE = re.compile(r"^[a-z0-9_.-]+$", re.IGNORECASE)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_fid(value: Any, field: str = "fid") -> int:
    """Validate a Farcaster ID.

    Args:
        value: Raw value (int or numeric string)
        field: Field name reported on failure

    Returns:
        FID as a positive integer

    Raises:
        ValidationError: If missing or not a positive integer
    """
    if _is_blank(value):
        raise ValidationError(f"{field} is required", field)

    # bool is an int subclass but never a meaningful FID
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a positive integer", field)

    try:
        fid = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be a positive integer", field)

    if fid <= 0:
        raise ValidationError(f"{field} must be a positive integer", field)

    return fid


def validate_optional_fid(value: Any, field: str = "fid") -> int | None:
    """Validate an FID that may be omitted."""
    if _is_blank(value):
        return None
    return validate_fid(value, field)


def validate_limit(
    value: Any, default: int = DEFAULT_LIMIT, maximum: int = 100
) -> int:
    """Normalize a pagination limit.

    Never fails: absent, non-numeric and non-positive values fall back to
    ``default`` and anything above ``maximum`` is capped, so an invalid
    limit is never forwarded upstream.

    Args:
        value: Raw limit from the query string
        default: Value used when the input is unusable
        maximum: Ceiling for this endpoint

    Returns:
        Limit in the range 1..maximum
    """
    if _is_blank(value) or isinstance(value, bool):
        return min(default, maximum)

    try:
        limit = int(str(value).strip())
    except ValueError:
        return min(default, maximum)

    if limit <= 0:
        return min(default, maximum)

    return min(limit, maximum)


def validate_cast_text(text: Any) -> str:
    """Validate cast text.

    Returns:
        Text with surrounding whitespace removed

    Raises:
        ValidationError: If empty or longer than 320 UTF-8 bytes
    """
    if not isinstance(text, str):
        raise ValidationError("Cast text is required", "text")

    trimmed = text.replace("\0", "").strip()
    if not trimmed:
        raise ValidationError("Cast text cannot be empty", "text")

    if len(trimmed.encode("utf-8")) > MAX_CAST_BYTES:
        raise ValidationError(
            f"Cast text exceeds {MAX_CAST_BYTES} byte limit", "text"
        )

    return trimmed


def validate_hash(value: Any, field: str = "hash") -> str:
    """Validate a cast hash (``0x`` followed by 40 hex characters)."""
    if _is_blank(value) or not isinstance(value, str):
        raise ValidationError(f"{field} is required", field)
    if not _HASH_RE.match(value):
        raise ValidationError(f"Invalid {field} format", field)
    return value


def validate_uuid(value: Any, field: str = "uuid") -> str:
    """Validate an 8-4-4-4-12 hex UUID."""
    if _is_blank(value) or not isinstance(value, str):
        raise ValidationError(f"{field} is required", field)
    if not _UUID_RE.match(value):
        raise ValidationError(f"Invalid {field} format", field)
    return value


def validate_url(value: Any, field: str = "url") -> str:
    """Validate an absolute http(s) URL."""
    if _is_blank(value) or not isinstance(value, str):
        raise ValidationError(f"{field} is required", field)

    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https"):
        raise ValidationError(f"{field} must use http or https protocol", field)
    if not parsed.netloc:
        raise ValidationError(f"Invalid {field} format", field)

    return value


def validate_embeds(embeds: Any) -> list[Embed]:
    """Validate cast embeds.

    Args:
        embeds: Raw list of ``{"url": ...}`` objects, or None

    Returns:
        List of embeds (empty when none supplied)

    Raises:
        ValidationError: If not a list, more than two entries, or any URL is invalid
    """
    if not embeds:
        return []

    if not isinstance(embeds, list):
        raise ValidationError("Embeds must be an array", "embeds")

    if len(embeds) > MAX_EMBEDS:
        raise ValidationError(
            f"Maximum {MAX_EMBEDS} embeds allowed per cast", "embeds"
        )

    result = []
    for index, embed in enumerate(embeds, start=1):
        if not isinstance(embed, dict):
            raise ValidationError(f"Embed {index} is invalid", "embeds")
        if not embed.get("url"):
            raise ValidationError(f"Embed {index} must have a URL", "embeds")
        try:
            url = validate_url(embed["url"], "embeds")
        except ValidationError:
            raise ValidationError(f"Embed {index} has invalid URL", "embeds")
        result.append(Embed(url=url))

    return result


def validate_channel_key(key: Any) -> str:
    """Validate a channel key such as ``farcaster`` or ``base-builders``."""
    if _is_blank(key) or not isinstance(key, str):
        raise ValidationError("Channel key is required", "channelKey")
    if not _CHANNEL_KEY_RE.match(key):
        raise ValidationError("Invalid channel key format", "channelKey")
    if len(key) > 100:
        raise ValidationError("Channel key is too long", "channelKey")
    return key


def validate_username(username: Any) -> str:
    """Validate a Farcaster username, dropping a leading ``@``."""
    if not isinstance(username, str):
        raise ValidationError("Username is required", "username")

    clean = username.strip().removeprefix("@")
    if not clean:
        raise ValidationError("Username cannot be empty", "username")
    if not _USERNAME_RE.match(clean):
        raise ValidationError("Invalid username format", "username")
    if len(clean) > 50:
        raise ValidationError("Username is too long", "username")

    return clean


def validate_image_file(
    content_type: str | None,
    size: int | None,
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
) -> None:
    """Validate an uploaded image before it is forwarded.

    Args:
        content_type: MIME type reported by the client (None if no file)
        size: File size in bytes (None if no file)
        max_bytes: Upload ceiling

    Raises:
        ValidationError: If missing, not an allowed image type, or too large
    """
    if content_type is None or size is None:
        raise ValidationError("File is required", "file")

    if not content_type.startswith("image/"):
        raise ValidationError("File must be an image", "file")

    if content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError(
            "File type not supported. Allowed: JPEG, PNG, GIF, WebP", "file"
        )

    if size > max_bytes:
        raise ValidationError(
            f"File size exceeds {max_bytes // (1024 * 1024)}MB limit", "file"
        )
