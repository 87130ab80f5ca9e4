"""Standard-library logging setup.

Logfire carries the structured events; this covers plain ``logging`` output
from uvicorn, web3 and our own modules. Every record passes through
``RedactingFilter`` so key material never reaches stdout.
"""

import logging
import re
import sys

from homie.config import Settings
from homie.util.redact import REDACTED, SENSITIVE_KEYS, redact

# key=value or key: value pairs whose key names a secret
_SECRET_PAIR = re.compile(
    r"(?i)(\b\w*(?:"
    + "|".join(SENSITIVE_KEYS)
    + r")\w*[\"']?\s*[=:]\s*[\"']?)"
    + r"((?:bearer\s+)?[^\s,\"'}]+)"
)

# Noisy libraries; httpx logs full URLs, which carry API keys in query strings
QUIET_LOGGERS = ("httpx", "httpcore", "web3", "urllib3")


class RedactingFilter(logging.Filter):
    """Mask secrets in a record's message and dict arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = redact(record.args)
        message = record.getMessage()
        masked = _SECRET_PAIR.sub(rf"\1{REDACTED}", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the API process and scripts.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RedactingFilter())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[handler],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("homie").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
