"""
Logging configuration
Generated secrets are never logged; only lengths and pool sizes are
"""

import logging
import sys
from typing import Set


class SecretRedactionFilter(logging.Filter):
    """Filter that redacts records which look like they carry a secret"""

    SENSITIVE_KEYS: Set[str] = {
        "password",
        "passphrase",
        "secret",
        "words",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage().lower()
        for key in self.SENSITIVE_KEYS:
            if f"{key}=" in msg:
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = None
                break
        return True


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the passforge logger tree"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretRedactionFilter())

    logger = logging.getLogger("passforge")
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers = []
    logger.addHandler(handler)
