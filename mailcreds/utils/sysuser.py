"""Ambient system username."""
from __future__ import annotations

import getpass
import logging

logger = logging.getLogger(__name__)


def system_username() -> str:
    """Login name of the current process owner, or '' when it cannot be determined."""
    try:
        return getpass.getuser()
    except (OSError, KeyError) as exc:
        logger.debug("Could not determine system username: %s", exc)
        return ""
