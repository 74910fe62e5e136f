"""Password storage via system keyring (Secret Service / macOS Keychain / Windows Credential Manager)."""
from __future__ import annotations

import logging

from mailcreds.models.account import AccountType

logger = logging.getLogger(__name__)

SERVICE_NAME = "mailcreds"


def _service(account_type: AccountType) -> str:
    return f"{SERVICE_NAME}:{account_type.value}"


def set_password(account_type: AccountType, user: str, password: str) -> bool:
    """Store password in system keyring. Returns True on success."""
    try:
        import keyring
        keyring.set_password(_service(account_type), user, password)
        return True
    except Exception as exc:
        logger.warning("keyring set failed: %s", exc)
        return False


def get_password(account_type: AccountType, user: str) -> str | None:
    """Retrieve password from system keyring. Returns None if not found."""
    try:
        import keyring
        return keyring.get_password(_service(account_type), user)
    except Exception as exc:
        logger.warning("keyring get failed: %s", exc)
        return None


def delete_password(account_type: AccountType, user: str) -> bool:
    """Remove password from system keyring. Returns True on success."""
    try:
        import keyring
        keyring.delete_password(_service(account_type), user)
        return True
    except Exception as exc:
        logger.warning("keyring delete failed: %s", exc)
        return False
