"""Account identity — is this the endpoint/login we already have a session for?"""
from __future__ import annotations

from mailcreds.config import Config
from mailcreds.models.account import Account, AccountFlag, AccountType
from mailcreds.utils.sysuser import system_username


def default_user(account_type: AccountType, config: Config | None = None) -> str:
    """The user an account without an explicit one is assumed to log in as."""
    configured = config.user(account_type) if config is not None else None
    return configured or system_username()


def accounts_match(a1: Account, a2: Account, config: Config | None = None) -> bool:
    """
    Compare type, host (case-insensitive) and port, then the user.

    An explicit user on both sides must be identical. An explicit user on one
    side must equal the default user for a1's protocol. NNTP accounts where a1
    names a user never match: authenticated and anonymous news access are
    not interchangeable.
    """
    if a1.type != a2.type:
        return False
    if a1.host.lower() != a2.host.lower():
        return False
    if a1.port != a2.port:
        return False

    if a1.type == AccountType.NNTP:
        return not (a1.has(AccountFlag.USER) and a1.user)

    has1 = a1.has(AccountFlag.USER)
    has2 = a2.has(AccountFlag.USER)
    if has1 and has2:
        return a1.user == a2.user
    if has1:
        return a1.user == default_user(a1.type, config)
    if has2:
        return a2.user == default_user(a1.type, config)
    return True
