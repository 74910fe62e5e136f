"""Conversion between Account and connection Url."""
from __future__ import annotations

from mailcreds.auth.errors import MissingHostError
from mailcreds.models.account import PROTOCOLS, Account, AccountFlag, AccountType
from mailcreds.models.url import Url, UrlScheme


def account_type_for_scheme(scheme: UrlScheme) -> tuple[AccountType, bool] | None:
    """Map a URL scheme to (account type, ssl). None for schemes no protocol uses."""
    for account_type, caps in PROTOCOLS.items():
        if scheme.value == caps.scheme:
            return account_type, False
        if scheme.value == caps.ssl_scheme:
            return account_type, True
    return None


def scheme_for_account(account: Account) -> UrlScheme:
    caps = PROTOCOLS.get(account.type)
    if caps is None:
        return UrlScheme.UNKNOWN
    return UrlScheme.from_name(caps.ssl_scheme if account.ssl_enabled else caps.scheme)


def account_from_url(url: Url, account_type: AccountType) -> Account:
    """
    Build an Account of the given type from url.

    Only the fields present on the URL are copied and flagged; an empty
    user or password counts as present, port 0 as absent.
    Raises MissingHostError when the URL has no host.
    """
    if not url.host:
        raise MissingHostError(f"No host in {account_type.value} URL")

    account = Account(type=account_type, host=url.host)
    if url.user is not None:
        account.set_user(url.user)
    if url.password is not None:
        account.set_password(url.password)
    if url.port:
        account.set_port(url.port)
    return account


def account_to_url(account: Account) -> Url:
    """Return a Url describing account. The Url owns its values."""
    return Url(
        scheme=scheme_for_account(account),
        host=account.host,
        port=account.port if account.has(AccountFlag.PORT) else None,
        user=account.user if account.has(AccountFlag.USER) else None,
        password=account.password if account.has(AccountFlag.PASS) else None,
        path=None,
    )
