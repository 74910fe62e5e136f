"""SASL OAUTHBEARER (RFC 7628) initial response from an external refresh command."""
from __future__ import annotations

import base64
import logging
from contextlib import AbstractContextManager
from typing import IO, Callable

from mailcreds.auth.errors import EmptyTokenError, NoRefreshCommandError, RefreshCommandError
from mailcreds.auth.resolver import CredentialResolver
from mailcreds.models.account import Account
from mailcreds.utils.process import read_line as _read_line
from mailcreds.utils.process import run_command as _run_command

logger = logging.getLogger(__name__)

CommandRunner = Callable[[str], AbstractContextManager[IO[str]]]


def oauthbearer_payload(login: str, host: str, port: int, token: str) -> bytes:
    """The unencoded GS2 header and key/value pairs, \\x01 separated."""
    return f"n,a={login},\x01host={host}\x01port={port}\x01auth=Bearer {token}\x01\x01".encode()


def build_oauthbearer_token(
    account: Account,
    resolver: CredentialResolver,
    *,
    run_command: CommandRunner = _run_command,
    read_line: Callable[[IO[str]], str] = _read_line,
    encode: Callable[[bytes], bytes] = base64.b64encode,
) -> bytes:
    """
    Run the refresh command configured for the account's protocol and
    return the base64-encoded OAUTHBEARER response for it.

    The login is resolved first and stays resolved even if a later step
    fails. Raises NoRefreshCommandError, RefreshCommandError or
    EmptyTokenError (also for output that is not UTF-8), or whatever login
    resolution raised.
    """
    resolver.resolve_login(account)

    cmd = resolver.config.oauth_refresh_command(account.type)
    if not cmd:
        logger.error("No OAUTH refresh command defined for %s", account.type.value)
        raise NoRefreshCommandError(f"No OAUTH refresh command defined for {account.type.value}")

    try:
        with run_command(cmd) as stream:
            token = read_line(stream)
    except UnicodeDecodeError as exc:
        logger.error("Refresh command for %s returned undecodable output: %s", account.host, exc)
        raise EmptyTokenError("Refresh command returned no usable token") from exc
    except OSError as exc:
        logger.error("Unable to run refresh command %r: %s", cmd, exc)
        raise RefreshCommandError(f"Unable to run refresh command: {exc}") from exc

    if not token:
        logger.error("Refresh command for %s returned empty string", account.host)
        raise EmptyTokenError("Refresh command returned empty string")

    payload = oauthbearer_payload(account.login, account.host, account.port, token)
    return encode(payload)
