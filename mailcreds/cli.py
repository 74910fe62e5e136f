"""mailcreds CLI — compare accounts, resolve credentials, build OAUTHBEARER tokens."""
from __future__ import annotations

import argparse
import getpass
import logging
import sys

from mailcreds.auth.errors import AccountError
from mailcreds.auth.matching import accounts_match
from mailcreds.auth.oauthbearer import build_oauthbearer_token
from mailcreds.auth.resolver import CredentialResolver
from mailcreds.auth.urls import account_from_url, account_type_for_scheme
from mailcreds.config import APP_VERSION, DATA_DIR, LOG_PATH, SETTINGS_PATH, Config, load_config
from mailcreds.models.account import Account, AccountFlag, AccountType
from mailcreds.models.url import Url
from mailcreds.utils.keyring_store import delete_password, set_password

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    try:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(LOG_PATH, encoding="utf-8"))
    except OSError as exc:
        print(f"WARNING: cannot write log file {LOG_PATH}: {exc}", file=sys.stderr)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=fmt,
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mailcreds",
        description="Mail account credentials — matching, resolution, OAUTHBEARER",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    p.add_argument("--config", default=str(SETTINGS_PATH), help="Settings JSON path")
    p.add_argument("--batch", action="store_true", help="Never prompt; fail if a credential is missing")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    m = sub.add_parser("match", help="Check whether two account URLs name the same login")
    m.add_argument("url1")
    m.add_argument("url2")

    r = sub.add_parser("resolve", help="Resolve user and login for an account URL")
    r.add_argument("url")
    r.add_argument("--password", action="store_true", help="Also resolve the password")

    o = sub.add_parser("oauthbearer", help="Print the base64 OAUTHBEARER response")
    o.add_argument("url")

    protocols = [t.value for t in AccountType]
    s = sub.add_parser("store-password", help="Save a password in the system keyring")
    s.add_argument("protocol", choices=protocols)
    s.add_argument("user")

    f = sub.add_parser("forget-password", help="Remove a password from the system keyring")
    f.add_argument("protocol", choices=protocols)
    f.add_argument("user")
    return p


def parse_account(text: str) -> Account:
    """Account for a URL such as 'imaps://alice@mail.example.com:993'."""
    try:
        url = Url.parse(text)
    except ValueError as exc:
        raise AccountError(f"Bad URL {text!r}: {exc}") from exc
    found = account_type_for_scheme(url.scheme)
    if found is None:
        raise AccountError(f"Unsupported URL scheme in {text!r}")
    account_type, ssl = found
    account = account_from_url(url, account_type)
    if ssl:
        account.set_ssl()
    return account


def _cmd_match(args: argparse.Namespace, config: Config) -> int:
    a1 = parse_account(args.url1)
    a2 = parse_account(args.url2)
    if accounts_match(a1, a2, config):
        print("match")
        return 0
    print("no match")
    return 1


def _cmd_resolve(args: argparse.Namespace, resolver: CredentialResolver) -> int:
    account = parse_account(args.url)
    resolver.resolve_login(account)
    if args.password:
        resolver.resolve_password(account)
    print(f"user:     {account.user if account.has(AccountFlag.USER) else '-'}")
    print(f"login:    {account.login}")
    if args.password:
        print("password: set")
    return 0


def _cmd_oauthbearer(args: argparse.Namespace, resolver: CredentialResolver) -> int:
    account = parse_account(args.url)
    print(build_oauthbearer_token(account, resolver).decode("ascii"))
    return 0


def _cmd_store_password(args: argparse.Namespace) -> int:
    password = getpass.getpass(f"Password for {args.user} ({args.protocol}): ")
    if not set_password(AccountType(args.protocol), args.user, password):
        print("ERROR: could not store password in keyring", file=sys.stderr)
        return 1
    return 0


def _cmd_forget_password(args: argparse.Namespace) -> int:
    if not delete_password(AccountType(args.protocol), args.user):
        print("ERROR: could not remove password from keyring", file=sys.stderr)
        return 1
    return 0


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "store-password":
        return _cmd_store_password(args)
    if args.command == "forget-password":
        return _cmd_forget_password(args)

    config = load_config(args.config)
    resolver = CredentialResolver(config, interactive=False if args.batch else None)
    try:
        if args.command == "match":
            return _cmd_match(args, config)
        if args.command == "resolve":
            return _cmd_resolve(args, resolver)
        if args.command == "oauthbearer":
            return _cmd_oauthbearer(args, resolver)
    except AccountError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    parser.error(f"unknown command {args.command}")
    return 2


def main(argv: list[str] | None = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
