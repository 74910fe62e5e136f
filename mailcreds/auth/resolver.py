"""Credential resolution — fill user, login and password into an Account on demand."""
from __future__ import annotations

import logging

from mailcreds.auth.errors import AccountError, NonInteractiveError, PromptFailedError
from mailcreds.auth.prompt import Prompter, TerminalPrompter
from mailcreds.config import Config, is_interactive
from mailcreds.models.account import Account, AccountFlag
from mailcreds.utils import keyring_store
from mailcreds.utils.sysuser import system_username

logger = logging.getLogger(__name__)


class CredentialResolver:
    """
    Resolve credentials from, in order: the account itself, the per-protocol
    overrides in config, the system keyring (passwords only, keyed by the
    account's own login or user), and an interactive prompt.

    Every method mutates the account in place and is a no-op once the
    corresponding flag is set. Failures raise an AccountError subclass.
    """

    def __init__(
        self,
        config: Config,
        prompter: Prompter | None = None,
        interactive: bool | None = None,
        use_keyring: bool = True,
    ) -> None:
        self.config = config
        self.prompter = prompter if prompter is not None else TerminalPrompter()
        self.interactive = is_interactive() if interactive is None else interactive
        self.use_keyring = use_keyring

    def resolve_user(self, account: Account) -> None:
        if account.has(AccountFlag.USER):
            return

        configured = self.config.user(account.type)
        if configured:
            logger.debug("Using configured %s user for %s", account.type.value, account.host)
            account.set_user(configured)
            return

        if not self.interactive:
            raise NonInteractiveError(f"No username for {account.host} and prompting is disabled")

        user = self.prompter.prompt_text(f"Username at {account.host}: ", system_username())
        if user is None:
            raise PromptFailedError(f"No username entered for {account.host}")
        account.set_user(user)

    def resolve_login(self, account: Account) -> None:
        if account.has(AccountFlag.LOGIN):
            return

        configured = self.config.login(account.type)
        if configured:
            logger.debug("Using configured %s login for %s", account.type.value, account.host)
            account.set_login(configured)
            return

        try:
            self.resolve_user(account)
        except AccountError:
            logger.debug("Couldn't get user info for %s", account.host)
            raise
        account.set_login(account.user)

    def resolve_password(self, account: Account) -> None:
        if account.has(AccountFlag.PASS):
            return

        configured = self.config.password(account.type)
        if configured:
            logger.debug("Using configured %s password for %s", account.type.value, account.host)
            account.set_password(configured)
            return

        if account.has(AccountFlag.LOGIN):
            who = account.login
        elif account.has(AccountFlag.USER):
            who = account.user
        else:
            who = ""

        if who and self.use_keyring:
            stored = keyring_store.get_password(account.type, who)
            if stored:
                logger.debug("Using keyring %s password for %s@%s", account.type.value, who, account.host)
                account.set_password(stored)
                return

        if not self.interactive:
            raise NonInteractiveError(f"No password for {account.host} and prompting is disabled")

        password = self.prompter.prompt_secret(f"Password for {who}@{account.host}: ")
        if password is None:
            raise PromptFailedError(f"No password entered for {who}@{account.host}")
        account.set_password(password)

    @staticmethod
    def unset_password(account: Account) -> None:
        """Forget that the password is valid, e.g. after the server rejected it."""
        account.flags &= ~AccountFlag.PASS
