"""Errors raised while building or resolving accounts."""
from __future__ import annotations


class AccountError(Exception):
    pass


class MissingHostError(AccountError):
    pass


class NonInteractiveError(AccountError):
    """A credential is needed but prompting is disabled."""


class PromptFailedError(AccountError):
    """The user cancelled or the prompt could not be read."""


class NoRefreshCommandError(AccountError):
    pass


class RefreshCommandError(AccountError):
    """The OAuth refresh command could not be started."""


class EmptyTokenError(AccountError):
    pass
