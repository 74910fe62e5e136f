"""Shared fixtures: scripted prompter, configs, fixed system username."""
from __future__ import annotations

import pytest

from mailcreds.config import Config, ProtocolSettings
from mailcreds.models.account import AccountType


class FakePrompter:
    """Answers prompts from queues; None in a queue means the user cancelled."""

    def __init__(self, texts=(), secrets=()):
        self.texts = list(texts)
        self.secrets = list(secrets)
        self.text_calls: list[tuple[str, str]] = []
        self.secret_calls: list[str] = []

    def prompt_text(self, label, default=""):
        self.text_calls.append((label, default))
        return self.texts.pop(0)

    def prompt_secret(self, label):
        self.secret_calls.append(label)
        return self.secrets.pop(0)


@pytest.fixture(autouse=True)
def fixed_system_user(monkeypatch):
    monkeypatch.setattr("mailcreds.utils.sysuser.getpass.getuser", lambda: "localuser")
    return "localuser"


@pytest.fixture
def empty_config():
    return Config()


@pytest.fixture
def full_config():
    return Config(protocols={
        AccountType.IMAP: ProtocolSettings(
            user="imapuser",
            login="imaplogin",
            password="imappass",
            oauth_refresh_command="imap-token",
        ),
        AccountType.POP: ProtocolSettings(user="popuser", login="poplogin", password="poppass"),
        AccountType.SMTP: ProtocolSettings(
            user="smtpuser", password="smtppass", oauth_refresh_command="smtp-token",
        ),
        AccountType.NNTP: ProtocolSettings(
            user="newsuser", password="newspass", oauth_refresh_command="nntp-token",
        ),
    })


@pytest.fixture(autouse=True)
def empty_keyring(monkeypatch):
    """Keep tests away from the real system keyring."""
    monkeypatch.setattr("keyring.get_password", lambda service, user: None)
