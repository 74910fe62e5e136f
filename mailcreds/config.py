"""Application configuration — paths, per-protocol credential overrides, persistence."""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from mailcreds.models.account import PROTOCOLS, AccountType

APP_NAME = "mailcreds"
APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

# ── Directories ───────────────────────────────────────────────────────────────

_XDG_DATA = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
_XDG_CONFIG = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

DATA_DIR: Path = _XDG_DATA / "mailcreds"
CONFIG_DIR: Path = _XDG_CONFIG / "mailcreds"
LOG_PATH: Path = DATA_DIR / "mailcreds.log"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.json"

# ── Environment ───────────────────────────────────────────────────────────────

BATCH_ENV_VAR = "MAILCREDS_BATCH"


def is_interactive() -> bool:
    """Prompting is allowed only on a terminal and outside batch mode."""
    if os.environ.get(BATCH_ENV_VAR):
        return False
    return sys.stdin is not None and sys.stdin.isatty()


# ── Overrides ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProtocolSettings:
    user: str | None = None
    login: str | None = None
    password: str | None = field(default=None, repr=False)
    oauth_refresh_command: str | None = None


@dataclass(frozen=True)
class Config:
    """
    Read-only credential overrides keyed by protocol.

    Lookups honour the protocol capability table, so a login configured for
    POP or a refresh command configured for NNTP is never returned.
    """
    protocols: Mapping[AccountType, ProtocolSettings] = field(default_factory=dict)

    def settings(self, account_type: AccountType) -> ProtocolSettings:
        return self.protocols.get(account_type) or ProtocolSettings()

    def user(self, account_type: AccountType) -> str | None:
        if not PROTOCOLS[account_type].user_override:
            return None
        return self.settings(account_type).user

    def login(self, account_type: AccountType) -> str | None:
        if not PROTOCOLS[account_type].login_override:
            return None
        return self.settings(account_type).login

    def password(self, account_type: AccountType) -> str | None:
        return self.settings(account_type).password

    def oauth_refresh_command(self, account_type: AccountType) -> str | None:
        if not PROTOCOLS[account_type].oauth:
            return None
        return self.settings(account_type).oauth_refresh_command


# ── Persistence ───────────────────────────────────────────────────────────────

def _str_or_none(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def config_from_dict(data: Mapping[str, Any]) -> Config:
    """Build a Config from the settings.json layout: one object per protocol name."""
    protocols: dict[AccountType, ProtocolSettings] = {}
    for account_type in AccountType:
        section = data.get(account_type.value)
        if not isinstance(section, dict):
            continue
        protocols[account_type] = ProtocolSettings(
            user=_str_or_none(section.get("user")),
            login=_str_or_none(section.get("login")),
            password=_str_or_none(section.get("password")),
            oauth_refresh_command=_str_or_none(section.get("oauth_refresh_command")),
        )
    return Config(protocols=protocols)


def load_config(path: Path | str = SETTINGS_PATH) -> Config:
    """Load settings from disk, falling back to an empty Config."""
    path = Path(path)
    if not path.exists():
        return Config()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:
        logger.warning("Could not load settings from %s: %s", path, exc)
        return Config()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings in %s: expected a JSON object", path)
        return Config()
    return config_from_dict(data)
