"""Account dataclass — one remote endpoint and its credential state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto

HOST_MAX_LEN = 127
USER_MAX_LEN = 127
LOGIN_MAX_LEN = 127
PASS_MAX_LEN = 255


class AccountType(str, Enum):
    IMAP = "imap"
    POP = "pop"
    SMTP = "smtp"
    NNTP = "nntp"


class AccountFlag(Flag):
    NONE = 0
    USER = auto()
    LOGIN = auto()
    PASS = auto()
    PORT = auto()
    SSL = auto()


@dataclass(frozen=True)
class ProtocolCaps:
    """What each protocol supports; consulted instead of per-type branches."""
    scheme: str
    ssl_scheme: str
    user_override: bool
    login_override: bool
    oauth: bool


PROTOCOLS: dict[AccountType, ProtocolCaps] = {
    AccountType.IMAP: ProtocolCaps("imap", "imaps", user_override=True, login_override=True, oauth=True),
    AccountType.POP: ProtocolCaps("pop", "pops", user_override=True, login_override=False, oauth=True),
    AccountType.SMTP: ProtocolCaps("smtp", "smtps", user_override=False, login_override=False, oauth=True),
    AccountType.NNTP: ProtocolCaps("nntp", "nntps", user_override=True, login_override=False, oauth=False),
}


@dataclass
class Account:
    type: AccountType
    host: str
    port: int = 0
    user: str = ""
    login: str = ""
    password: str = field(default="", repr=False)
    flags: AccountFlag = AccountFlag.NONE

    def __post_init__(self) -> None:
        self.host = self.host[:HOST_MAX_LEN]

    @property
    def caps(self) -> ProtocolCaps:
        return PROTOCOLS[self.type]

    @property
    def ssl_enabled(self) -> bool:
        return AccountFlag.SSL in self.flags

    def has(self, flag: AccountFlag) -> bool:
        return flag in self.flags

    # Setters copy the value and mark the field live in one step.

    def set_user(self, user: str) -> None:
        self.user = user[:USER_MAX_LEN]
        self.flags |= AccountFlag.USER

    def set_login(self, login: str) -> None:
        self.login = login[:LOGIN_MAX_LEN]
        self.flags |= AccountFlag.LOGIN

    def set_password(self, password: str) -> None:
        self.password = password[:PASS_MAX_LEN]
        self.flags |= AccountFlag.PASS

    def set_port(self, port: int) -> None:
        self.port = port
        self.flags |= AccountFlag.PORT

    def set_ssl(self) -> None:
        self.flags |= AccountFlag.SSL

    def __str__(self) -> str:
        who = self.login if self.has(AccountFlag.LOGIN) else self.user if self.has(AccountFlag.USER) else ""
        where = f"{self.host}:{self.port}" if self.has(AccountFlag.PORT) else self.host
        return f"{self.type.value}://{who}@{where}" if who else f"{self.type.value}://{where}"
