"""Terminal prompts for usernames and passwords."""
from __future__ import annotations

import getpass
from typing import Protocol


class Prompter(Protocol):
    def prompt_text(self, label: str, default: str = "") -> str | None: ...

    def prompt_secret(self, label: str) -> str | None: ...


class TerminalPrompter:
    """Reads from the controlling terminal. Returns None when the user aborts."""

    def prompt_text(self, label: str, default: str = "") -> str | None:
        shown = f"{label}[{default}] " if default else label
        try:
            value = input(shown)
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        return value or default

    def prompt_secret(self, label: str) -> str | None:
        try:
            return getpass.getpass(label)
        except (EOFError, KeyboardInterrupt):
            print()
            return None
