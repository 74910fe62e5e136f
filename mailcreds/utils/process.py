"""Run an external command and read its standard output."""
from __future__ import annotations

import logging
import subprocess
from contextlib import contextmanager
from typing import IO, Iterator, cast

logger = logging.getLogger(__name__)


@contextmanager
def run_command(command: str) -> Iterator[IO[str]]:
    """
    Start command through the shell and yield its stdout, decoded as UTF-8.

    The stream is closed and the process waited for when the block exits,
    whatever the outcome. Raises OSError when the command cannot be started.
    """
    proc = subprocess.Popen(
        command,
        shell=True,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        text=True,
        encoding="utf-8",
    )
    stdout = cast(IO[str], proc.stdout)
    try:
        yield stdout
    finally:
        stdout.close()
        returncode = proc.wait()
        if returncode != 0:
            logger.warning("Command exited with status %d: %s", returncode, command)


def read_line(stream: IO[str]) -> str:
    """One line without its line terminator; '' at end of stream."""
    return stream.readline().rstrip("\r\n")
