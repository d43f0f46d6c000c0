"""Minimal severity-filtered logging to a text stream."""

from __future__ import annotations

import functools
import os
import re
import sys
from enum import IntEnum
from typing import Mapping, Optional, TextIO

__all__ = [
    "Severity",
    "FatalLogError",
    "parse_log_level",
    "min_log_level_from_env",
    "log",
]

ENV_VAR = "GEMINI_CPP_MIN_LOG_LEVEL"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Severity(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3


class FatalLogError(RuntimeError):
    """Raised after a fatal message has been written."""


def parse_log_level(value: Optional[str]) -> int:
    """Parse the leading integer of ``value``; anything unparsable yields 0."""
    if value is None:
        return 0
    match = _INT_PREFIX.match(value)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def min_log_level_from_env(environ: Optional[Mapping[str, str]] = None) -> int:
    """Read the minimum log level from the environment."""
    env = os.environ if environ is None else environ
    return parse_log_level(env.get(ENV_VAR))


@functools.lru_cache(maxsize=None)
def _process_min_level() -> int:
    # Read once, on first use, like a function-local static.
    return min_log_level_from_env()


def log(
    severity: int,
    message: object,
    fname: Optional[str] = None,
    line: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write ``[fname:line] message`` if severity passes the minimum level.

    Fatal messages are always written and then raise :class:`FatalLogError`.
    """
    if fname is None or line is None:
        caller = sys._getframe(1)
        if fname is None:
            fname = caller.f_code.co_filename
        if line is None:
            line = caller.f_lineno
    out = sys.stderr if stream is None else stream
    text = f"[{fname}:{line}] {message}"
    if severity >= Severity.FATAL:
        out.write(text + "\n")
        out.flush()
        raise FatalLogError(text)
    if severity >= _process_min_level():
        out.write(text + "\n")