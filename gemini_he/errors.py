"""Status codes and the exception raised when an operation fails."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Code", "GeminiError", "code_message"]


class Code(IntEnum):
    """Outcome of an encoding or shape operation."""

    OK = 0
    ERR_CONFIG = 1
    ERR_NULL_POINTER = 2
    ERR_DIM_MISMATCH = 3
    ERR_SEAL_MEMORY = 4
    ERR_KEY_MISSING = 5
    ERR_OUT_BOUND = 6
    ERR_INVALID_ARG = 7
    ERR_INTERNAL = 8


_MESSAGES = {
    Code.OK: "ok",
    Code.ERR_CONFIG: "Error: configuration",
    Code.ERR_NULL_POINTER: "Error: null pointer",
    Code.ERR_DIM_MISMATCH: "Error: dimension mismatch",
    Code.ERR_SEAL_MEMORY: "Error: memory allocation",
    Code.ERR_OUT_BOUND: "Error: out-of-bound",
    Code.ERR_INVALID_ARG: "Error: invalid arguments",
    Code.ERR_INTERNAL: "Error: internal error",
}


def code_message(code: Code) -> str:
    """Return the human-readable description of ``code``."""
    return _MESSAGES.get(code, "Unknown code")


class GeminiError(Exception):
    """Raised when an operation fails; carries the failing :class:`Code`."""

    def __init__(self, code: Code, detail: str = "") -> None:
        self.code = code
        self.detail = detail
        message = code_message(code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)