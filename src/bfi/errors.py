from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFIReadError(BFIError):
    cause: Exception  # OSError, or ValueError from a text stream that fails to decode


@dataclass
class BFIWriteError(BFIError):
    cause: OSError


@dataclass
class BFIUnbalancedParensError(BFIError):
    ip: int


def make_read_error(cause: Exception) -> BFIReadError:
    return BFIReadError(message=f"ReadError: {cause}", cause=cause)


def make_write_error(cause: OSError) -> BFIWriteError:
    return BFIWriteError(message=f"WriteError: {cause}", cause=cause)


def make_unbalanced_error(*, ip: int) -> BFIUnbalancedParensError:
    return BFIUnbalancedParensError(
        message=f"UnbalancedParens: ']' at instruction {ip} has no open '['",
        ip=ip,
    )


def format_error(err: BFIError) -> str:
    """One-line diagnostic for the command line."""
    if isinstance(err, BFIReadError):
        return f"Read error: {err.cause!r}."
    if isinstance(err, BFIWriteError):
        return f"Write error: {err.cause!r}."
    if isinstance(err, BFIUnbalancedParensError):
        return "Unbalanced parens found."
    return str(err)
