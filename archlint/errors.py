"""Error types raised by the linter."""

from __future__ import annotations

from typing import Any

from archlint.reference import Reference

__all__ = ["UserSpaceError", "ReferableError"]


class UserSpaceError(Exception):
    """A failure already explained to the user by the command output.

    ``payload`` carries the output model that describes the failure.
    """

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload


class ReferableError(Exception):
    """An error bound to a location in a source file."""

    def __init__(self, original: BaseException, reference: Reference) -> None:
        super().__init__(str(original))
        self.original = original
        self.reference = reference

    def __str__(self) -> str:
        return str(self.original)