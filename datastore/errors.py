from __future__ import annotations

from typing import Optional


class StorageError(Exception):
    """Raised when the readings table cannot be read from or written to."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is None:
            return message
        return f"{message}: {self.cause}"
