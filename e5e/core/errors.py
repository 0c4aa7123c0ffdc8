from __future__ import annotations

from dataclasses import dataclass


@dataclass
class E5EError(Exception):
    code: str
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        # The message alone is the diagnostic written to stderr; detail only
        # goes to the log.
        return self.message


def format_error(error: BaseException) -> str:
    if isinstance(error, E5EError):
        prefix = f"[{error.code}] " if error.code else ""
        if error.detail:
            return f"{prefix}{error.message} ({error.detail})"
        return f"{prefix}{error.message}"
    return f"{error}"
