import sys
from pathlib import Path
from typing import Literal

from e5e.runtime.errors import ContextReadError, EventReadError

PayloadSource = Literal["inline", "file"]
PayloadKind = Literal["event", "context"]


def read_payload(argument: str, *, kind: PayloadKind, source: PayloadSource = "inline") -> str:
    """Return the JSON text for a payload argument."""
    if source == "inline":
        return argument

    try:
        return Path(argument).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        if kind == "event":
            raise EventReadError(argument, detail=str(exc)) from exc
        raise ContextReadError(argument, detail=str(exc)) from exc


def write_envelope(text: str) -> None:
    """Write the serialized envelope as the single stdout line."""
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def write_diagnostic(message: str) -> None:
    """Write a human-readable message to stderr."""
    sys.stderr.write(message + "\n")
    sys.stderr.flush()
