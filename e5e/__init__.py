"""Python runtime for e5e entrypoints."""

from e5e.protocol.types import Context, Event, Return
from e5e.runtime.errors import (
    ContextDecodeError,
    ContextReadError,
    EnvelopeEncodeError,
    EventDecodeError,
    EventReadError,
    HandlerLoadError,
    InvalidArgumentCount,
    InvalidErrorValue,
    InvalidParameterCount,
    InvalidReturnCount,
    InvocationError,
    UnknownEntrypoint,
    UnresolvedAnnotation,
)
from e5e.runtime.registry import Entrypoints
from e5e.runtime.state import ExitCode
from e5e.sdk import main, run, start

__version__ = "0.1.0"

__all__ = [
    "Context",
    "ContextDecodeError",
    "ContextReadError",
    "EnvelopeEncodeError",
    "Entrypoints",
    "Event",
    "EventDecodeError",
    "EventReadError",
    "ExitCode",
    "HandlerLoadError",
    "InvalidArgumentCount",
    "InvalidErrorValue",
    "InvalidParameterCount",
    "InvalidReturnCount",
    "InvocationError",
    "Return",
    "UnknownEntrypoint",
    "UnresolvedAnnotation",
    "main",
    "run",
    "start",
]
