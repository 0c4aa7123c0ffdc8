"""
Failures raised by the invocation runtime.

Every failure is terminal for the current invocation. The runtime never
prints these itself; the bootstrap writes ``str(error)`` to stderr and exits
with ``ExitCode.FAILURE``.
"""

from __future__ import annotations

from e5e.core.errors import E5EError


class InvocationError(E5EError):
    """Base class for all invocation runtime errors."""


class InvalidArgumentCount(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="invalid_argument_count",
            message="invalid number of process arguments",
            detail=detail,
        )


class HandlerLoadError(InvocationError):
    def __init__(self, spec: str, detail: str | None = None) -> None:
        super().__init__(
            code="handler_load_failed",
            message=f"cannot load handler '{spec}'",
            detail=detail,
        )


class UnknownEntrypoint(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="unknown_entrypoint",
            message="invalid entrypoint name",
            detail=detail,
        )


class InvalidParameterCount(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="invalid_parameter_count",
            message="invalid number of entrypoint parameters",
            detail=detail,
        )


class InvalidReturnCount(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="invalid_return_count",
            message="invalid number of entrypoint return values",
            detail=detail,
        )


class EventReadError(InvocationError):
    def __init__(self, path: str, detail: str | None = None) -> None:
        super().__init__(
            code="event_read_failed",
            message=f"cannot read event object file '{path}'",
            detail=detail,
        )


class ContextReadError(InvocationError):
    def __init__(self, path: str, detail: str | None = None) -> None:
        super().__init__(
            code="context_read_failed",
            message=f"cannot read context object file '{path}'",
            detail=detail,
        )


class EventDecodeError(InvocationError):
    def __init__(self, type_name: str, detail: str | None = None) -> None:
        super().__init__(
            code="event_decode_failed",
            message=f"cannot apply event object to '{type_name}' type",
            detail=detail,
        )


class ContextDecodeError(InvocationError):
    def __init__(self, type_name: str, detail: str | None = None) -> None:
        super().__init__(
            code="context_decode_failed",
            message=f"cannot apply context object to '{type_name}' type",
            detail=detail,
        )


class InvalidErrorValue(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="invalid_error_value",
            message="invalid error return value",
            detail=detail,
        )


class EnvelopeEncodeError(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="envelope_encode_failed",
            message="cannot marshal return value",
            detail=detail,
        )


class UnresolvedAnnotation(InvocationError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            code="unresolved_annotation",
            message="cannot resolve entrypoint type annotations",
            detail=detail,
        )
