"""
Entrypoint lookup by name and signature shape checks.

An entrypoint takes exactly two parameters (event, context) and returns
exactly two values as a tuple ``(result, error)``. A return annotation lets
the shape be checked before the call; unannotated entrypoints are checked
against what they actually return.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable

from e5e.runtime.errors import (
    InvalidParameterCount,
    InvalidReturnCount,
    UnknownEntrypoint,
    UnresolvedAnnotation,
)

ENTRYPOINT_PARAMETERS = 2
ENTRYPOINT_RETURN_SLOTS = 2

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class EntrypointDescriptor:
    name: str
    event_type: Any
    context_type: Any
    invoke: Callable[[Any, Any], Any]
    return_slots: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "event_type": type_name(self.event_type),
            "context_type": type_name(self.context_type),
        }


def type_name(target: Any) -> str:
    name = getattr(target, "__name__", None) or getattr(target, "_name", None)
    return str(name) if name else str(target)


def find_entrypoint(handler: Any, name: str) -> Callable[..., Any]:
    """Return the public callable member of ``handler`` called ``name``."""
    # Imported here: the registry builds on the descriptors defined above.
    from e5e.runtime.registry import Entrypoints

    if isinstance(handler, Entrypoints):
        return handler.lookup(name)

    if not name or name.startswith("_"):
        raise UnknownEntrypoint(detail=name)

    member = getattr(handler, name, None)
    if member is None or not callable(member):
        raise UnknownEntrypoint(detail=name)
    return member


def describe_entrypoint(name: str, func: Callable[..., Any]) -> EntrypointDescriptor:
    """Check the shape of ``func`` and capture its parameter types."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterCount(detail=f"{name}: {exc}") from exc

    params = list(signature.parameters.values())
    if len(params) != ENTRYPOINT_PARAMETERS or any(
        param.kind not in _POSITIONAL for param in params
    ):
        raise InvalidParameterCount(
            detail=f"{name} declares {len(params)} parameter(s)"
        )

    hints = _type_hints(name, func)
    if "return" in hints:
        return_hint = hints["return"]
    else:
        return_hint = signature.return_annotation

    slots = count_return_slots(return_hint)
    if slots is not None and slots != ENTRYPOINT_RETURN_SLOTS:
        raise InvalidReturnCount(detail=f"{name} declares {slots} return value(s)")

    event_param, context_param = params
    return EntrypointDescriptor(
        name=name,
        event_type=hints.get(event_param.name, Any),
        context_type=hints.get(context_param.name, Any),
        invoke=func,
        return_slots=slots,
    )


def resolve_entrypoint(handler: Any, name: str) -> EntrypointDescriptor:
    return describe_entrypoint(name, find_entrypoint(handler, name))


def list_entrypoints(handler: Any) -> list[EntrypointDescriptor]:
    """Every valid entrypoint of ``handler``, sorted by name."""
    from e5e.runtime.registry import Entrypoints

    if isinstance(handler, Entrypoints):
        return [handler.descriptor(name) for name in handler.names()]

    found: list[EntrypointDescriptor] = []
    for name in sorted(dir(handler)):
        if name.startswith("_"):
            continue
        try:
            found.append(resolve_entrypoint(handler, name))
        except (
            UnknownEntrypoint,
            InvalidParameterCount,
            InvalidReturnCount,
            UnresolvedAnnotation,
        ):
            continue
    return found


def count_return_slots(hint: Any) -> int | None:
    """
    Number of values a return annotation declares, or None when unknown.
    """
    if hint is inspect.Signature.empty or isinstance(hint, str):
        return None
    if hint is None or hint is type(None):
        return 0
    if hint is tuple or hint is typing.Tuple:
        return None
    if typing.get_origin(hint) is tuple:
        args = typing.get_args(hint)
        if Ellipsis in args:
            return None
        if args == ((),):
            return 0
        return len(args)
    return 1


def split_return(name: str, returned: Any) -> tuple[Any, Any]:
    """Unpack ``(result, error)`` from what an entrypoint actually returned."""
    if isinstance(returned, tuple) and len(returned) == ENTRYPOINT_RETURN_SLOTS:
        result, error = returned
        return result, error

    if returned is None:
        size = 0
    elif isinstance(returned, tuple):
        size = len(returned)
    else:
        size = 1
    raise InvalidReturnCount(detail=f"{name} returned {size} value(s)")


def _type_hints(name: str, func: Callable[..., Any]) -> dict[str, Any]:
    if inspect.ismethod(func):
        target = func.__func__
    elif inspect.isfunction(func):
        target = func
    else:
        target = getattr(type(func), "__call__", func)
    target = inspect.unwrap(target)
    try:
        return typing.get_type_hints(target)
    except TypeError:
        return {}
    except NameError as exc:
        # A forward reference to a name only imported for type checking.
        missing = getattr(exc, "name", None) or str(exc)
        raise UnresolvedAnnotation(detail=f"{name}: {missing}") from exc
