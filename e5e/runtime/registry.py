from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar, overload

from e5e.runtime.errors import UnknownEntrypoint
from e5e.runtime.resolver import EntrypointDescriptor, describe_entrypoint

F = TypeVar("F", bound=Callable[..., Any])


class Entrypoints:
    """
    Explicit name -> entrypoint table.

    Shapes are checked when an entrypoint is registered, so a malformed
    entrypoint fails at import time rather than on invocation.
    """

    def __init__(self) -> None:
        self._table: dict[str, EntrypointDescriptor] = {}

    @overload
    def entrypoint(self, func: F) -> F: ...

    @overload
    def entrypoint(self, *, name: str | None = None) -> Callable[[F], F]: ...

    def entrypoint(self, func=None, *, name=None):
        """Register a function; usable as ``@entrypoint`` or ``@entrypoint(name=...)``."""

        def decorator(target: F) -> F:
            self.register(target, name=name)
            return target

        if func is not None:
            return decorator(func)
        return decorator

    def register(
        self, func: Callable[..., Any], *, name: str | None = None
    ) -> EntrypointDescriptor:
        entry_name = name or getattr(func, "__name__", None)
        if not entry_name:
            raise ValueError("Entrypoint name is required for anonymous callables.")
        if entry_name in self._table:
            raise ValueError(f"Entrypoint '{entry_name}' is already registered.")

        descriptor = describe_entrypoint(entry_name, func)
        self._table[entry_name] = descriptor
        return descriptor

    def lookup(self, name: str) -> Callable[..., Any]:
        return self.descriptor(name).invoke

    def descriptor(self, name: str) -> EntrypointDescriptor:
        try:
            return self._table[name]
        except KeyError:
            raise UnknownEntrypoint(detail=name) from None

    def names(self) -> list[str]:
        return sorted(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._table)
