from __future__ import annotations

from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from e5e.runtime.errors import ContextDecodeError, EventDecodeError
from e5e.runtime.resolver import type_name


def decode_payload(text: str, target: Any) -> Any:
    """
    Decode JSON text into ``target``.

    Unknown fields are ignored and missing fields take their defaults (both
    follow the target model's config); type mismatches are not coerced.

    A top-level ``null`` leaves the target at its zero value: ``None`` where
    the target accepts it, otherwise an instance built from no fields.
    """
    adapter = TypeAdapter(target)
    try:
        return adapter.validate_json(text, strict=True)
    except ValidationError:
        if text.strip() != "null":
            raise
    return adapter.validate_json("{}", strict=True)


def decode_event(text: str, target: Any) -> Any:
    try:
        return decode_payload(text, target)
    except (ValidationError, PydanticSchemaGenerationError) as exc:
        raise EventDecodeError(type_name(target), detail=_summarize(exc)) from exc


def decode_context(text: str, target: Any) -> Any:
    try:
        return decode_payload(text, target)
    except (ValidationError, PydanticSchemaGenerationError) as exc:
        raise ContextDecodeError(type_name(target), detail=_summarize(exc)) from exc


def _summarize(exc: Exception) -> str:
    if not isinstance(exc, ValidationError):
        return str(exc)
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', '')}"
