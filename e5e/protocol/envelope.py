from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from e5e.protocol.types import Return


@dataclass(frozen=True, slots=True)
class Envelope:
    """The single JSON document written to stdout per invocation."""

    output: str
    result: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "output": self.output,
            "result": self.result,
        }

    def to_json(self) -> str:
        """
        Serialize to compact JSON.

        Raises ValueError for non-finite floats and circular structures, and
        TypeError for values with no JSON form.
        """
        return json.dumps(
            self.to_dict(),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_default,
        )


def _encode_default(value: Any) -> Any:
    if isinstance(value, Return):
        return _dump_return(value)
    if isinstance(value, BaseModel):
        # python mode keeps floats as floats so allow_nan still applies.
        return value.model_dump(mode="python", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    try:
        return to_jsonable_python(value)
    except Exception as exc:
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        ) from exc


def _dump_return(value: Return) -> dict[str, Any]:
    # Empty top-level fields are omitted: zero status, empty headers, empty
    # type and a missing data value. Nested values are kept as they are.
    dumped = value.model_dump(mode="python", by_alias=True)
    return {
        key: item
        for key, item in dumped.items()
        if item is not None and (key == "data" or item not in (0, "", {}))
    }
