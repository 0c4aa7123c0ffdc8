"""
Entrypoint handlers shared by the test suite and the subprocess tests.
"""

from __future__ import annotations

import math
import os

from pydantic import BaseModel

from e5e import Context, Entrypoints, Event, Return


class SumData(BaseModel):
    a: int
    b: int


class SumEvent(Event):
    data: SumData


class SampleEntrypoints:
    def simple(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        return None, None

    def sum(self, event: SumEvent, context: Context) -> tuple[Return | None, Exception | None]:
        return Return(data=event.data.a + event.data.b), None

    def print_stdout(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        print("print", end="")
        return None, None

    def print_fd(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        os.write(1, b"raw")
        return None, None

    def error(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        return None, Exception("error")

    def raises(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        print("before", end="")
        raise RuntimeError("boom")

    def invalid_parameters(self) -> tuple[Return | None, Exception | None]:
        return None, None

    def invalid_return(self, event: Event, context: Context) -> None:
        return None

    def invalid_return_value(self, event: Event, context: Context) -> tuple[Return | None, Exception | None]:
        return Return(data=math.inf), None

    def invalid_error_return_value(self, event: Event, context: Context) -> tuple[Return | None, int]:
        return None, 1

    def untyped(self, event, context):
        return {"event": event, "context": context}, None

    def untyped_single_return(self, event, context):
        print("lost", end="")
        return "only one"

    def echo_context(self, event: Event, context: Context) -> tuple[dict, Exception | None]:
        return {"async": context.async_, "date": context.date}, None

    def _private(self, event: Event, context: Context) -> tuple[None, None]:
        return None, None

    not_callable = "value"


registry = Entrypoints()


@registry.entrypoint
def greet(event: Event, context: Context) -> tuple[Return | None, Exception | None]:
    name = (event.params or {}).get("name", ["world"])[0]
    print(f"greeting {name}", end="")
    return Return(status=200, data=f"hello {name}"), None


@registry.entrypoint(name="Fail")
def fail(event: Event, context: Context) -> tuple[Return | None, Exception | None]:
    return None, ValueError("registered failure")
