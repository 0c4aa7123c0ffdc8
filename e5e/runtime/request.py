from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from e5e.runtime.errors import InvalidArgumentCount

EXPECTED_ARGUMENT_COUNT = 4


@dataclass(frozen=True)
class InvocationRequest:
    """The four positional process arguments of one invocation."""

    binary: str
    entrypoint: str
    event: str
    context: str


def parse_invocation(argv: Sequence[str]) -> InvocationRequest:
    """
    Validate ``<binary> <entrypoint> <event> <context>``.
    """
    if len(argv) != EXPECTED_ARGUMENT_COUNT:
        raise InvalidArgumentCount(
            detail=f"expected {EXPECTED_ARGUMENT_COUNT}, got {len(argv)}"
        )

    binary, entrypoint, event, context = (str(value) for value in argv)
    return InvocationRequest(
        binary=binary,
        entrypoint=entrypoint,
        event=event,
        context=context,
    )
