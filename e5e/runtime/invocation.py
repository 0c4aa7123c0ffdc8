from __future__ import annotations

import json
import sys
from typing import Any, Optional, Sequence

from e5e.core.config import RuntimeConfig, get_runtime_config
from e5e.core.errors import format_error
from e5e.core.logging import get_logger, log_event
from e5e.protocol.envelope import Envelope
from e5e.protocol.types import Return
from e5e.protocol.validator import EnvelopeValidator, ProtocolError, SchemaName
from e5e.runtime.capture import capture_stdout
from e5e.runtime.decoder import decode_context, decode_event
from e5e.runtime.errors import (
    EnvelopeEncodeError,
    InvalidErrorValue,
    InvocationError,
)
from e5e.runtime.io import read_payload, write_diagnostic, write_envelope
from e5e.runtime.request import parse_invocation
from e5e.runtime.resolver import (
    EntrypointDescriptor,
    describe_entrypoint,
    find_entrypoint,
    split_return,
)
from e5e.runtime.state import ExitCode, InvocationState


class InvocationRuntime:
    """
    Runs exactly one entrypoint invocation.

    ``run`` owns the two outcomes that produce an envelope (success and a
    user-reported error) and returns their exit code. Every other failure is
    raised as an ``InvocationError`` for the bootstrap to report.
    """

    def __init__(
        self,
        handler: Any,
        *,
        config: Optional[RuntimeConfig] = None,
        validator: Optional[EnvelopeValidator] = None,
    ) -> None:
        self.handler = handler
        self.config = config or get_runtime_config()
        self.validator = validator or EnvelopeValidator()
        self.state: InvocationState = InvocationState.START
        self._logger = get_logger("e5e.runtime")

    def run(self, argv: Optional[Sequence[str]] = None) -> ExitCode:
        if self.state is not InvocationState.START:
            raise RuntimeError("An invocation runtime can only run once.")

        try:
            return self._run(sys.argv if argv is None else argv)
        except InvocationError as exc:
            self._advance(InvocationState.FAILED)
            log_event(self._logger, "invocation_failed", error=format_error(exc))
            raise

    def _run(self, argv: Sequence[str]) -> ExitCode:
        request = parse_invocation(argv)
        self._advance(InvocationState.ARGS_OK)

        func = find_entrypoint(self.handler, request.entrypoint)
        self._advance(InvocationState.METHOD_RESOLVED, entrypoint=request.entrypoint)

        descriptor = describe_entrypoint(request.entrypoint, func)
        self._advance(InvocationState.SHAPE_OK)

        source = self.config.payload_source
        event = decode_event(
            read_payload(request.event, kind="event", source=source),
            descriptor.event_type,
        )
        context = decode_context(
            read_payload(request.context, kind="context", source=source),
            descriptor.context_type,
        )
        self._advance(InvocationState.PAYLOADS_DECODED)

        result, error, output = self._invoke(descriptor, event, context)
        return self._finish(result, error, output)

    # -------------------------
    # Invocation
    # -------------------------

    def _invoke(
        self, descriptor: EntrypointDescriptor, event: Any, context: Any
    ) -> tuple[Any, Any, str]:
        raised: Optional[Exception] = None
        returned: Any = None

        with capture_stdout(self.config.capture_mode) as captured:
            self._advance(InvocationState.INVOKED)
            try:
                returned = descriptor.invoke(event, context)
            except Exception as exc:
                raised = exc

        if raised is not None:
            return None, raised, captured.text

        result, error = split_return(descriptor.name, returned)
        return result, error, captured.text

    def _finish(self, result: Any, error: Any, output: str) -> ExitCode:
        if error is not None:
            if not isinstance(error, Exception):
                raise InvalidErrorValue(detail=type(error).__name__)

            self._advance(InvocationState.ERROR_PATH)
            write_diagnostic(str(error))
            write_envelope(self._encode(Envelope(output=output, result=None)))
            self._advance(InvocationState.TERMINATED, exit_code=int(ExitCode.USER_ERROR))
            return ExitCode.USER_ERROR

        self._advance(InvocationState.SUCCESS_PATH)
        write_envelope(self._encode(Envelope(output=output, result=result)))
        self._advance(InvocationState.TERMINATED, exit_code=int(ExitCode.SUCCESS))
        return ExitCode.SUCCESS

    # -------------------------
    # Envelope helpers
    # -------------------------

    def _encode(self, envelope: Envelope) -> str:
        try:
            text = envelope.to_json()
            document = json.loads(text)
            self.validator.validate(document, schema=SchemaName.OUTPUT)
            if isinstance(envelope.result, Return):
                self.validator.validate(document["result"], schema=SchemaName.RETURN)
        except (TypeError, ValueError, ProtocolError) as exc:
            raise EnvelopeEncodeError(detail=str(exc)) from exc
        return text

    def _advance(self, state: InvocationState, **fields: Any) -> None:
        self.state = state
        log_event(self._logger, "state", state=state.name, **fields)
