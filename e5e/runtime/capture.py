"""
Process-wide stdout capture for the duration of one entrypoint call.

Two strategies:

- ``buffer`` swaps ``sys.stdout`` for an in-memory buffer. Only writes that
  go through ``sys.stdout`` are seen.
- ``pipe`` additionally points file descriptor 1 at an OS pipe drained by a
  reader thread, so writes from C extensions or child processes are seen as
  well.

Only one capture window may be open at a time; windows are serialized by a
module-level lock and are not reentrant.
"""

from __future__ import annotations

import io
import os
import sys
from contextlib import contextmanager, redirect_stdout
from dataclasses import dataclass
from enum import Enum
from threading import Lock, Thread
from typing import Iterator

_CAPTURE_LOCK = Lock()
_READ_CHUNK = 65536


class CaptureMode(str, Enum):
    BUFFER = "buffer"
    PIPE = "pipe"


@dataclass
class CapturedOutput:
    """Filled in once the capture window has been torn down."""

    text: str = ""


class _PipeDrain(Thread):
    def __init__(self, fd: int) -> None:
        super().__init__(name="e5e-stdout-drain", daemon=True)
        self._fd = fd
        self._chunks: list[bytes] = []

    def run(self) -> None:
        while True:
            chunk = os.read(self._fd, _READ_CHUNK)
            if not chunk:
                return
            self._chunks.append(chunk)

    def text(self) -> str:
        return b"".join(self._chunks).decode("utf-8", errors="replace")


@contextmanager
def capture_stdout(mode: CaptureMode | str = CaptureMode.BUFFER) -> Iterator[CapturedOutput]:
    """
    Redirect stdout until the block exits, on every exit path.

    ``CapturedOutput.text`` is only meaningful after the block has exited.
    """
    mode = CaptureMode(mode)
    captured = CapturedOutput()

    with _CAPTURE_LOCK:
        if mode is CaptureMode.PIPE:
            with _capture_to_pipe(captured):
                yield captured
        else:
            with _capture_to_buffer(captured):
                yield captured


@contextmanager
def _capture_to_buffer(captured: CapturedOutput) -> Iterator[None]:
    buffer = io.StringIO()
    try:
        with redirect_stdout(buffer):
            yield
    finally:
        captured.text = buffer.getvalue()


@contextmanager
def _capture_to_pipe(captured: CapturedOutput) -> Iterator[None]:
    # Anything already buffered belongs to the real stdout.
    if sys.stdout is not None:
        sys.stdout.flush()

    read_fd, write_fd = os.pipe()
    saved_fd = os.dup(1)
    drain = _PipeDrain(read_fd)
    drain.start()

    os.dup2(write_fd, 1)
    os.close(write_fd)
    stream = open(1, "w", encoding="utf-8", closefd=False)

    try:
        with redirect_stdout(stream):
            yield
    finally:
        stream.flush()
        stream.close()
        # Restoring fd 1 drops the last write end, so the drain sees EOF.
        os.dup2(saved_fd, 1)
        os.close(saved_fd)
        drain.join()
        os.close(read_fd)
        captured.text = drain.text()
