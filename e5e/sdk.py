from __future__ import annotations

import sys
import traceback
from typing import Any, NoReturn, Optional, Sequence

from e5e.core.config import RuntimeConfig, get_runtime_config
from e5e.core.logging import configure_logging
from e5e.runtime.errors import HandlerLoadError, InvocationError
from e5e.runtime.invocation import InvocationRuntime
from e5e.runtime.loader import load_handler
from e5e.runtime.registry import Entrypoints
from e5e.runtime.state import ExitCode


def start(
    handler: Any,
    argv: Optional[Sequence[str]] = None,
    *,
    config: Optional[RuntimeConfig] = None,
) -> None:
    """
    Invoke the entrypoint named by the process arguments on ``handler``.

    Exits the process with 0 or -1 once an envelope has been written. Raises
    ``InvocationError`` for every failure that prevents an envelope.
    """
    runtime = InvocationRuntime(handler, config=config)
    code = runtime.run(argv)
    sys.exit(int(code))


def main(
    handler: Any = None,
    argv: Optional[Sequence[str]] = None,
    *,
    config: Optional[RuntimeConfig] = None,
) -> int:
    """
    Bootstrap: run one invocation and turn failures into the -255 exit path.

    ``handler`` may be a handler object, an ``Entrypoints`` table, a
    ``module:attribute`` string, or None to use ``E5E_HANDLER``.
    """
    config = config or get_runtime_config()
    configure_logging(
        level=config.log_level,
        format_name=config.log_format,
        log_dir=config.log_dir,
    )

    try:
        if handler is None:
            if not config.handler:
                raise HandlerLoadError("<unset>", detail="E5E_HANDLER is not set")
            handler = config.handler
        if isinstance(handler, str):
            handler = load_handler(handler)

        runtime = InvocationRuntime(handler, config=config)
        return int(runtime.run(argv))

    except InvocationError as exc:
        print(str(exc), file=sys.stderr)
        return int(ExitCode.FAILURE)

    except Exception:
        # Truly unexpected failure.
        traceback.print_exc(file=sys.stderr)
        return int(ExitCode.FAILURE)


def run(
    handler: Any = None,
    argv: Optional[Sequence[str]] = None,
    *,
    config: Optional[RuntimeConfig] = None,
) -> NoReturn:
    """Entrypoint for user scripts: ``if __name__ == "__main__": run(handler)``."""
    sys.exit(main(handler, argv, config=config))


__all__ = [
    "Entrypoints",
    "main",
    "run",
    "start",
]
