from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

HANDLER_NAME = "e5e.runtime"


def get_logger(name: str = "e5e") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream=None,
    log_dir: Path | None = None,
    filename: str = "runtime.log",
) -> None:
    # stdout and stderr belong to the invocation contract, so records only
    # ever go to an explicit stream or a file under log_dir.
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")
    logger = get_logger()
    logger.setLevel(level_value)
    logger.propagate = False

    # Only the handler installed here is replaced; handlers attached by a
    # host stay in place.
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
            existing.close()

    if stream is not None:
        handler: logging.Handler = logging.StreamHandler(stream)
    elif log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / filename, mode="a", encoding="utf-8")
    else:
        handler = logging.NullHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    payload = {"event": event, **fields}
    logger.info(json.dumps(payload, sort_keys=True, default=str))
