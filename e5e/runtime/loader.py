from __future__ import annotations

import importlib
import inspect
from typing import Any

from e5e.runtime.errors import HandlerLoadError


def load_handler(spec: str) -> Any:
    """
    Import a handler from ``package.module:attribute``.

    Classes are instantiated without arguments so their methods are bound.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise HandlerLoadError(spec, detail="expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise HandlerLoadError(spec, detail=str(exc)) from exc

    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise HandlerLoadError(spec, detail=str(exc)) from exc

    if inspect.isclass(target):
        target = target()
    return target
