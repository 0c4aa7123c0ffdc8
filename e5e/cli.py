from __future__ import annotations

import argparse
import json
from typing import Sequence

from e5e import __version__
from e5e.core.config import get_runtime_config
from e5e.runtime.errors import InvocationError
from e5e.runtime.loader import load_handler
from e5e.runtime.resolver import list_entrypoints
from e5e.sdk import main as run_invocation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="e5e",
        description="e5e: run and inspect Python entrypoints locally",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    invoke_parser = subparsers.add_parser(
        "invoke",
        help="Invoke one entrypoint exactly as the platform would.",
    )
    invoke_parser.add_argument(
        "handler",
        help="Handler to load, as 'package.module:attribute'.",
    )
    invoke_parser.add_argument("entrypoint", help="Entrypoint name.")
    invoke_parser.add_argument("event", help="Event object as JSON.")
    invoke_parser.add_argument("context", help="Context object as JSON.")
    invoke_parser.set_defaults(handler_fn=handle_invoke)

    describe_parser = subparsers.add_parser(
        "describe",
        help="List the valid entrypoints of a handler as JSON.",
    )
    describe_parser.add_argument(
        "handler",
        help="Handler to load, as 'package.module:attribute'.",
    )
    describe_parser.set_defaults(handler_fn=handle_describe)

    config_parser = subparsers.add_parser(
        "print-config",
        help="Print the resolved runtime config to stdout.",
    )
    config_parser.set_defaults(handler_fn=handle_print_config)

    return parser


def handle_invoke(args: argparse.Namespace) -> int:
    argv = ["e5e", args.entrypoint, args.event, args.context]
    return run_invocation(args.handler, argv)


def handle_describe(args: argparse.Namespace) -> int:
    try:
        handler = load_handler(args.handler)
    except InvocationError as exc:
        raise SystemExit(str(exc)) from exc

    payload = [descriptor.as_dict() for descriptor in list_entrypoints(handler)]
    print(json.dumps(payload, indent=2))
    return 0


def handle_print_config(_args: argparse.Namespace) -> int:
    payload = get_runtime_config().model_dump(mode="json")
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    raise SystemExit(args.handler_fn(args))


if __name__ == "__main__":
    main()
