#!/usr/bin/env python3
"""Entry point for the jujuhook CLI."""

from __future__ import annotations

import argparse
import json
import sys
from collections import deque
from pathlib import Path

from jujuhook import __version__
from jujuhook.app.dispatch import HookRegistry, dispatch
from jujuhook.domain.context import resolve_invocation_name
from jujuhook.domain.errors import BridgeError, UnknownHookError
from jujuhook.settings import SETTINGS
from jujuhook.utils.telemetry import clear as telemetry_clear
from jujuhook.utils.telemetry import iter_events as telemetry_iter
from jujuhook.utils.telemetry import summarize as telemetry_summarize

DEFAULT_DESCRIPTOR = "hooks.yaml"


def _load_registry(path_arg: str) -> HookRegistry | None:
    path = Path(path_arg).expanduser()
    try:
        return HookRegistry.load_from_file(path)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
    except ValueError as exc:
        print(f"Invalid hook descriptor: {exc}", file=sys.stderr)
    return None


def _dispatch_cmd(args: argparse.Namespace) -> int:
    registry = _load_registry(args.descriptor)
    if registry is None:
        return 2
    invocation = args.hook or resolve_invocation_name()
    try:
        dispatch(registry, invocation, settings=SETTINGS)
    except UnknownHookError as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        return 2
    except BridgeError as exc:
        print(f"Hook {invocation} failed talking to the agent ({exc.kind}): {exc.message}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001 - report any callback failure as a hook failure
        print(f"Hook {invocation} failed: {exc}", file=sys.stderr)
        return 1
    return 0


def _hooks_cmd(args: argparse.Namespace) -> int:
    registry = _load_registry(args.descriptor)
    if registry is None:
        return 2
    if args.json:
        print(json.dumps(registry.names(), ensure_ascii=False))
        return 0
    for name in registry.names():
        print(name)
    return 0


def _telemetry_cmd(args: argparse.Namespace) -> int:
    if args.telemetry_command == "report":
        summary = telemetry_summarize(telemetry_iter(SETTINGS))
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return 0
    if args.telemetry_command == "clear":
        telemetry_clear(SETTINGS)
        print("Telemetry log cleared")
        return 0
    if args.telemetry_command == "tail":
        dq: deque = deque(maxlen=args.limit)
        for evt in telemetry_iter(SETTINGS):
            dq.append(evt)
        for evt in dq:
            print(json.dumps(evt, ensure_ascii=False))
        return 0
    print("Unsupported telemetry command", file=sys.stderr)
    return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jujuhook", description="Dispatch Juju charm hooks to Python callbacks.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    dispatch_parser = sub.add_parser("dispatch", help="Run the callback registered for the current hook")
    dispatch_parser.add_argument("--descriptor", default=DEFAULT_DESCRIPTOR, help="YAML file listing hooks")
    dispatch_parser.add_argument("--hook", help="Hook name (defaults to JUJU_HOOK_NAME or the program name)")
    dispatch_parser.set_defaults(func=_dispatch_cmd)

    hooks_parser = sub.add_parser("hooks", help="List hooks registered in a descriptor")
    hooks_parser.add_argument("--descriptor", default=DEFAULT_DESCRIPTOR, help="YAML file listing hooks")
    hooks_parser.add_argument("--json", action="store_true", help="Print as a JSON array")
    hooks_parser.set_defaults(func=_hooks_cmd)

    telemetry_parser = sub.add_parser("telemetry", help="Inspect recorded hook and command events")
    telemetry_sub = telemetry_parser.add_subparsers(dest="telemetry_command", required=True)
    telemetry_sub.add_parser("report", help="Summarise events")
    telemetry_sub.add_parser("clear", help="Delete the event log")
    tail_parser = telemetry_sub.add_parser("tail", help="Print the most recent events")
    tail_parser.add_argument("--limit", type=int, default=20)
    telemetry_parser.set_defaults(func=_telemetry_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
