"""Hook registry and single-shot dispatch."""

from __future__ import annotations

import importlib
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Protocol

from jujuhook.domain.context import resolve_invocation_name
from jujuhook.domain.errors import UnknownHookError
from jujuhook.settings import SETTINGS, RuntimeSettings
from jujuhook.utils.telemetry import elapsed_ms, emit


class HookCallback(Protocol):  # pragma: no cover
    def __call__(self) -> Any:
        ...


@dataclass(frozen=True)
class Hook:
    name: str
    callback: HookCallback

    def matches(self, invocation_name: str) -> bool:
        return self.name in invocation_name


class HookRegistry:
    """Ordered hook entries; the first entry contained in the invocation name wins.

    Matching is by substring, so ``"db"`` also answers ``"db-relation-joined"``.
    A name registered after a shorter name it contains is never reached.
    """

    def __init__(self, hooks: Iterable[Hook] = ()) -> None:
        self._hooks: List[Hook] = list(hooks)

    def add(self, name: str, callback: HookCallback) -> Hook:
        if not name:
            raise ValueError("Hook name must be a non-empty string")
        if not callable(callback):
            raise TypeError(f"Callback for hook {name} is not callable")
        entry = Hook(name=name, callback=callback)
        self._hooks.append(entry)
        return entry

    def hook(self, name: str | None = None) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
        """Decorator form of :meth:`add`.

        Without a name the function name is used with underscores turned into
        dashes, so ``def config_changed()`` registers ``config-changed``.
        """

        def decorator(func: Callable[[], Any]) -> Callable[[], Any]:
            self.add(name or func.__name__.replace("_", "-"), func)
            return func

        return decorator

    def resolve(self, invocation_name: str) -> Hook:
        for entry in self._hooks:
            if entry.matches(invocation_name):
                return entry
        raise UnknownHookError(invocation_name)

    def names(self) -> List[str]:
        return [entry.name for entry in self._hooks]

    def __iter__(self) -> Iterator[Hook]:
        return iter(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    @classmethod
    def load_from_file(cls, path: Path) -> "HookRegistry":
        import yaml  # lazy import to keep hook start-up cheap

        if not path.exists():
            raise FileNotFoundError(f"Hook descriptor missing: {path}")
        data = yaml.safe_load(path.read_text("utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid hook descriptor {path}: top level is not a mapping")
        return cls(_hooks_from_payload(data.get("hooks", [])))


def _hooks_from_payload(raw: Any) -> Iterator[Hook]:
    if isinstance(raw, dict):
        items: List[tuple[Any, Any]] = list(raw.items())
    elif isinstance(raw, list):
        items = []
        for idx, entry in enumerate(raw):
            if not isinstance(entry, dict) or "name" not in entry or "callback" not in entry:
                raise ValueError(f"Hook entry #{idx} must be a mapping with name and callback")
            items.append((entry["name"], entry["callback"]))
    else:
        raise ValueError("Invalid hook descriptor: hooks must be a list or mapping")
    for name, target in items:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Hook name must be a non-empty string, got {name!r}")
        if not isinstance(target, str):
            raise ValueError(f"Hook {name} callback must be a 'module:attribute' string")
        yield Hook(name=name, callback=_import_target(name, target))


def _import_target(hook_name: str, target: str) -> HookCallback:
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Hook {hook_name} callback {target!r} is not in 'module:attribute' form")
    try:
        obj: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
    except (ImportError, AttributeError) as exc:
        raise ValueError(f"Hook {hook_name} callback {target!r} cannot be imported: {exc}") from exc
    if not callable(obj):
        raise ValueError(f"Hook {hook_name} callback {target!r} is not callable")
    return obj


def dispatch(
    registry: HookRegistry | Iterable[Hook],
    invocation_name: str,
    *,
    settings: RuntimeSettings | None = None,
) -> Any:
    """Run the callback registered for ``invocation_name`` exactly once.

    Raises ``UnknownHookError`` without running anything when nothing matches.
    Whatever the callback returns or raises is passed through unchanged.
    """

    settings = settings or SETTINGS
    if not isinstance(registry, HookRegistry):
        registry = HookRegistry(registry)
    try:
        entry = registry.resolve(invocation_name)
    except UnknownHookError:
        emit(
            settings,
            "hook",
            component="dispatch",
            status="unknown",
            level="warn",
            payload={"invocation": invocation_name, "registered": registry.names()},
        )
        raise
    started = time.perf_counter()
    status = "failed"
    try:
        result = entry.callback()
        status = "ok"
        return result
    finally:
        emit(
            settings,
            "hook",
            component="dispatch",
            status=status,
            level="info" if status == "ok" else "error",
            payload={"invocation": invocation_name, "hook": entry.name},
            duration_ms=elapsed_ms(started),
        )


def process_hooks(registry: HookRegistry | Iterable[Hook], invocation_name: str | None = None) -> Any:
    """Resolve the current hook name from the environment and dispatch it."""

    if invocation_name is None:
        invocation_name = resolve_invocation_name()
    return dispatch(registry, invocation_name)


__all__ = ["Hook", "HookCallback", "HookRegistry", "dispatch", "process_hooks"]
