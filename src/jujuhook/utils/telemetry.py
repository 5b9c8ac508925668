"""JSON-lines events for hook dispatches and agent tool calls.

Events go to ``<log_dir>/telemetry.jsonl`` and are checked against the packaged
``telemetry.schema.json``. Writing an event never changes the outcome of the
operation that emitted it: an unwritable log directory drops the event.
"""

from __future__ import annotations

import json
import time
from collections import Counter
from importlib import resources
from typing import Any, Iterable, Iterator

import jsonschema

from jujuhook.settings import RuntimeSettings

_VALIDATOR: jsonschema.Draft202012Validator | None = None


def emit(
    settings: RuntimeSettings,
    event: str,
    *,
    component: str,
    status: str,
    level: str = "info",
    payload: dict[str, Any] | None = None,
    duration_ms: float | None = None,
) -> bool:
    """Append one event; return ``False`` when it was disabled or dropped."""

    if not settings.telemetry:
        return False
    record: dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        "component": component,
        "status": status,
        "level": level,
        "payload": payload or {},
    }
    if duration_ms is not None:
        record["durationMs"] = duration_ms
    _validator().validate(record)
    try:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        with settings.telemetry_log.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        return False
    return True


def elapsed_ms(started: float) -> float:
    return max((time.perf_counter() - started) * 1000.0, 0.0)


def iter_events(settings: RuntimeSettings) -> Iterator[dict[str, Any]]:
    log_path = settings.telemetry_log
    if not log_path.exists():
        return
    with log_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                # a partially written line from an interrupted hook
                continue


def summarize(events: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Count events per kind and status, plus dispatches per hook name."""

    by_event: Counter[str] = Counter()
    by_status: Counter[str] = Counter()
    hooks: Counter[str] = Counter()
    for evt in events:
        by_event[evt.get("event", "unknown")] += 1
        by_status[evt.get("status", "unknown")] += 1
        hook = evt.get("payload", {}).get("hook")
        if evt.get("event") == "hook" and hook:
            hooks[hook] += 1
    return {
        "total": sum(by_event.values()),
        "by_event": dict(by_event),
        "by_status": dict(by_status),
        "hooks": dict(hooks),
    }


def clear(settings: RuntimeSettings) -> None:
    settings.telemetry_log.unlink(missing_ok=True)


def _validator() -> jsonschema.Draft202012Validator:
    global _VALIDATOR
    if _VALIDATOR is None:
        schema_file = resources.files("jujuhook.resources") / "telemetry.schema.json"
        _VALIDATOR = jsonschema.Draft202012Validator(json.loads(schema_file.read_text(encoding="utf-8")))
    return _VALIDATOR
