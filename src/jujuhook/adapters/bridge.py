"""Subprocess bridge to the unit agent's hook tools."""

from __future__ import annotations

import subprocess
import time
from typing import Sequence

from jujuhook.domain.errors import ProcessFailure
from jujuhook.domain.translator import check_outcome, stdout_text
from jujuhook.domain.values import CommandOutcome
from jujuhook.settings import SETTINGS, RuntimeSettings
from jujuhook.utils.telemetry import elapsed_ms, emit


def build_argv(executable: str, args: Sequence[str] = (), *, elevate: bool = False, wrapper: str = "sudo") -> list[str]:
    argv = [executable, *args]
    if elevate:
        argv.insert(0, wrapper)
    return argv


def invoke(
    executable: str,
    args: Sequence[str] = (),
    *,
    elevate: bool = False,
    settings: RuntimeSettings | None = None,
) -> CommandOutcome:
    """Run one agent tool to completion and capture its raw output.

    Only a failure to spawn or wait raises (``ProcessFailure``); a non-zero
    exit is reported through ``CommandOutcome.succeeded``.
    """

    settings = settings or SETTINGS
    argv = build_argv(executable, args, elevate=elevate, wrapper=settings.elevation_wrapper)
    started = time.perf_counter()
    try:
        result = subprocess.run(argv, capture_output=True, check=False)
    except OSError as exc:
        emit(
            settings,
            "command",
            component="bridge",
            status="error",
            level="error",
            payload={"executable": executable, "elevated": elevate, "error": exc.strerror or str(exc)},
            duration_ms=elapsed_ms(started),
        )
        raise ProcessFailure(f"{argv[0]}: {exc.strerror or exc}") from exc
    outcome = CommandOutcome(
        succeeded=result.returncode == 0,
        stdout=result.stdout or b"",
        stderr=result.stderr or b"",
        returncode=result.returncode,
        argv=tuple(argv),
    )
    emit(
        settings,
        "command",
        component="bridge",
        status="ok" if outcome.succeeded else "failed",
        level="info" if outcome.succeeded else "warn",
        payload={"executable": executable, "elevated": elevate, "exit_code": result.returncode},
        duration_ms=elapsed_ms(started),
    )
    return outcome


def run_checked(executable: str, args: Sequence[str] = (), *, elevate: bool = False) -> CommandOutcome:
    outcome = invoke(executable, args, elevate=elevate)
    check_outcome(outcome)
    return outcome


def run_text(executable: str, args: Sequence[str] = (), *, elevate: bool = False) -> str:
    """Run a tool and return its stdout as text.

    Non-zero exits raise ``ProcessFailure`` with the tool's stderr.
    """

    return stdout_text(run_checked(executable, args, elevate=elevate))


__all__ = ["build_argv", "invoke", "run_checked", "run_text"]
