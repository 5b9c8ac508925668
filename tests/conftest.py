from __future__ import annotations

import os
import stat
from dataclasses import replace
from pathlib import Path
from typing import Callable

import pytest

from jujuhook.adapters import bridge
from jujuhook.app import dispatch as dispatch_module
from jujuhook.settings import RuntimeSettings


@pytest.fixture()
def runtime_settings(tmp_path: Path) -> RuntimeSettings:
    base = tmp_path / "runtime"
    home = base / "home"
    log_dir = base / "logs"
    for directory in (home, log_dir):
        directory.mkdir(parents=True, exist_ok=True)
    return RuntimeSettings(home_dir=home, log_dir=log_dir)


@pytest.fixture(autouse=True)
def isolated_settings(runtime_settings: RuntimeSettings, monkeypatch: pytest.MonkeyPatch) -> RuntimeSettings:
    """Keep telemetry written by the bridge and dispatcher inside tmp_path."""
    monkeypatch.setattr(bridge, "SETTINGS", runtime_settings)
    monkeypatch.setattr(dispatch_module, "SETTINGS", runtime_settings)
    monkeypatch.delenv("JUJU_HOOK_NAME", raising=False)
    return runtime_settings


@pytest.fixture()
def fake_tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], Path]:
    """Install fake hook tools as shell scripts at the front of PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def install(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return install


@pytest.fixture()
def recording_tool(tmp_path: Path, fake_tools: Callable[[str, str], Path]) -> Callable[..., Path]:
    """Install a tool that appends its argv (one per line) to a log and prints ``stdout``."""

    def install(name: str, stdout: str = "", exit_code: int = 0, stderr: str = "") -> Path:
        log_path = tmp_path / f"{name}.args"
        body = [f'for arg in "$@"; do printf "%s\\n" "$arg" >> "{log_path}"; done']
        if stdout:
            body.append(f"printf '%s' '{stdout}'")
        if stderr:
            body.append(f"printf '%s' '{stderr}' >&2")
        body.append(f"exit {exit_code}")
        fake_tools(name, "\n".join(body))
        return log_path

    return install


@pytest.fixture()
def unwritable_settings(runtime_settings: RuntimeSettings, tmp_path: Path) -> RuntimeSettings:
    """Settings whose log directory sits under a regular file and cannot be created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return replace(runtime_settings, log_dir=blocker / "logs")
