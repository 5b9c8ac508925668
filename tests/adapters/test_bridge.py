from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Callable

import pytest

from jujuhook.adapters import bridge
from jujuhook.adapters.bridge import build_argv, invoke, run_checked, run_text
from jujuhook.domain import DecodeFailure, ProcessFailure
from jujuhook.settings import RuntimeSettings


def test_build_argv_prefixes_wrapper_when_elevated() -> None:
    assert build_argv("juju-reboot") == ["juju-reboot"]
    assert build_argv("open-port", ["80/tcp"], elevate=True, wrapper="doas") == ["doas", "open-port", "80/tcp"]


def test_invoke_captures_output_of_successful_tool(fake_tools: Callable[[str, str], Path]) -> None:
    fake_tools("unit-get", "printf '10.0.0.5\\n'\nprintf 'chatter' >&2")
    outcome = invoke("unit-get", ["private-address"])
    assert outcome.succeeded is True
    assert outcome.stdout == b"10.0.0.5\n"
    assert outcome.stderr == b"chatter"
    assert outcome.argv == ("unit-get", "private-address")


def test_invoke_reports_non_zero_exit_without_raising(fake_tools: Callable[[str, str], Path]) -> None:
    fake_tools("config-get", "echo 'no such key' >&2\nexit 3")
    outcome = invoke("config-get", ["missing"])
    assert outcome.succeeded is False
    assert outcome.returncode == 3


def test_invoke_missing_executable_is_process_failure(fake_tools: Callable[[str, str], Path]) -> None:
    with pytest.raises(ProcessFailure) as exc:
        invoke("definitely-not-a-juju-tool")
    assert "definitely-not-a-juju-tool" in exc.value.message


def test_invoke_elevated_uses_configured_wrapper(
    fake_tools: Callable[[str, str], Path],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    runtime_settings: RuntimeSettings,
) -> None:
    log_path = tmp_path / "wrapper.args"
    fake_tools("fake-sudo", f'printf "%s\\n" "$@" > "{log_path}"')
    settings = replace(runtime_settings, elevation_wrapper="fake-sudo")
    outcome = invoke("juju-reboot", [], elevate=True, settings=settings)
    assert outcome.succeeded
    assert log_path.read_text(encoding="utf-8").splitlines() == ["juju-reboot"]


def test_run_checked_raises_stderr_text(fake_tools: Callable[[str, str], Path]) -> None:
    fake_tools("status-set", "printf 'invalid status' >&2\nexit 1")
    with pytest.raises(ProcessFailure) as exc:
        run_checked("status-set", ["bogus", ""])
    assert exc.value.message == "invalid status"


def test_run_text_rejects_invalid_utf8(fake_tools: Callable[[str, str], Path]) -> None:
    fake_tools("storage-list", "printf '\\377\\376'")
    with pytest.raises(DecodeFailure):
        run_text("storage-list")


def test_invoke_records_command_events(
    fake_tools: Callable[[str, str], Path], runtime_settings: RuntimeSettings
) -> None:
    fake_tools("is-leader", "echo True")
    fake_tools("relation-ids", "exit 1")
    invoke("is-leader")
    invoke("relation-ids")
    lines = runtime_settings.telemetry_log.read_text(encoding="utf-8").splitlines()
    events = [json.loads(line) for line in lines]
    assert [evt["status"] for evt in events] == ["ok", "failed"]
    assert all(evt["component"] == "bridge" and evt["event"] == "command" for evt in events)
    assert events[1]["payload"]["exit_code"] == 1


def test_unwritable_telemetry_does_not_change_outcome(
    fake_tools: Callable[[str, str], Path], unwritable_settings: RuntimeSettings
) -> None:
    fake_tools("is-leader", "echo True")
    outcome = invoke("is-leader", settings=unwritable_settings)
    assert outcome.succeeded
    assert outcome.stdout == b"True\n"
    assert not unwritable_settings.log_dir.exists()


def test_unwritable_telemetry_keeps_spawn_failure_typed(
    fake_tools: Callable[[str, str], Path], unwritable_settings: RuntimeSettings
) -> None:
    with pytest.raises(ProcessFailure):
        invoke("definitely-not-a-juju-tool", settings=unwritable_settings)


def test_wrappers_work_with_unwritable_telemetry(
    fake_tools: Callable[[str, str], Path], unwritable_settings: RuntimeSettings, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(bridge, "SETTINGS", unwritable_settings)
    fake_tools("relation-ids", "printf 'server:0\\n'")
    assert run_text("relation-ids") == "server:0\n"
