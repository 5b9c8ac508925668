"""Runtime settings for jujuhook."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jujuhook import __version__

_DISABLE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    log_dir: Path
    elevation_wrapper: str = "sudo"
    telemetry: bool = True
    version: str = __version__

    @property
    def telemetry_log(self) -> Path:
        return self.log_dir / "telemetry.jsonl"


def _default_home_dir(env: Mapping[str, str]) -> Path:
    override = env.get("JUJUHOOK_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".jujuhook"


def load_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    env = os.environ if environ is None else environ
    base = _default_home_dir(env)
    return RuntimeSettings(
        home_dir=base,
        log_dir=base / "logs",
        elevation_wrapper=env.get("JUJUHOOK_ELEVATION_WRAPPER", "") or "sudo",
        telemetry=env.get("JUJUHOOK_TELEMETRY", "1").strip().lower() not in _DISABLE_VALUES,
    )


SETTINGS = load_settings()
