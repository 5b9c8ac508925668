"""Execution context supplied by the unit agent through the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from .errors import NumericParseFailure
from .translator import parse_unsigned


@dataclass
class Context:
    """Snapshot of the hook environment for the current invocation."""

    relation_type: str = ""
    relation_id: Optional[int] = None
    unit: str = ""
    relations: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Context":
        env = os.environ if environ is None else environ
        raw_id = env.get("JUJU_RELATION_ID", "")
        relation_id: Optional[int] = None
        if raw_id:
            # "<relation-name>:<id>"
            parts = raw_id.split(":")
            if len(parts) < 2:
                raise NumericParseFailure(f"malformed JUJU_RELATION_ID: {raw_id!r}")
            relation_id = parse_unsigned(parts[1])
        return cls(
            relation_type=env.get("JUJU_RELATION", ""),
            relation_id=relation_id,
            unit=env.get("JUJU_UNIT_NAME", ""),
        )


def resolve_invocation_name(
    environ: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> str:
    """Return the hook name this process was started for.

    ``JUJU_HOOK_NAME`` wins when set; otherwise the basename of the program
    the agent executed (the hook symlink) is used.
    """

    env = os.environ if environ is None else environ
    name = env.get("JUJU_HOOK_NAME", "")
    if name:
        return name
    args = sys.argv if argv is None else argv
    if not args or not args[0]:
        return ""
    return Path(args[0]).name


__all__ = ["Context", "resolve_invocation_name"]
