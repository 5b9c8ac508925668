"""Value objects exchanged with the unit agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Transport(str, Enum):
    TCP = "tcp"
    UDP = "udp"


class StatusType(str, Enum):
    """Workload status words understood by ``status-set``."""

    MAINTENANCE = "maintenance"
    WAITING = "waiting"
    ACTIVE = "active"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Status:
    status_type: StatusType
    message: str = ""

    def to_args(self) -> list[str]:
        return [StatusType(self.status_type).value, self.message]


@dataclass(frozen=True)
class Relation:
    """A unit or relation reported by ``relation-list`` / ``relation-ids``."""

    name: str
    id: int

    def unit_ref(self) -> str:
        return f"{self.name}/{self.id}"


@dataclass(frozen=True)
class CommandOutcome:
    """Raw result of one subprocess invocation."""

    succeeded: bool
    stdout: bytes = b""
    stderr: bytes = b""
    returncode: int = 0
    argv: Tuple[str, ...] = field(default_factory=tuple)


__all__ = ["CommandOutcome", "Relation", "Status", "StatusType", "Transport"]
