"""Thin wrappers around the hook tools the unit agent puts on ``PATH``.

Each function runs one tool through the bridge. Failures surface as
``ProcessFailure``, ``DecodeFailure`` or ``NumericParseFailure`` and are never
swallowed here.
"""

from __future__ import annotations

from typing import List

from jujuhook.adapters.bridge import run_checked, run_text
from jujuhook.domain.parsers import ConfigMap, parse_config_dump, parse_relation_ids, parse_relation_list
from jujuhook.domain.values import Relation, Status, Transport


def log(message: str, level: str | None = None) -> None:
    """Write ``message`` to the unit's debug log via ``juju-log``."""

    args = ["-l", level, message] if level else [message]
    run_checked("juju-log", args)


def reboot() -> None:
    """Ask the agent to reboot the machine once the current hook finishes."""

    run_checked("juju-reboot", elevate=True)


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------


def action_get(key: str) -> str:
    return run_text("action-get", [key]).strip()


def action_set(key: str, value: str) -> None:
    run_checked("action-set", [f"{key}={value}"])


def action_fail(message: str) -> None:
    run_checked("action-fail", [message])


# ----------------------------------------------------------------------
# Unit data and configuration
# ----------------------------------------------------------------------


def unit_get_private_addr() -> str:
    return run_text("unit-get", ["private-address"]).strip()


def unit_get_public_addr() -> str:
    return run_text("unit-get", ["public-address"]).strip()


def config_get(key: str) -> str:
    return run_text("config-get", [key]).strip()


def config_get_all() -> ConfigMap:
    """Return every charm option as a ``{key: value}`` mapping."""

    return parse_config_dump(run_text("config-get", ["--all"]))


def open_port(port: int, transport: Transport = Transport.TCP) -> None:
    run_checked("open-port", [_port_spec(port, transport)])


def close_port(port: int, transport: Transport = Transport.TCP) -> None:
    run_checked("close-port", [_port_spec(port, transport)])


def _port_spec(port: int, transport: Transport) -> str:
    return f"{port}/{Transport(transport).value}"


# ----------------------------------------------------------------------
# Relations
# ----------------------------------------------------------------------


def relation_set(key: str, value: str) -> None:
    run_checked("relation-set", [f"{key}={value}"])


def relation_get(key: str) -> str:
    return run_text("relation-get", [key])


def relation_get_by_unit(key: str, unit: Relation) -> str:
    return run_text("relation-get", [key, unit.unit_ref()])


def relation_list() -> List[Relation]:
    """Units on the other side of the current relation."""

    return parse_relation_list(run_text("relation-list"))


def relation_ids() -> List[Relation]:
    return parse_relation_ids(run_text("relation-ids"))


# ----------------------------------------------------------------------
# Status, storage, leadership
# ----------------------------------------------------------------------


def status_set(status: Status) -> None:
    run_checked("status-set", status.to_args())


def storage_get_location() -> str:
    """Location of the storage instance the current storage hook fired for."""

    return run_text("storage-get", ["location"])


def storage_get(name: str) -> str:
    return run_text("storage-get", ["-s", name, "location"])


def storage_list() -> str:
    return run_text("storage-list")


def is_leader() -> bool:
    # Anything other than "True" counts as not leading.
    return run_text("is-leader").strip() == "True"


__all__ = [
    "action_fail",
    "action_get",
    "action_set",
    "close_port",
    "config_get",
    "config_get_all",
    "is_leader",
    "log",
    "open_port",
    "reboot",
    "relation_get",
    "relation_get_by_unit",
    "relation_ids",
    "relation_list",
    "relation_set",
    "status_set",
    "storage_get",
    "storage_get_location",
    "storage_list",
    "unit_get_private_addr",
    "unit_get_public_addr",
]
