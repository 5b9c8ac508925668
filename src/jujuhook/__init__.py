"""Write Juju charm hooks in Python.

A charm binary registers callbacks by hook name and dispatches once::

    from jujuhook import HookRegistry, log, process_hooks

    registry = HookRegistry()

    @registry.hook()
    def config_changed():
        log("Hello Juju from Python!")

    process_hooks(registry)

Install the program in the charm's ``hooks/`` directory and symlink each hook
name to it (``ln -s hello-world config-changed``).
"""

__version__ = "0.3.0"

from jujuhook.app.dispatch import Hook, HookCallback, HookRegistry, dispatch, process_hooks  # noqa: E402
from jujuhook.app.hookenv import (  # noqa: E402
    action_fail,
    action_get,
    action_set,
    close_port,
    config_get,
    config_get_all,
    is_leader,
    log,
    open_port,
    reboot,
    relation_get,
    relation_get_by_unit,
    relation_ids,
    relation_list,
    relation_set,
    status_set,
    storage_get,
    storage_get_location,
    storage_list,
    unit_get_private_addr,
    unit_get_public_addr,
)
from jujuhook.domain import (  # noqa: E402
    BridgeError,
    Context,
    DecodeFailure,
    NumericParseFailure,
    ProcessFailure,
    Relation,
    Status,
    StatusType,
    Transport,
    UnknownHookError,
)

__all__ = [
    "BridgeError",
    "Context",
    "DecodeFailure",
    "Hook",
    "HookCallback",
    "HookRegistry",
    "NumericParseFailure",
    "ProcessFailure",
    "Relation",
    "Status",
    "StatusType",
    "Transport",
    "UnknownHookError",
    "__version__",
    "action_fail",
    "action_get",
    "action_set",
    "close_port",
    "config_get",
    "config_get_all",
    "dispatch",
    "is_leader",
    "log",
    "open_port",
    "process_hooks",
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
