"""Domain exports."""

from .context import Context, resolve_invocation_name
from .errors import BridgeError, DecodeFailure, NumericParseFailure, ProcessFailure, UnknownHookError
from .parsers import ConfigMap, parse_config_dump, parse_relation_ids, parse_relation_list
from .translator import check_outcome, decode_text, parse_unsigned, stdout_text
from .values import CommandOutcome, Relation, Status, StatusType, Transport

__all__ = [
    "BridgeError",
    "CommandOutcome",
    "ConfigMap",
    "Context",
    "DecodeFailure",
    "NumericParseFailure",
    "ProcessFailure",
    "Relation",
    "Status",
    "StatusType",
    "Transport",
    "UnknownHookError",
    "check_outcome",
    "decode_text",
    "parse_config_dump",
    "parse_relation_ids",
    "parse_relation_list",
    "parse_unsigned",
    "resolve_invocation_name",
    "stdout_text",
]
