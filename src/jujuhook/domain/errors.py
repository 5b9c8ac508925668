"""Error taxonomy shared by every call into the unit agent."""

from __future__ import annotations


class BridgeError(RuntimeError):
    """Base class for failures talking to the unit agent.

    Every wrapper raises exactly one of the three subclasses below; callers
    that do not care about the origin can catch ``BridgeError`` alone.
    """

    kind: str = "bridge"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ProcessFailure(BridgeError):
    """The subprocess could not be run, or it ran and reported failure."""

    kind = "process"


class DecodeFailure(BridgeError):
    """Captured output was not valid UTF-8."""

    kind = "decode"


class NumericParseFailure(BridgeError):
    """A field expected to be a non-negative integer was not one."""

    kind = "numeric"


class UnknownHookError(RuntimeError):
    """Raised when no registered hook matches the invocation name."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(f"Unknown callback for hook {hook_name}")
        self.hook_name = hook_name


__all__ = [
    "BridgeError",
    "DecodeFailure",
    "NumericParseFailure",
    "ProcessFailure",
    "UnknownHookError",
]
