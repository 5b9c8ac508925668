"""Translate raw command outcomes into values or typed failures."""

from __future__ import annotations

import re

from .errors import DecodeFailure, NumericParseFailure, ProcessFailure
from .values import CommandOutcome

_UNSIGNED_RE = re.compile(r"[0-9]+")
_UNSIGNED_MAX = 2**64 - 1


def decode_text(raw: bytes) -> str:
    """Decode agent output as strict UTF-8."""

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeFailure(str(exc)) from exc


def check_outcome(outcome: CommandOutcome) -> None:
    """Return quietly for a zero exit, otherwise raise with the decoded stderr.

    A stderr buffer that is not valid UTF-8 surfaces as ``DecodeFailure``
    rather than being hidden behind the process failure.
    """

    if outcome.succeeded:
        return
    raise ProcessFailure(decode_text(outcome.stderr))


def stdout_text(outcome: CommandOutcome) -> str:
    return decode_text(outcome.stdout)


def parse_unsigned(text: str) -> int:
    """Parse a 64-bit unsigned decimal.

    Only ASCII digits are accepted: no sign, no surrounding whitespace.
    """

    if not _UNSIGNED_RE.fullmatch(text):
        raise NumericParseFailure(f"invalid digit found in string: {text!r}")
    value = int(text)
    if value > _UNSIGNED_MAX:
        raise NumericParseFailure(f"number too large to fit in target type: {text!r}")
    return value


__all__ = ["check_outcome", "decode_text", "parse_unsigned", "stdout_text"]
