"""Parsers for the line-oriented text printed by unit agent tools."""

from __future__ import annotations

from typing import Dict, Iterator, List

from .errors import NumericParseFailure
from .translator import parse_unsigned
from .values import Relation

ConfigMap = Dict[str, str]


def _lines(text: str) -> Iterator[str]:
    # Only "\n" ends a line; form feeds and Unicode separators stay in the value.
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def parse_config_dump(text: str) -> ConfigMap:
    """Parse ``config-get --all`` style ``key: value`` lines.

    Example input::

        brick_paths: /mnt/brick1 /mnt/brick2
        cluster_type: Replicate

    Lines that do not split into exactly two non-empty segments are skipped.
    """

    values: ConfigMap = {}
    for line in _lines(text):
        parts = [part for part in line.split(":") if part]
        if len(parts) != 2:
            continue
        key = parts[0].rstrip()
        if not key.strip():
            continue
        values[key] = parts[1].lstrip()
    return values


def _parse_relations(text: str, delimiter: str) -> List[Relation]:
    related: List[Relation] = []
    for line in _lines(text):
        if not line.strip():
            continue
        parts = line.split(delimiter)
        if len(parts) < 2:
            raise NumericParseFailure(f"missing id in relation line: {line!r}")
        related.append(Relation(name=parts[0], id=parse_unsigned(parts[1])))
    return related


def parse_relation_list(text: str) -> List[Relation]:
    """Parse ``relation-list`` output (``name/id`` per line)."""

    return _parse_relations(text, "/")


def parse_relation_ids(text: str) -> List[Relation]:
    """Parse ``relation-ids`` output (``name:id`` per line)."""

    return _parse_relations(text, ":")


__all__ = ["ConfigMap", "parse_config_dump", "parse_relation_ids", "parse_relation_list"]
