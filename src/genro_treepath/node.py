# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node classification for path traversal.

Every value met during traversal is tagged with exactly one NodeKind:

- MAPPING: any ``collections.abc.Mapping``; children are addressed by key.
- SEQUENCE: any ``collections.abc.MutableSequence`` (list-like); children
  are addressed by canonical decimal index ('0', '1', ...).
- LEAF: everything else, including str, bytes, bytearray and tuples.

Traversal code switches on the tag instead of probing types inline.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableSequence
from enum import Enum
from typing import Any, Iterator

from .address import SEPARATOR

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Shape of a node in a tree."""

    MAPPING = 'mapping'
    SEQUENCE = 'sequence'
    LEAF = 'leaf'

    @property
    def is_container(self) -> bool:
        """True for MAPPING and SEQUENCE."""
        return self is not NodeKind.LEAF


class _Missing:
    """Type of the MISSING sentinel."""

    __slots__ = ()
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return 'MISSING'


MISSING: Any = _Missing()
"""Marker for 'no value at this path', distinct from None."""


def node_kind(value: Any) -> NodeKind:
    """Classify a value as MAPPING, SEQUENCE or LEAF."""
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, MutableSequence) and not isinstance(value, bytearray):
        return NodeKind.SEQUENCE
    return NodeKind.LEAF


def is_container(value: Any) -> bool:
    """True if traversal can descend into value."""
    return node_kind(value).is_container


def parse_index(segment: str) -> int | None:
    """Return the sequence index a segment addresses, or None.

    Only canonical non-negative decimals are indices: '0', '7', '12'.
    '-1', '01' and '+1' address nothing.
    """
    if segment.isdigit() and segment.isascii() and (segment == '0' or segment[0] != '0'):
        return int(segment)
    return None


def iter_children(value: Any, kind: NodeKind | None = None) -> Iterator[tuple[str, Any]]:
    """Yield (segment, child) pairs of a container in its natural order.

    Mapping keys that no path can address are skipped: non-str keys,
    the empty string and keys containing the separator. Leaves yield
    nothing.
    """
    if kind is None:
        kind = node_kind(value)
    if kind is NodeKind.MAPPING:
        for key, child in value.items():
            if isinstance(key, str) and key and SEPARATOR not in key:
                yield key, child
            else:
                logger.debug("Skipping unaddressable key %r", key)
    elif kind is NodeKind.SEQUENCE:
        for index, child in enumerate(value):
            yield str(index), child


def child_of(value: Any, segment: str, kind: NodeKind | None = None) -> Any:
    """Return the child addressed by segment, or MISSING."""
    if kind is None:
        kind = node_kind(value)
    if kind is NodeKind.MAPPING:
        # membership test first: defaultdict must not grow on a read
        if segment in value:
            return value[segment]
        return MISSING
    if kind is NodeKind.SEQUENCE:
        index = parse_index(segment)
        if index is None or index >= len(value):
            return MISSING
        return value[index]
    return MISSING


def empty_like(value: Any) -> Any:
    """Return a fresh empty container of the same kind (dict or list)."""
    kind = node_kind(value)
    if kind is NodeKind.MAPPING:
        return {}
    if kind is NodeKind.SEQUENCE:
        return []
    raise TypeError(f"{type(value).__name__} is not a container")
