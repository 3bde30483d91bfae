# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path access over nested mappings and sequences.

The four primitives every other operation builds on:

- get_path(root, path, default): read, never raises for a missing path
- set_path(root, path, value): write, creating intermediate mappings
- has_path(root, path): existence check
- delete_path(root, path): remove and return the previous value

All of them mutate (or read) the caller's root in place.

Destructive overwrite:
    set_path replaces whatever sits in the way of the path with a fresh
    dict. A leaf, a missing key, or a list addressed with a non-index
    segment are all overwritten::

        root = {'a': 1}
        set_path(root, 'a.b', 2)     # root == {'a': {'b': 2}}

Sequences:
    List elements are addressed by canonical decimal index. Writing
    at index len(seq) appends; writing further pads the gap with None.
    Deleting an element removes it and shifts the following ones down.
"""

from __future__ import annotations

import logging
from typing import Any

from .address import join_path, parse_path
from .exceptions import InvalidPathError
from .node import MISSING, NodeKind, child_of, node_kind, parse_index

logger = logging.getLogger(__name__)


def _walk(root: Any, segments: tuple[str, ...]) -> Any:
    """Follow segments from root, returning MISSING on the first miss."""
    current = root
    for segment in segments:
        current = child_of(current, segment)
        if current is MISSING:
            return MISSING
    return current


def _assign(container: Any, kind: NodeKind, segment: str, value: Any) -> None:
    """Store value under segment. Sequence segments must be indices."""
    if kind is NodeKind.MAPPING:
        container[segment] = value
        return
    index = parse_index(segment)
    if index < len(container):
        container[index] = value
    else:
        container.extend([None] * (index - len(container)))
        container.append(value)


def _htraverse(root: Any, segments: tuple[str, ...]) -> tuple[Any, NodeKind]:
    """Walk to the container holding the last segment, creating as needed.

    An intermediate that cannot hold the next segment (missing, a leaf,
    or a sequence facing a non-index segment) is replaced by a new dict.

    Returns:
        Tuple of (container, kind) for the last segment.
    """
    current = root
    kind = node_kind(root)

    for depth, segment in enumerate(segments[:-1]):
        child = child_of(current, segment, kind)
        child_kind = node_kind(child)
        next_segment = segments[depth + 1]

        unusable = (
            not child_kind.is_container
            or (child_kind is NodeKind.SEQUENCE and parse_index(next_segment) is None)
        )
        if unusable:
            if child is not MISSING:
                logger.debug(
                    "Overwriting %s at '%s' with a mapping",
                    type(child).__name__,
                    join_path(*segments[:depth + 1]),
                )
            child = {}
            child_kind = NodeKind.MAPPING
            _assign(current, kind, segment, child)

        current, kind = child, child_kind

    return current, kind


def get_path(root: Any, path: Any, default: Any = MISSING) -> Any:
    """Get the value at path.

    Args:
        root: Container to read from.
        path: Dotted path, e.g. 'city.name' or 'skills.0'.
        default: Returned when the path does not resolve. MISSING if omitted.

    Returns:
        The value at path, or default.

    Example:
        >>> get_path({'city': {'name': 'mashhad'}}, 'city.name')
        'mashhad'
        >>> get_path({}, 'city.name', 'n/a')
        'n/a'
    """
    try:
        segments = parse_path(path)
    except InvalidPathError:
        return default
    value = _walk(root, segments)
    return default if value is MISSING else value


def has_path(root: Any, path: Any) -> bool:
    """True if every segment of path resolves to an existing key."""
    try:
        segments = parse_path(path)
    except InvalidPathError:
        return False
    return _walk(root, segments) is not MISSING


def set_path(root: Any, path: Any, value: Any, raise_on_error: bool = True) -> bool:
    """Set value at path, creating intermediate mappings as needed.

    Args:
        root: Mapping or sequence to write into.
        path: Dotted path.
        value: Value to store.
        raise_on_error: If True (default), a malformed path raises
            InvalidPathError. If False, it makes the call return False.

    Returns:
        True if the value was written, False for a rejected path when
        raise_on_error is False.

    Raises:
        InvalidPathError: Malformed path, or a sequence root addressed
            with a non-index top-level segment.
        TypeError: If root is not a container.
    """
    kind = node_kind(root)
    if not kind.is_container:
        raise TypeError(f"root must be a mapping or sequence, not {type(root).__name__}")

    try:
        segments = parse_path(path)
        if kind is NodeKind.SEQUENCE and parse_index(segments[0]) is None:
            raise InvalidPathError(path, 'sequence root needs an index segment')
    except InvalidPathError:
        if raise_on_error:
            raise
        return False

    container, container_kind = _htraverse(root, segments)
    _assign(container, container_kind, segments[-1], value)
    return True


def delete_path(root: Any, path: Any, raise_on_error: bool = True) -> Any:
    """Delete the value at path and return it.

    Deleting a path that does not resolve is a no-op. On a mapping a
    repeated delete returns MISSING. A sequence element is removed and
    the following elements shift down, so repeating a delete on the same
    index removes the next element while one remains: has_path on that
    index stays True until the sequence is shorter than it.

    Args:
        root: Container to delete from.
        path: Dotted path.
        raise_on_error: If True (default), a malformed path raises
            InvalidPathError. If False, it makes the call return MISSING.

    Returns:
        The removed value, or MISSING if nothing was there.

    Example:
        >>> root = {'city': {'alias': 'm'}}
        >>> delete_path(root, 'city.alias')
        'm'
        >>> delete_path(root, 'city.alias')
        MISSING
    """
    try:
        segments = parse_path(path)
    except InvalidPathError:
        if raise_on_error:
            raise
        return MISSING

    parent = _walk(root, segments[:-1])
    kind = node_kind(parent)
    label = segments[-1]
    previous = child_of(parent, label, kind)
    if previous is MISSING:
        return MISSING

    if kind is NodeKind.MAPPING:
        del parent[label]
    else:
        del parent[parse_index(label)]
    return previous
