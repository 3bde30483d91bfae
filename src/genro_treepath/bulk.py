# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Whole-tree operations built on scan, set_path and delete_path.

Every operation here enumerates a snapshot of the tree before touching
it, so callbacks never see writes made earlier in the same pass.
All of them mutate the caller's root in place; only merge returns it,
for chaining.
"""

from __future__ import annotations

from typing import Any, Callable

from .accessor import delete_path, set_path
from .enumerator import scan
from .node import empty_like, node_kind

PathCallback = Callable[[str, Any], Any]
PathPredicate = Callable[[str, Any], bool]


def merge(target: Any, source: Any) -> Any:
    """Write every (path, value) of source into target.

    Entries are written parent-first, so a container in source replaces
    the target subtree at the same path, and its children are then
    filled in. Leaves of source overwrite colliding leaves of target.
    Containers are copied as fresh dicts/lists: target never shares
    a container with source.

    Args:
        target: Container receiving the values (mutated).
        source: Container providing the values (not mutated).

    Returns:
        target.

    Example:
        >>> merge({'name': 'mahdi'}, {'loves': ['linux', 'ts']})
        {'name': 'mahdi', 'loves': ['linux', 'ts']}
    """
    for path, value in scan(source).items():
        if node_kind(value).is_container:
            value = empty_like(value)
        set_path(target, path, value)
    return target


def for_each(root: Any, callback: PathCallback) -> None:
    """Call callback(path, value) for every node below root.

    Return values of callback are ignored.
    """
    for path, value in scan(root).items():
        callback(path, value)


def map_tree(root: Any, callback: PathCallback) -> None:
    """Replace every value with callback(path, value).

    Entries are captured before the first write. A container entry is
    written back before its children, so when callback returns a new
    container for a path, the children captured from the old one are
    then written into it.

    Example:
        >>> root = {'city': {'name': 'mashhad'}}
        >>> map_tree(root, lambda p, v: v.upper() if isinstance(v, str) else v)
        >>> root
        {'city': {'name': 'MASHHAD'}}
    """
    for path, value in scan(root).items():
        set_path(root, path, callback(path, value))


def filter_tree(root: Any, predicate: PathPredicate) -> None:
    """Delete every node for which predicate(path, value) is false.

    The predicate runs on every entry of the snapshot in scan order,
    including children of nodes that end up deleted. Deletions then run
    in reverse scan order, so removing a list element never shifts an
    index that is still waiting to be removed.

    Example:
        >>> root = {'name': 'mahdi', 'city': {'name': 'mashhad'}}
        >>> filter_tree(root, lambda p, v: p.startswith('city'))
        >>> root
        {'city': {'name': 'mashhad'}}
    """
    rejected = [
        path for path, value in scan(root).items() if not predicate(path, value)
    ]
    for path in reversed(rejected):
        delete_path(root, path)
