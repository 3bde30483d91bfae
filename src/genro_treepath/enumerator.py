# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Depth-first enumeration of every (path, value) pair in a tree.

Order is pre-order: a parent's entry comes before its children's, and
siblings follow the container's natural order (mapping insertion order,
sequence index order)::

    >>> scan({'name': 'mahdi', 'city': {'name': 'mashhad', 'code': '051'}})
    {'name': 'mahdi', 'city': {...}, 'city.name': 'mashhad', 'city.code': '051'}

Container-valued children appear both as their own entry and through
all of their descendants.

Every emitted path resolves with get_path. Mapping keys no path can
address (non-str keys, '' and keys containing '.') are skipped together
with everything below them.

A container reachable from itself raises CyclicTreeError. The same
container reached through two different paths is not a cycle and is
enumerated under both. Depth is limited only by memory: descent uses an
explicit stack, not recursion.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .address import SEPARATOR
from .exceptions import CyclicTreeError
from .node import iter_children, node_kind

logger = logging.getLogger(__name__)


def iter_scan(root: Any) -> Iterator[tuple[str, Any]]:
    """Yield (path, value) for every node below root, in pre-order.

    The generator reads root lazily; mutating root while iterating
    gives unspecified results. Use scan() for a snapshot.

    Raises:
        CyclicTreeError: If a container contains itself.
    """
    # one frame per open container: (path, id, children iterator)
    stack = [('', id(root), iter_children(root))]
    ancestors = {id(root)}

    while stack:
        prefix, _, children = stack[-1]
        for segment, child in children:
            path = f"{prefix}{SEPARATOR}{segment}" if prefix else segment
            yield path, child
            if node_kind(child).is_container:
                if id(child) in ancestors:
                    logger.debug("Cycle detected at '%s'", path)
                    raise CyclicTreeError(path)
                ancestors.add(id(child))
                stack.append((path, id(child), iter_children(child)))
                break
        else:
            _, container_id, _ = stack.pop()
            ancestors.discard(container_id)


def scan(root: Any) -> dict[str, Any]:
    """Return an ordered snapshot of every (path, value) pair below root.

    Example:
        >>> list(scan({'skills': ['js', 'ts']}))
        ['skills', 'skills.0', 'skills.1']
    """
    return dict(iter_scan(root))


def iter_leaves(root: Any) -> Iterator[tuple[str, Any]]:
    """Yield only the (path, value) pairs whose value is a leaf."""
    for path, value in iter_scan(root):
        if not node_kind(value).is_container:
            yield path, value


def count_nodes(root: Any) -> int:
    """Return the number of nodes strictly below root."""
    return sum(1 for _ in iter_scan(root))
