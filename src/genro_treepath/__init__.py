# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreePath - Dotted-path access to nested dicts and lists.

A lightweight, zero-dependency library to read, write, enumerate and
transform nested containers with paths like 'city.name' or 'skills.0',
plus a read-through cache with explicit refresh.
"""

__version__ = "0.1.0"

from .accessor import delete_path, get_path, has_path, set_path
from .address import SEPARATOR, PathAddress, is_valid_path, join_path, parse_path
from .bulk import filter_tree, for_each, map_tree, merge
from .cache import PathCache, create_cache
from .enumerator import count_nodes, iter_leaves, iter_scan, scan
from .exceptions import CyclicTreeError, InvalidPathError, TreePathError
from .node import MISSING, NodeKind, is_container, node_kind
from .tree import PathTree

__all__ = [
    # Core classes
    "PathTree",
    "PathCache",
    "PathAddress",
    "NodeKind",
    "MISSING",
    # Path access
    "get_path",
    "set_path",
    "has_path",
    "delete_path",
    # Enumeration
    "scan",
    "iter_scan",
    "iter_leaves",
    "count_nodes",
    # Bulk operations
    "merge",
    "for_each",
    "map_tree",
    "filter_tree",
    # Utilities
    "create_cache",
    "parse_path",
    "join_path",
    "is_valid_path",
    "node_kind",
    "is_container",
    "SEPARATOR",
    # Exceptions
    "TreePathError",
    "InvalidPathError",
    "CyclicTreeError",
]
