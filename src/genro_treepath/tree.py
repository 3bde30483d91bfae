# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree - method-style access to a nested container.

PathTree binds one root container and exposes the path functions as
methods and mapping-like special methods::

    tree = PathTree({'city': {'name': 'mashhad'}})
    tree['city.name']               # 'mashhad'
    tree['city.alias'] = 'm'
    'city.alias' in tree            # True
    del tree['city.alias']
    list(tree)                      # ['city', 'city.name']

The root is not copied: the tree reads and writes the caller's object.
"""

from __future__ import annotations

from typing import Any, Iterator

from .accessor import delete_path, get_path, has_path, set_path
from .bulk import PathCallback, PathPredicate, filter_tree, for_each, map_tree, merge
from .cache import PathCache
from .enumerator import count_nodes, iter_scan, scan
from .node import MISSING, node_kind


class PathTree:
    """A root container with path-addressed methods.

    Attributes:
        root: The wrapped container. Owned by the caller.
    """

    __slots__ = ('root', '_raise_on_error')

    def __init__(self, root: Any = None, raise_on_error: bool = True) -> None:
        """Initialize a PathTree.

        Args:
            root: Mapping or sequence to wrap. A new dict if omitted.
            raise_on_error: If True (default), malformed paths given to
                write operations raise InvalidPathError; if False, set()
                returns False and delete() returns MISSING.

        Raises:
            TypeError: If root is not a mapping or sequence.
        """
        if root is None:
            root = {}
        self.root = root
        self._raise_on_error = raise_on_error
        self._check_root()

    def _check_root(self) -> None:
        if not node_kind(self.root).is_container:
            raise TypeError(
                f"root must be a mapping or sequence, not {type(self.root).__name__}"
            )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathTree({self.root!r})"

    def __len__(self) -> int:
        """Return the number of nodes below the root."""
        return count_nodes(self.root)

    def __iter__(self) -> Iterator[str]:
        """Iterate over every path in scan order."""
        for path, _ in iter_scan(self.root):
            yield path

    def __contains__(self, path: object) -> bool:
        return has_path(self.root, path)

    def __getitem__(self, path: str) -> Any:
        """Get value by path.

        Raises:
            KeyError: If path not found.
        """
        value = get_path(self.root, path)
        if value is MISSING:
            raise KeyError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        set_path(self.root, path, value, raise_on_error=True)

    def __delitem__(self, path: str) -> None:
        """Delete by path.

        Raises:
            KeyError: If path not found.
        """
        if delete_path(self.root, path, raise_on_error=True) is MISSING:
            raise KeyError(path)

    # ==================== Core API ====================

    def get(self, path: str, default: Any = None) -> Any:
        """Get the value at path, or default (None) if not found."""
        return get_path(self.root, path, default)

    def set(self, path: str, value: Any) -> bool:
        """Set value at path, creating intermediate mappings."""
        return set_path(self.root, path, value, raise_on_error=self._raise_on_error)

    def has(self, path: str) -> bool:
        return has_path(self.root, path)

    def delete(self, path: str) -> Any:
        """Delete path and return the removed value, or MISSING."""
        return delete_path(self.root, path, raise_on_error=self._raise_on_error)

    def pop(self, path: str, default: Any = None) -> Any:
        """Remove and return value at path, or default if not found."""
        value = delete_path(self.root, path, raise_on_error=self._raise_on_error)
        return default if value is MISSING else value

    # ==================== Walk ====================

    def scan(self) -> dict[str, Any]:
        """Return an ordered {path: value} snapshot of the tree."""
        return scan(self.root)

    def walk(self) -> Iterator[tuple[str, Any]]:
        """Yield (path, value) pairs lazily, in scan order."""
        return iter_scan(self.root)

    def for_each(self, callback: PathCallback) -> None:
        for_each(self.root, callback)

    def map(self, callback: PathCallback) -> PathTree:
        """Replace every value with callback(path, value). Returns self."""
        map_tree(self.root, callback)
        return self

    def filter(self, predicate: PathPredicate) -> PathTree:
        """Delete every node rejected by predicate. Returns self."""
        filter_tree(self.root, predicate)
        return self

    def merge(self, other: Any) -> PathTree:
        """Merge other (a container or a PathTree) into this tree. Returns self.

        Example:
            >>> PathTree({'a': 1}).merge({'b': {'c': 2}}).root
            {'a': 1, 'b': {'c': 2}}
        """
        if isinstance(other, PathTree):
            other = other.root
        merge(self.root, other)
        return self

    def cache(self) -> PathCache:
        """Return a new PathCache over this tree's root."""
        return PathCache(self.root, raise_on_error=self._raise_on_error)
