# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathCache - memoized path lookups over a mutable tree.

The cache keeps an index from canonical path to value, built by scanning
the wrapped root. It does not observe the root: any change made to the
root without going through the cache leaves the index stale until
refresh() is called.

States:
    fresh  - the index matches a scan of the root at the last build/refresh
    stale  - the root was changed behind the cache's back

Only refresh() brings a stale cache back to fresh. set() and delete()
keep the index consistent for the path they touch.

Example:
    >>> root = {'name': 'mahdi'}
    >>> cache = PathCache(root)
    >>> cache.get('name')
    'mahdi'
    >>> root['name'] = 'amir'
    >>> cache.get('name')     # stale
    'mahdi'
    >>> cache.refresh()
    >>> cache.get('name')
    'amir'
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .accessor import delete_path, get_path, set_path
from .address import SEPARATOR, parse_path
from .enumerator import iter_scan
from .exceptions import InvalidPathError
from .node import MISSING

logger = logging.getLogger(__name__)


class PathCache:
    """Read-through cache of path lookups against a root container.

    Attributes:
        root: The wrapped container. Owned by the caller.
    """

    __slots__ = ('root', '_index', '_raise_on_error')

    def __init__(self, root: Any, raise_on_error: bool = True) -> None:
        """Wrap root and build the index eagerly.

        Args:
            root: Container to cache lookups for.
            raise_on_error: Passed to set_path/delete_path. If True
                (default), malformed paths given to set() or delete()
                raise InvalidPathError.
        """
        self.root = root
        self._raise_on_error = raise_on_error
        self._index: dict[str, Any] = {}
        self._build()

    def _build(self) -> None:
        self._index.update(iter_scan(self.root))
        logger.debug("Indexed %d paths", len(self._index))

    def _drop(self, path: str) -> None:
        """Remove path and every indexed path below it."""
        prefix = path + SEPARATOR
        for key in [k for k in self._index if k == path or k.startswith(prefix)]:
            del self._index[key]

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathCache({len(self._index)} paths)"

    def __len__(self) -> int:
        """Return the number of indexed paths."""
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        """Iterate over indexed paths."""
        return iter(self._index)

    def __contains__(self, path: object) -> bool:
        return path in self._index

    def __getitem__(self, path: str) -> Any:
        """Get the value at path.

        Raises:
            KeyError: If the path resolves neither in the index nor in root.
                A miss is not added to the index.
        """
        if path in self._index:
            value = self._index[path]
        else:
            value = get_path(self.root, path)
            if value is not MISSING:
                self._index[path] = value
        if value is MISSING:
            raise KeyError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        self.set(path, value)

    # ==================== Core API ====================

    @property
    def index(self) -> Mapping[str, Any]:
        """Read-only view of the path index."""
        return MappingProxyType(self._index)

    def get(self, path: str, default: Any = MISSING) -> Any:
        """Get the value at path, from the index when possible.

        An indexed path returns its indexed value even if the root has
        changed since. Other paths are read from the root and the result
        (or default) is added to the index.

        Args:
            path: Dotted path.
            default: Returned and indexed when the path does not resolve.
        """
        if path in self._index:
            return self._index[path]
        value = get_path(self.root, path, default)
        self._index[path] = value
        return value

    def set(self, path: str, value: Any) -> bool:
        """Set value at path in both the root and the index.

        Returns:
            The set_path result.

        Raises:
            InvalidPathError: Malformed path (when raise_on_error is True).
        """
        written = set_path(self.root, path, value, raise_on_error=self._raise_on_error)
        if written:
            self._drop(path)
            self._index[path] = value
        return written

    def has(self, path: str) -> bool:
        """True if path is in the index.

        This does not look at the root: a path added to the root by other
        means is reported absent until get() or refresh() discovers it.
        """
        return path in self._index

    def delete(self, path: str) -> Any:
        """Delete path from the root and drop it (and below) from the index.

        Returns:
            The value removed from the root, or MISSING.
        """
        try:
            parse_path(path)
        except InvalidPathError:
            if self._raise_on_error:
                raise
            return MISSING
        self._drop(path)
        return delete_path(self.root, path)

    def invalidate(self, path: str | None = None) -> None:
        """Forget path and everything below it, or the whole index.

        Unlike refresh(), this does not rescan: forgotten paths are read
        from the root on their next get().
        """
        if path is None:
            self._index.clear()
        else:
            self._drop(path)

    def refresh(self) -> None:
        """Clear the index and rebuild it from a fresh scan of root."""
        self._index.clear()
        self._build()


def create_cache(root: Any, raise_on_error: bool = True) -> PathCache:
    """Create a PathCache over root."""
    return PathCache(root, raise_on_error=raise_on_error)
