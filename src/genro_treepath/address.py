# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path parsing.

A path is one or more non-empty segments joined with '.':

    'city'          -> ('city',)
    'city.name'     -> ('city', 'name')
    'skills.0'      -> ('skills', '0')

Segments are opaque strings. There is no escaping, so a key that
contains '.' cannot be addressed.

Malformed paths ('', 'a..b', '.a', 'a.') are rejected, never normalized.
Write operations let the InvalidPathError propagate; read operations
catch it and report the path as not found.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .exceptions import InvalidPathError

SEPARATOR = '.'


def parse_path(path: Any) -> tuple[str, ...]:
    """Split a dotted path into its segments.

    Args:
        path: Dotted path string, or an already parsed PathAddress.

    Returns:
        Tuple of segments, never empty.

    Raises:
        InvalidPathError: If path is not a string, is empty, or has
            an empty segment.
    """
    if isinstance(path, PathAddress):
        return path.segments
    if not isinstance(path, str):
        raise InvalidPathError(path, 'path must be a string')
    if not path:
        raise InvalidPathError(path, 'empty path')
    segments = tuple(path.split(SEPARATOR))
    if '' in segments:
        raise InvalidPathError(path, 'empty path segment')
    return segments


def is_valid_path(path: Any) -> bool:
    """True if parse_path accepts path."""
    try:
        parse_path(path)
    except InvalidPathError:
        return False
    return True


def join_path(*segments: str) -> str:
    """Join segments into canonical form, skipping empty ones.

    Example:
        >>> join_path('', 'city')
        'city'
        >>> join_path('city', 'name')
        'city.name'
    """
    return SEPARATOR.join(s for s in segments if s)


@dataclass(frozen=True)
class PathAddress:
    """A parsed path.

    Example:
        >>> addr = PathAddress.parse('city.name')
        >>> addr.segments
        ('city', 'name')
        >>> str(addr.parent)
        'city'
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments or '' in self.segments:
            raise InvalidPathError(SEPARATOR.join(self.segments), 'empty path segment')
        for segment in self.segments:
            if SEPARATOR in segment:
                raise InvalidPathError(segment, 'segment contains separator')

    @classmethod
    def parse(cls, path: str) -> PathAddress:
        return cls(parse_path(path))

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    @property
    def last(self) -> str:
        """Final segment."""
        return self.segments[-1]

    @property
    def parent(self) -> PathAddress | None:
        """Address of the containing node, None at top level."""
        if len(self.segments) == 1:
            return None
        return PathAddress(self.segments[:-1])

    def child(self, segment: str) -> PathAddress:
        """Address one level below this one."""
        return PathAddress(self.segments + (segment,))

    def is_ancestor_of(self, other: PathAddress) -> bool:
        """True if other lies strictly below this address."""
        return (
            len(other.segments) > len(self.segments)
            and other.segments[:len(self.segments)] == self.segments
        )
