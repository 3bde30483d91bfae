# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreePath exceptions."""

from __future__ import annotations

from typing import Any


class TreePathError(Exception):
    """Base exception for TreePath errors."""

    pass


class InvalidPathError(TreePathError, ValueError):
    """Raised when a path is structurally unusable for a write operation.

    Empty strings, non-string values and paths with empty segments
    ('a..b', '.a', 'a.') are invalid.
    """

    def __init__(self, path: Any, reason: str = 'invalid path') -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path!r}")


class CyclicTreeError(TreePathError):
    """Raised when enumeration meets a container that is its own ancestor."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Container at '{path}' contains itself")
