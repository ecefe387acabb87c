# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dirtree exceptions."""

from __future__ import annotations


class DirTreeError(Exception):
    """Base exception for recoverable dirtree errors."""

    pass


class InvalidNameError(DirTreeError):
    """Raised when a name is empty or reserved where a child name is required."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"invalid name: {name!r}")


class AlreadyExistsError(DirTreeError):
    """Raised when an entry with the requested name already exists."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"entry already exists: {name!r}")


class InvalidNameForNonRootError(DirTreeError):
    """Raised when a node with a parent is given an empty name."""

    pass


class CyclicMoveError(DirTreeError):
    """Raised when a node is moved under itself or one of its descendants."""

    pass


class InvariantViolation(BaseException):
    """Raised when a parent's mapping disagrees with a child's name.

    This signals a corrupted tree, not a failed request. It derives from
    BaseException so that ``except Exception`` handlers do not swallow it.
    """

    pass
