# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dirtree - a mutable tree of named nodes.

A lightweight, zero-dependency library providing a directory-like tree
that can be built, edited, searched and pretty-printed.
"""

__version__ = "0.1.0"

from .exceptions import (
    AlreadyExistsError,
    CyclicMoveError,
    DirTreeError,
    InvalidNameError,
    InvalidNameForNonRootError,
    InvariantViolation,
)
from .node import DEFAULT_DELIMITER, ROOT_MARKER, Dirent
from .ordering import node_key, sort_nodes, sort_nodes_reverse
from .rendering import render_tree

__all__ = [
    # Core classes
    "Dirent",
    "ROOT_MARKER",
    "DEFAULT_DELIMITER",
    # Ordering
    "node_key",
    "sort_nodes",
    "sort_nodes_reverse",
    # Rendering
    "render_tree",
    # Exceptions
    "DirTreeError",
    "InvalidNameError",
    "AlreadyExistsError",
    "InvalidNameForNonRootError",
    "CyclicMoveError",
    "InvariantViolation",
]
