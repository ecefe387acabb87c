# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sorting helpers for lists of Dirent nodes.

Nodes are ordered by their display name (``str(node)``), so an unnamed root
sorts as ``'/'``. The helpers do not check tree invariants and work on any
list of nodes, siblings or not.

Example:
    >>> children = root.children()
    >>> sort_nodes(children)
    >>> [str(ch) for ch in children]
    ['A', 'B', 'C']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Dirent


def node_key(node: Dirent) -> str:
    """Return the sort key of a node."""
    return str(node)


def sort_nodes(nodes: list[Dirent]) -> None:
    """Sort nodes in place, from a to z."""
    nodes.sort(key=node_key)


def sort_nodes_reverse(nodes: list[Dirent]) -> None:
    """Sort nodes in place, from z to a."""
    nodes.sort(key=node_key, reverse=True)
