# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Text rendering of a Dirent subtree.

The output follows the layout of the UNIX ``tree`` utility::

    .
    |-- A
    |   |-- Ax
    |   `-- Ay
    `-- B
        `-- Bx

Children are listed in ascending name order at every level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .ordering import sort_nodes_reverse

if TYPE_CHECKING:
    from .node import Dirent

LINK = "|-- "
LAST = "`-- "
CONTINUE = "|   "
BLANK = "    "


def render_tree(node: Dirent) -> str:
    """Return the pretty-printed tree rooted at node.

    The walk is depth-first and driven by an explicit stack. Children are
    pushed in reverse name order so that they are popped in ascending
    order. When a node with children is expanded, its stack slot is replaced
    by a ``None`` sentinel that marks the end of the deeper level: popping
    the sentinel drops the innermost prefix segment.

    Args:
        node: The subtree root. Its display name is the first line.

    Returns:
        The rendered lines joined by newlines, without a trailing newline.
    """
    lines = [str(node)]
    top = node.children()
    sort_nodes_reverse(top)
    stack: list[Dirent | None] = list(top)

    segments: list[str] = []
    prefix = ""

    while stack:
        current = stack[-1]
        if current is None:
            stack.pop()
            segments.pop()
            prefix = "".join(segments)
            continue

        # Last at its level when nothing, or only a sentinel, sits below it.
        is_last = len(stack) == 1 or stack[-2] is None
        connector = LAST if is_last else LINK
        lines.append(f"{prefix}{connector}{current.name}")

        children = current.children()
        if not children:
            stack.pop()
            continue

        segments.append(BLANK if is_last else CONTINUE)
        prefix = "".join(segments)

        sort_nodes_reverse(children)
        stack[-1] = None
        stack.extend(children)

    return "\n".join(lines)
