# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dirent - a named node in a directory-like tree.

A Dirent owns a name-keyed mapping of children and keeps a plain
reference to its parent. Structural edits (add, make, unlink,
move, rename) keep both sides of the parent/child link consistent: for every
node ``n`` with parent ``p``, ``p.child(n.name) is n``.

Example:
    >>> root = Dirent()
    >>> a = root.add('A')
    >>> a.make('Ax', 'Ay')
    [Dirent('/A/Ax'), Dirent('/A/Ay')]
    >>> root.find('Ay').path()
    '/A/Ay'
    >>> print(root.tree())
    /
    `-- A
        |-- Ax
        `-- Ay
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterator

from .exceptions import (
    AlreadyExistsError,
    CyclicMoveError,
    InvalidNameError,
    InvalidNameForNonRootError,
    InvariantViolation,
)
from .ordering import sort_nodes
from .rendering import render_tree

logger = logging.getLogger(__name__)

ROOT_MARKER = '/'
DEFAULT_DELIMITER = '/'

Visitor = Callable[['Dirent'], 'bool | None']


def _check_child_name(name: str) -> None:
    """Raise InvalidNameError if name cannot be used for a child."""
    if name == '' or name == ROOT_MARKER:
        raise InvalidNameError(name)


class Dirent:
    """A node in a directory-like tree.

    Each node has:
    - name: unique among its siblings; only a root may be unnamed ('')
    - parent: the containing Dirent, or None for a root
    - children: name-keyed mapping of owned child nodes

    Child iteration order is unspecified. Methods that promise an order
    (list, tree, walk) sort explicitly.

    Not thread-safe: callers sharing a tree across threads must serialize
    mutating calls themselves.
    """

    __slots__ = ('_name', '_parent', '_children')

    def __init__(self, name: str = '') -> None:
        """Create a new root node.

        Args:
            name: The root's name. Any string is accepted, including ''
                (unnamed) and the path delimiter.
        """
        self._name = name
        self._parent: Dirent | None = None
        self._children: dict[str, Dirent] = {}

    # ==================== Special Methods ====================

    def __str__(self) -> str:
        """Return the display name; an unnamed node shows as ROOT_MARKER."""
        return self._name or ROOT_MARKER

    def __repr__(self) -> str:
        return f"Dirent({self.path()!r})"

    def __contains__(self, name: str) -> bool:
        """True if a direct child with this name exists."""
        return name in self._children

    # ==================== Properties ====================

    @property
    def name(self) -> str:
        """The node's name. Use rename() to change it."""
        return self._name

    @property
    def parent(self) -> Dirent | None:
        """The parent node, or None for a root."""
        return self._parent

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def size(self) -> int:
        """Number of direct children."""
        return len(self._children)

    @property
    def root(self) -> Dirent:
        """The topmost ancestor, or self for a root."""
        node = self
        parent = node.parent
        while parent is not None:
            node = parent
            parent = node.parent
        return node

    @property
    def depth(self) -> int:
        """Number of ancestors (root=0)."""
        count = 0
        parent = self.parent
        while parent is not None:
            count += 1
            parent = parent.parent
        return count

    # ==================== Mutation ====================

    def _attach(self, child: Dirent) -> None:
        """Insert child into this node's mapping and point it back here."""
        self._children[child._name] = child
        child._parent = self

    def add(self, name: str) -> Dirent:
        """Create a new child with the given name.

        Args:
            name: Child name. Must not be empty or ROOT_MARKER.

        Returns:
            The new child node.

        Raises:
            InvalidNameError: If name is empty or ROOT_MARKER.
            AlreadyExistsError: If a child with this name already exists.
        """
        _check_child_name(name)
        if name in self._children:
            logger.debug("add rejected: %r exists under %r", name, self.path())
            raise AlreadyExistsError(name)
        child = Dirent(name)
        self._attach(child)
        logger.debug("add: %r under %r", name, self.path())
        return child

    def make(self, *names: str) -> list[Dirent]:
        """Create several children at once, all or nothing.

        Every name is validated before any child is created, so on error the
        node is left unchanged. Only the first rejected name is reported.

        Args:
            *names: Child names.

        Returns:
            The new children, in argument order.

        Raises:
            InvalidNameError: If a name is empty or ROOT_MARKER.
            AlreadyExistsError: If a name already exists, or is repeated in
                names.
        """
        seen: set[str] = set()
        for name in names:
            _check_child_name(name)
            if name in self._children or name in seen:
                logger.debug("make rejected: %r exists under %r", name, self.path())
                raise AlreadyExistsError(name)
            seen.add(name)

        created = []
        for name in names:
            child = Dirent(name)
            self._attach(child)
            created.append(child)
        logger.debug("make: %d entries under %r", len(created), self.path())
        return created

    def unlink(self) -> bool:
        """Detach this node from its parent.

        The node becomes a root and keeps its whole subtree.

        Returns:
            True if the node was detached, False if it was already a root.

        Raises:
            InvariantViolation: If the parent does not hold this node under
                its name. The tree was corrupted by an earlier unguarded edit.
        """
        parent = self.parent
        if parent is None:
            self._parent = None
            return False
        if parent._children.get(self._name) is not self:
            logger.error(
                "unlink: parent %r has wrong entry for child %r",
                parent.path(), self._name,
            )
            raise InvariantViolation(
                f"parent {parent.path()!r} has wrong entry for child {self._name!r}"
            )
        del parent._children[self._name]
        self._parent = None
        logger.debug("unlink: %r from %r", self._name, parent.path())
        return True

    def move(self, destination: Dirent) -> None:
        """Re-parent this node, with its subtree, under destination.

        Raises:
            InvalidNameError: If this node is unnamed or named ROOT_MARKER.
            AlreadyExistsError: If destination already has a child with this
                node's name.
            CyclicMoveError: If destination is this node or one of its
                descendants.
        """
        if self._name in ('', ROOT_MARKER):
            raise InvalidNameError(self._name, "cannot move unnamed entry")
        if self._name in destination._children:
            logger.debug(
                "move rejected: %r exists at %r", self._name, destination.path()
            )
            raise AlreadyExistsError(
                self._name, f"entry already exists at destination: {self._name!r}"
            )
        node: Dirent | None = destination
        while node is not None:
            if node is self:
                raise CyclicMoveError(
                    f"cannot move {self.path()!r} into its own subtree"
                )
            node = node.parent

        source = self.parent
        self.unlink()
        destination._attach(self)
        logger.debug(
            "move: %r from %r to %r",
            self._name, source.path() if source else None, destination.path(),
        )

    def rename(self, name: str) -> None:
        """Change the name of this node.

        ROOT_MARKER is taken to mean the empty name, which only a root may
        have. The parent's mapping is re-keyed along with the node.

        Raises:
            InvalidNameForNonRootError: If the node has a parent and name is
                empty.
            AlreadyExistsError: If a sibling already has the requested name.
        """
        if name == ROOT_MARKER:
            name = ''
        parent = self.parent
        if parent is not None:
            if not name:
                raise InvalidNameForNonRootError("non-root entry must have a name")
            if name == self._name:
                return
            if name in parent._children:
                logger.debug("rename rejected: %r exists in %r", name, parent.path())
                raise AlreadyExistsError(
                    name, f"another entry with name {name!r} exists in parent"
                )
            del parent._children[self._name]
            parent._children[name] = self
        logger.debug("rename: %r to %r", self._name, name)
        self._name = name

    # ==================== Traversal ====================

    def child(self, name: str) -> Dirent | None:
        """Return the direct child with this name, or None."""
        return self._children.get(name)

    def for_child(self, visit: Visitor) -> None:
        """Call visit on each direct child, in no particular order.

        Stops as soon as visit returns False.
        """
        for child in list(self._children.values()):
            if visit(child) is False:
                break

    def for_parent(self, visit: Visitor) -> None:
        """Call visit on each ancestor, from the parent up to the root.

        Stops as soon as visit returns False.
        """
        parent = self.parent
        while parent is not None:
            if visit(parent) is False:
                break
            parent = parent.parent

    def find(self, name: str) -> Dirent | None:
        """Breadth-first search for a descendant with the given name.

        Each visited node's children are checked for name before the search
        goes one level deeper, so the shallowest match wins. The receiver
        itself is never returned, even if its own name matches.

        Returns:
            The matching node, or None.
        """
        queue: deque[Dirent] = deque([self])
        while queue:
            node = queue.popleft()
            found = node._children.get(name)
            if found is not None:
                return found
            queue.extend(node._children.values())
        return None

    def walk(self) -> Iterator[Dirent]:
        """Yield this node and its descendants, depth-first pre-order.

        Children are visited in ascending name order.
        """
        yield self
        children = self.children()
        sort_nodes(children)
        for child in children:
            yield from child.walk()

    # ==================== Queries ====================

    def children(self) -> list[Dirent]:
        """Return the direct children, in no particular order."""
        return list(self._children.values())

    def list(self) -> list[str]:
        """Return the names of the direct children, sorted."""
        return sorted(self._children)

    def path(self) -> str:
        """Return the slash-separated path of this node."""
        return self.path_delim(DEFAULT_DELIMITER)

    def path_delim(self, delim: str) -> str:
        """Return the delim-separated path of this node.

        If the root is named the same as delim, its segment is left empty so
        the delimiter is not doubled: a root named '/' with child 'a' gives
        '/a'.
        """
        parts = [self._name]
        self.for_parent(lambda p: parts.append(p._name))
        parts.reverse()
        if parts[0] == delim:
            parts[0] = ''
        return delim.join(parts)

    def tree(self) -> str:
        """Return the pretty-printed tree rooted at this node.

        The format is similar to the UNIX "tree" utility.
        """
        return render_tree(self)
