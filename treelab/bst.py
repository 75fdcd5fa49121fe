"""Binary search tree whose nodes carry parent links.

The tree can use ``None`` or a shared sentinel node as its "nil" marker.
A sentinel lets a subclass such as a red-black tree use the same
search, walk and delete logic.
"""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A tree node with an integer key and links to parent and children."""

    def __init__(self, key: int = 0) -> None:
        self.key = key
        self.parent: Optional[Node] = None
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def describe(self) -> str:
        """Return the text shown for this node in a walk."""
        return str(self.key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class BST:
    """An unbalanced binary search tree. Equal keys go to the right."""

    def __init__(self, nil: Optional[Node] = None) -> None:
        self.nil = nil
        self.root: Optional[Node] = nil

    def _is_nil(self, node: Optional[Node]) -> bool:
        return node is None or node is self.nil

    def _subtree_min(self, node: Node) -> Node:
        while not self._is_nil(node.left):
            node = node.left
        return node

    def _subtree_max(self, node: Node) -> Node:
        while not self._is_nil(node.right):
            node = node.right
        return node

    def insert(self, node: Node) -> None:
        """Insert ``node`` as a leaf at the place its key belongs."""
        parent = self.nil
        current = self.root
        while not self._is_nil(current):
            parent = current
            current = current.left if node.key < current.key else current.right
        node.parent = parent
        node.left = self.nil
        node.right = self.nil
        if self._is_nil(parent):
            self.root = node
        elif node.key < parent.key:
            parent.left = node
        else:
            parent.right = node

    def delete(self, node: Optional[Node]) -> None:
        """Remove ``node`` from the tree; a nil node is ignored."""
        if self._is_nil(node):
            return
        if self._is_nil(node.left) or self._is_nil(node.right):
            spliced = node
        else:
            spliced = self._subtree_min(node.right)

        child = spliced.right if self._is_nil(spliced.left) else spliced.left
        if not self._is_nil(child):
            child.parent = spliced.parent

        if self._is_nil(spliced.parent):
            self.root = child
        elif spliced is spliced.parent.left:
            spliced.parent.left = child
        else:
            spliced.parent.right = child

        if spliced is not node:
            spliced.parent = node.parent
            if self._is_nil(spliced.parent):
                self.root = spliced
            elif node is node.parent.left:
                spliced.parent.left = spliced
            else:
                spliced.parent.right = spliced
            spliced.left = node.left
            spliced.right = node.right
            if not self._is_nil(spliced.left):
                spliced.left.parent = spliced
            if not self._is_nil(spliced.right):
                spliced.right.parent = spliced

        node.parent = node.left = node.right = None

    def minimum(self) -> Optional[Node]:
        """Return the node with the smallest key, or None if empty."""
        if self._is_nil(self.root):
            return None
        return self._subtree_min(self.root)

    def maximum(self) -> Optional[Node]:
        """Return the node with the largest key, or None if empty."""
        if self._is_nil(self.root):
            return None
        return self._subtree_max(self.root)

    def successor(self, node: Optional[Node]) -> Optional[Node]:
        """Return the node following ``node`` in key order, or None."""
        if self._is_nil(node):
            return None
        if not self._is_nil(node.right):
            return self._subtree_min(node.right)
        parent = node.parent
        while not self._is_nil(parent) and node is parent.right:
            node, parent = parent, parent.parent
        return None if self._is_nil(parent) else parent

    def predecessor(self, node: Optional[Node]) -> Optional[Node]:
        """Return the node preceding ``node`` in key order, or None."""
        if self._is_nil(node):
            return None
        if not self._is_nil(node.left):
            return self._subtree_max(node.left)
        parent = node.parent
        while not self._is_nil(parent) and node is parent.left:
            node, parent = parent, parent.parent
        return None if self._is_nil(parent) else parent

    def search(self, key: int) -> Optional[Node]:
        """Return the first node found with ``key``, or None."""
        current = self.root
        while not self._is_nil(current):
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def walk(self) -> str:
        """Return every node's description, one per line, in key order."""
        return "".join(f"{node.describe()}\n" for node in self)

    def __iter__(self) -> Iterator[Node]:
        stack: list[Node] = []
        current = self.root
        while stack or not self._is_nil(current):
            while not self._is_nil(current):
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right