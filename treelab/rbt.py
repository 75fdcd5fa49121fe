"""Red-black tree built on the sentinel-aware binary search tree."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from treelab.bst import BST, Node


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "Red"
    BLACK = "Black"

    def __str__(self) -> str:
        return self.value


class RBTNode(Node):
    """A tree node that also carries a colour."""

    def __init__(self, key: int = 0, color: Color = Color.BLACK) -> None:
        super().__init__(key)
        self.color = color

    def describe(self) -> str:
        """Return the key followed by the colour name."""
        return f"{self.key} {self.color}"


class RBT(BST):
    """A red-black tree. A single black sentinel stands for every leaf."""

    def __init__(self) -> None:
        super().__init__(RBTNode(-1, Color.BLACK))

    @property
    def sentinel(self) -> RBTNode:
        """The shared black leaf node."""
        return self.nil

    def left_rotate(self, x: RBTNode) -> None:
        """Rotate left around ``x``; its right child takes its place."""
        nil = self.nil
        y = x.right
        if self._is_nil(y):
            raise ValueError("cannot rotate left: node has no right child")
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def right_rotate(self, y: RBTNode) -> None:
        """Rotate right around ``y``; its left child takes its place."""
        nil = self.nil
        x = y.left
        if self._is_nil(x):
            raise ValueError("cannot rotate right: node has no left child")
        y.left = x.right
        if x.right is not nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is nil:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    def insert_fixup(self, node: RBTNode) -> None:
        """Restore the red-black properties after inserting ``node``."""
        while node.parent.color is Color.RED:
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self.left_rotate(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self.right_rotate(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self.right_rotate(node)
                node.parent.color = Color.BLACK
                node.parent.parent.color = Color.RED
                self.left_rotate(node.parent.parent)
        self.root.color = Color.BLACK

    def delete_fixup(self, node: RBTNode) -> None:
        """Restore the red-black properties after a black node was removed."""
        x = node
        while x is not self.root and x.color is Color.BLACK:
            parent = x.parent
            if x is parent.left:
                w = parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self.left_rotate(parent)
                    w = parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self.right_rotate(w)
                        w = parent.right
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self.left_rotate(parent)
                    x = self.root
            else:
                w = parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self.right_rotate(parent)
                    w = parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self.left_rotate(w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self.right_rotate(parent)
                    x = self.root
        x.color = Color.BLACK

    def insert(self, node: RBTNode) -> None:
        """Insert ``node`` and rebalance the tree."""
        super().insert(node)
        node.color = Color.RED
        self.insert_fixup(node)

    def delete(self, node: Optional[RBTNode]) -> None:
        """Remove ``node`` and rebalance the tree; a nil node is ignored."""
        if self._is_nil(node):
            return
        nil = self.nil
        if node.left is nil or node.right is nil:
            spliced = node
        else:
            spliced = self._subtree_min(node.right)
        original_color = spliced.color

        child = spliced.left if spliced.left is not nil else spliced.right
        child.parent = spliced.parent
        if spliced.parent is nil:
            self.root = child
        elif spliced is spliced.parent.left:
            spliced.parent.left = child
        else:
            spliced.parent.right = child

        if spliced is not node:
            spliced.parent = node.parent
            if node.parent is nil:
                self.root = spliced
            elif node is node.parent.left:
                node.parent.left = spliced
            else:
                node.parent.right = spliced
            spliced.left = node.left
            spliced.right = node.right
            spliced.left.parent = spliced
            spliced.right.parent = spliced
            spliced.color = node.color

        node.parent = node.left = node.right = None
        if original_color is Color.BLACK:
            self.delete_fixup(child)