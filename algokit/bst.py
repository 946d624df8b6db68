"""Binary search tree with traversals, deletion and shape queries."""

from collections import deque


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values=()):
        self._root = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Add value to the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        parent = self._root
        while True:
            side = "left" if value < parent.value else "right"
            child = getattr(parent, side)
            if child is None:
                setattr(parent, side, node)
                return
            parent = child

    def _nodes(self):
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self):
        """Values in root, left, right order."""
        return [node.value for node in self._nodes()]

    def inorder(self):
        """Values in left, root, right order."""
        result = []
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self):
        """Values in left, right, root order."""
        result = []
        if self._root is None:
            return result
        stack = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def smallest(self):
        """Smallest value in the tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def largest(self):
        """Largest value in the tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def _replace(self, parent, node, child):
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, value):
        """Remove one occurrence of value; a node with two children takes its in-order predecessor."""
        parent, node = None, self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            self._replace(pred_parent, pred, pred.left)
        else:
            child = node.left if node.left is not None else node.right
            self._replace(parent, node, child)
        self._size -= 1

    def total_nodes(self):
        """Number of nodes."""
        return sum(1 for _ in self._nodes())

    def external_nodes(self):
        """Number of leaves."""
        return sum(1 for n in self._nodes() if n.left is None and n.right is None)

    def internal_nodes(self):
        """Number of nodes with at least one child."""
        return sum(1 for n in self._nodes() if n.left is not None or n.right is not None)

    def height(self):
        """Number of levels; an empty tree has height 0."""
        levels = 0
        level = deque([self._root] if self._root is not None else [])
        while level:
            levels += 1
            for _ in range(len(level)):
                node = level.popleft()
                level.extend(c for c in (node.left, node.right) if c is not None)
        return levels

    def mirror(self):
        """Swap the children of every node, in place."""
        for node in self._nodes():
            node.left, node.right = node.right, node.left

    def clear(self):
        """Remove every node."""
        self._root = None
        self._size = 0

    def __len__(self):
        return self._size