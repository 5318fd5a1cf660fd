# Array-backed complete binary tree addressed by 1-based node handles.
# The root is node 1 and the children of node p are 2p and 2p + 1, the
# layout of Sedgewick and Wayne's heaps: http://algs4.cs.princeton.edu/24pq/

from collections import namedtuple

import numpy as np


class Node(namedtuple('Node', ['id'])):
    """
    Handle of a position in a ConsecutiveBinaryTree. The nil handle is
    represented by None, never by a Node.
    """
    __slots__ = ()

    @property
    def index(self):
        return self.id - 1


class ConsecutiveBinaryTree:
    def __init__(self, capacity=16, dtype=np.intp):
        self.nodes = np.empty(max(capacity, 1), dtype=dtype)
        self.N = 0

    def __len__(self):
        return self.N

    def __iter__(self):
        for i in range(self.N):
            yield self.nodes[i]

    def size(self):
        return self.N

    def empty(self):
        return self.N == 0

    def capacity(self):
        return len(self.nodes)

    def reserve(self, capacity):
        if capacity > len(self.nodes):
            self._resize(capacity)

    def _resize(self, capacity):
        nodes = np.empty(capacity, dtype=self.nodes.dtype)
        nodes[:self.N] = self.nodes[:self.N]
        self.nodes = nodes

    def push(self, value):
        if self.N >= len(self.nodes):
            self._resize(2 * len(self.nodes))
        self.nodes[self.N] = value
        self.N += 1

    def pop(self):
        if self.N == 0:
            raise IndexError("pop from an empty tree")
        self.N -= 1
        return self.nodes[self.N]

    def values(self):
        """Read-only view of the occupied slots in breadth-first order."""
        view = self.nodes[:self.N]
        view.flags.writeable = False
        return view

    # Slot access

    def _check(self, node):
        if node is None or not 1 <= node.id <= self.N:
            raise IndexError("{} is not a node of a tree of size {}"
                             .format(node, self.N))

    def value_at(self, node):
        self._check(node)
        return self.nodes[node.id - 1]

    def set_value(self, node, value):
        self._check(node)
        self.nodes[node.id - 1] = value

    __getitem__ = value_at
    __setitem__ = set_value

    def root_value(self):
        return self.value_at(self.root())

    def back_value(self):
        return self.value_at(self.back())

    # Navigation

    def root(self):
        return Node(1) if self.N > 0 else None

    def back(self):
        return Node(self.N) if self.N > 0 else None

    def last_parent(self):
        """
        The last node with at least one child, or None if there is none
        """
        return Node(self.N >> 1) if self.N > 1 else None

    def is_non_root(self, node):
        return node.id > 1

    def parent(self, node):
        if not self.is_non_root(node):
            raise ValueError("the root has no parent")
        return Node(node.id >> 1)

    def left_child(self, node):
        i = node.id << 1
        return Node(i) if i <= self.N else None

    def right_child(self, node):
        i = node.id << 1
        return Node(i + 1) if i < self.N else None

    def get_children(self, node):
        """
        Both children of a node from a single shift
        :param node: Handle of the parent
        :return: (left, right), where a missing child is None
        """
        i = node.id << 1
        if i > self.N:
            return None, None
        elif i == self.N:
            return Node(i), None
        else:
            return Node(i), Node(i + 1)


class TreeView:
    """
    Read-only access to a ConsecutiveBinaryTree: navigation and slot reads,
    no push, pop or slot writes
    """
    _reads = ('size', 'empty', 'capacity', 'values', 'value_at',
              'root_value', 'back_value', 'root', 'back', 'last_parent',
              'is_non_root', 'parent', 'left_child', 'right_child',
              'get_children')

    def __init__(self, tree):
        self._tree = tree

    def __len__(self):
        return len(self._tree)

    def __iter__(self):
        return iter(self._tree)

    def __getitem__(self, node):
        return self._tree.value_at(node)

    def __getattr__(self, name):
        if name in TreeView._reads:
            return getattr(self._tree, name)
        raise AttributeError("'TreeView' object has no attribute '{}'".format(name))
