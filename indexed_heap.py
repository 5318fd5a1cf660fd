# Indexed binary heap over elements stored by the caller, based on
# Sedgewick and Wayne's IndexMinPQ.java: http://algs4.cs.princeton.edu/24pq/
#
# The heap orders ids, not values. Values are read from the caller's
# sequence through the comparator and are never copied, so the sequence must
# not be reordered or shrunk while the heap refers to it.

import logging
import numbers
import operator

import numpy as np

from binary_tree import ConsecutiveBinaryTree, Node, TreeView

log = logging.getLogger(__name__)

# Node map entry of an id that is not in the heap
NIL = 0


class InvalidOperationError(ValueError):
    """An operation was called in a state that does not allow it."""


class NodeMapSizeError(IndexError):
    """An id falls outside the ids covered by the node map."""


class HeapInvariantError(AssertionError):
    pass


class BinaryHeap:
    def __init__(self, elements, compare=operator.lt, make_heap=False):
        """
        :param elements: Indexable sequence holding the values to order
        :param compare: compare(a, b) is true if a has strictly higher
            priority than b. The default gives a min-heap.
        :param make_heap: Build the heap over every element right away
        """
        self.elements_ = elements
        self.compare_ = compare
        self.tree_ = ConsecutiveBinaryTree(capacity=len(elements))
        self.qp = np.zeros(len(elements), dtype=np.intp)

        if make_heap:
            self.make_heap(len(elements))

    def __len__(self):
        return self.tree_.size()

    def __bool__(self):
        return not self.tree_.empty()

    def __contains__(self, i):
        return self.in_heap(i)

    def size(self):
        return self.tree_.size()

    def empty(self):
        return self.tree_.empty()

    def root(self):
        return self.elements_[self.root_id()]

    def root_id(self):
        if self.tree_.empty():
            raise InvalidOperationError("the heap is empty")
        return int(self.tree_.root_value())

    def get_by_node(self, node):
        return self.elements_[self.tree_[node]]

    def compare(self, x, y):
        return self.compare_(x, y)

    def _check_id(self, i):
        i = operator.index(i)
        if not 0 <= i < len(self.qp):
            raise NodeMapSizeError(
                "id {} is outside the node map of size {}".format(i, len(self.qp)))
        return i

    def _check_in_heap(self, i):
        i = self._check_id(i)
        if self.qp[i] == NIL:
            raise InvalidOperationError("id {} is not in the heap".format(i))
        return i

    def in_heap(self, i):
        return bool(self.qp[self._check_id(i)] != NIL)

    def node(self, i):
        h = self.qp[self._check_id(i)]
        return Node(int(h)) if h != NIL else None

    # Updates after the value of an id in the heap has changed. update_up
    # only moves towards the root and update_down only towards the leaves.

    def update_up(self, i):
        i = self._check_in_heap(i)
        self.bubble_up(Node(int(self.qp[i])), self.elements_[i])

    def update_down(self, i):
        i = self._check_in_heap(i)
        self.bubble_down(Node(int(self.qp[i])), self.elements_[i])

    def reheapify(self, i):
        """
        Restore the heap order around an id whose value changed in either
        direction. Tries to move up first and only moves down if the id
        stayed where it was.
        """
        i = self._check_in_heap(i)
        u = Node(int(self.qp[i]))
        e = self.elements_[i]
        if not self.bubble_up(u, e):
            self.bubble_down(u, e)

    def enroll(self, i):
        i = self._check_id(i)
        if self.qp[i] != NIL:
            raise InvalidOperationError("id {} is already in the heap".format(i))

        self.tree_.push(i)
        last = self.tree_.back()
        self.qp[i] = last.id

        if self.tree_.size() > 1:
            self.bubble_up(last, self.elements_[i])

    def pop_root(self):
        """
        Remove the best id from the heap. Popping an empty heap is a no-op
        rather than an error, so drain loops need no emptiness check.
        :return: The removed id, or None if the heap was empty
        """
        n = self.tree_.size()
        if n == 0:
            return None

        top = int(self.tree_.root_value())
        self.qp[top] = NIL

        if n > 1:
            root = self.tree_.root()
            i = int(self.tree_.back_value())
            self.tree_[root] = i
            self.qp[i] = root.id
            self.tree_.pop()
            self.bubble_down(root, self.elements_[i])
        else:
            self.tree_.pop()

        return top

    def make_heap(self, ids):
        """
        Add many ids at once and restore the heap order in linear time
        :param ids: Either a count n, meaning the ids 0 .. n-1, or an
            iterable of ids. None of them may be in the heap yet.
        """
        if isinstance(ids, numbers.Integral):
            if ids < 0:
                raise InvalidOperationError("negative id count {}".format(ids))
            ids = range(ids)
        ids = [self._check_id(i) for i in ids]

        seen = set()
        for i in ids:
            if self.qp[i] != NIL or i in seen:
                raise InvalidOperationError("id {} is already in the heap".format(i))
            seen.add(i)

        self.tree_.reserve(self.tree_.size() + len(ids))
        for i in ids:
            self.tree_.push(i)
            self.qp[i] = self.tree_.size()

        last = self.tree_.last_parent()
        if last is not None:
            for k in range(last.id, 0, -1):
                u = Node(k)
                self.bubble_down(u, self.get_by_node(u))

        log.debug("Built heap of %d ids (%d added)", self.tree_.size(), len(ids))

    def grow(self, n):
        """
        Extend the node map after the element sequence grew to n elements
        """
        n = operator.index(n)
        if n < len(self.qp):
            raise InvalidOperationError(
                "cannot shrink the node map from {} to {}".format(len(self.qp), n))
        if n > len(self.qp):
            log.debug("Growing node map from %d to %d ids", len(self.qp), n)
            self.qp = np.concatenate((self.qp,
                                      np.zeros(n - len(self.qp), dtype=self.qp.dtype)))

    # Sifting. Both walks carry the value e of the id that moves, and
    # return True if at least one swap happened.

    def bubble_up(self, u, e):
        moved = False
        while self.tree_.is_non_root(u):
            p = self.tree_.parent(u)
            if not self.compare_(e, self.get_by_node(p)):
                break
            u = self.swap(u, p)
            moved = True
        return moved

    def bubble_down(self, u, e):
        last = self.tree_.last_parent()
        if last is None:
            return False

        moved = False
        while u.id <= last.id:
            lc, rc = self.tree_.get_children(u)
            if rc is not None:
                lv = self.get_by_node(lc)
                rv = self.get_by_node(rc)
                if self.compare_(lv, rv):
                    c, cv = lc, lv
                else:
                    c, cv = rc, rv
            elif lc is not None:
                c, cv = lc, self.get_by_node(lc)
            else:
                break

            if not self.compare_(cv, e):
                break
            u = self.swap(u, c)
            moved = True
        return moved

    def swap(self, u, v):
        """
        Exchange the ids at two nodes and point the node map at their new
        nodes
        :return: v, the node now holding the id that was at u
        """
        ui = self.tree_[u]
        vi = self.tree_[v]

        self.qp[ui] = v.id
        self.qp[vi] = u.id

        self.tree_[u] = vi
        self.tree_[v] = ui

        return v

    # Inspection

    def tree(self):
        return TreeView(self.tree_)

    def node_map(self):
        """
        Read-only view of the node map: entry i is the node id holding id i,
        or 0 (nil) if i is not in the heap
        """
        view = self.qp[:]
        view.flags.writeable = False
        return view

    def elements(self):
        return self.elements_

    def slots(self):
        return [int(i) for i in self.tree_]

    def dump(self):
        entries = [(i, self.elements_[i]) for i in self.slots()]
        log.debug("Heap contents: %s", entries)
        return entries

    def check_invariants(self):
        slots = self.slots()

        for s in range(2, len(slots) + 1):
            child = self.elements_[slots[s - 1]]
            parent = self.elements_[slots[(s >> 1) - 1]]
            if self.compare_(child, parent):
                raise HeapInvariantError(
                    "heap order broken between node {} and its parent".format(s))

        for s, i in enumerate(slots, 1):
            if self.qp[i] != s:
                raise HeapInvariantError(
                    "id {} is at node {} but the node map says {}"
                    .format(i, s, self.qp[i]))

        present = int(np.count_nonzero(self.qp))
        if present != len(slots):
            raise HeapInvariantError(
                "{} ids in the node map but {} nodes in the tree"
                .format(present, len(slots)))


def update_element(elements, heap, i, value):
    """
    Store a new value for an id in the heap and move the id in the
    direction the change calls for
    """
    if not heap.in_heap(i):
        raise InvalidOperationError("id {} is not in the heap".format(i))

    old = elements[i]
    elements[i] = value

    if heap.compare(value, old):
        heap.update_up(i)
    else:
        heap.update_down(i)
