import unittest

import binary_tree as bt


class TestConsecutiveBinaryTree(unittest.TestCase):
    def make_tree(self, n, capacity=16):
        t = bt.ConsecutiveBinaryTree(capacity=capacity)
        for i in range(n):
            t.push(10 * i)
        return t

    def test_empty(self):
        t = bt.ConsecutiveBinaryTree()

        self.assertTrue(t.empty())
        self.assertEqual(t.size(), 0)
        self.assertEqual(len(t), 0)
        self.assertIsNone(t.root())
        self.assertIsNone(t.back())
        self.assertIsNone(t.last_parent())
        self.assertRaises(IndexError, t.pop)
        self.assertRaises(IndexError, t.root_value)

    def test_push_pop(self):
        t = self.make_tree(3)

        self.assertFalse(t.empty())
        self.assertEqual(t.size(), 3)
        self.assertEqual(t.root(), bt.Node(1))
        self.assertEqual(t.back(), bt.Node(3))
        self.assertEqual(t.root_value(), 0)
        self.assertEqual(t.back_value(), 20)

        self.assertEqual(t.pop(), 20)
        self.assertEqual(t.size(), 2)
        self.assertEqual(t.back_value(), 10)
        self.assertEqual(list(t), [0, 10])

    def test_growth_keeps_values(self):
        t = self.make_tree(40, capacity=1)

        self.assertGreaterEqual(t.capacity(), 40)
        self.assertEqual(list(t), [10 * i for i in range(40)])
        self.assertEqual(list(t.values()), [10 * i for i in range(40)])

    def test_reserve(self):
        t = self.make_tree(3, capacity=4)
        t.reserve(100)

        self.assertEqual(t.capacity(), 100)
        self.assertEqual(list(t), [0, 10, 20])

        t.reserve(10)
        self.assertEqual(t.capacity(), 100)

    def test_navigation(self):
        t = self.make_tree(6)
        n = bt.Node

        self.assertEqual(t.last_parent(), n(3))
        self.assertEqual(t.parent(n(6)), n(3))
        self.assertEqual(t.parent(n(5)), n(2))
        self.assertEqual(t.parent(n(2)), n(1))
        self.assertRaises(ValueError, t.parent, n(1))

        self.assertFalse(t.is_non_root(n(1)))
        self.assertTrue(t.is_non_root(n(2)))

        self.assertEqual(t.left_child(n(1)), n(2))
        self.assertEqual(t.right_child(n(1)), n(3))
        self.assertEqual(t.left_child(n(3)), n(6))
        self.assertIsNone(t.right_child(n(3)))
        self.assertIsNone(t.left_child(n(4)))
        self.assertIsNone(t.right_child(n(4)))

    def test_get_children(self):
        t = self.make_tree(6)
        n = bt.Node

        self.assertEqual(t.get_children(n(2)), (n(4), n(5)))
        self.assertEqual(t.get_children(n(3)), (n(6), None))
        self.assertEqual(t.get_children(n(4)), (None, None))

        for k in range(1, 7):
            self.assertEqual(t.get_children(n(k)),
                             (t.left_child(n(k)), t.right_child(n(k))))

    def test_slot_access(self):
        t = self.make_tree(4)
        n = bt.Node

        self.assertEqual(t.value_at(n(2)), 10)
        t[n(2)] = 99
        self.assertEqual(t[n(2)], 99)
        t.set_value(n(4), 7)
        self.assertEqual(t.back_value(), 7)

        self.assertRaises(IndexError, t.value_at, None)
        self.assertRaises(IndexError, t.value_at, n(5))
        self.assertRaises(IndexError, t.value_at, n(0))

    def test_values_read_only(self):
        t = self.make_tree(3)
        view = t.values()

        with self.assertRaises(ValueError):
            view[0] = 1
        t.push(30)
        self.assertEqual(t.size(), 4)

    def test_tree_view(self):
        t = self.make_tree(5)
        view = bt.TreeView(t)

        self.assertEqual(len(view), 5)
        self.assertEqual(list(view), list(t))
        self.assertEqual(view[bt.Node(2)], 10)
        self.assertEqual(view.last_parent(), bt.Node(2))
        self.assertEqual(view.left_child(bt.Node(2)), bt.Node(4))

        with self.assertRaises(TypeError):
            view[bt.Node(2)] = 0
        self.assertRaises(AttributeError, getattr, view, 'push')
        self.assertRaises(AttributeError, getattr, view, 'set_value')
        self.assertEqual(t.value_at(bt.Node(2)), 10)

    def test_node_index(self):
        self.assertEqual(bt.Node(1).index, 0)
        self.assertEqual(bt.Node(7).index, 6)


if __name__ == '__main__':
    unittest.main()
