import unittest
from scalargrad.engine import Value, topo_sort, square


def is_topological(order):
    seen = set()
    for v in order:
        for p in v._prev:
            if p not in seen:
                return False
        seen.add(v)
    return True


class Tests(unittest.TestCase):
    def test_leaf(self):
        x = Value(1)
        self.assertEqual(topo_sort(x), [x])

    def test_chain(self):
        x = Value(1)
        y = x.tanh()
        z = y.tanh()
        self.assertEqual(topo_sort(z), [x, y, z])

    def test_parents_before_children(self):
        x = Value(1)
        y = Value(2)
        z = (x*y + x - y).tanh() * y
        order = z.topo()
        self.assertTrue(is_topological(order))
        self.assertIs(order[-1], z)

    def test_parent_order_is_depth_first(self):
        a = Value(1)
        b = Value(2)
        c = Value(3)
        left = a + b
        out = left * c
        self.assertEqual(out.topo(), [a, b, left, c, out])

    def test_diamond_visits_once(self):
        a = Value(2)
        c = a.tanh()
        d = a * 3
        out = c + d
        order = out.topo()
        self.assertEqual(len(order), len(set(order)))
        self.assertEqual(order.count(a), 1)
        self.assertTrue(is_topological(order))

    def test_aliased_parents(self):
        x = Value(5)
        y = square(x)
        self.assertEqual(y.parents, (x, x))
        self.assertEqual(y.topo(), [x, y])

    def test_ops(self):
        x = Value(1)
        y = Value(2)
        self.assertEqual((x+y)._op, '+')
        self.assertEqual((x-y)._op, '-')
        self.assertEqual((x*y)._op, '*')
        self.assertEqual(x.tanh()._op, 'tanh')
        self.assertEqual(x._op, '')

    def test_topo_does_not_touch_grads(self):
        x = Value(1)
        y = x * 2
        x.grad = 5
        y.topo()
        self.assertEqual(x.grad, 5)

    def test_deep_chain(self):
        x = Value(0)
        v = x
        for _ in range(10_000):
            v = v.tanh()
        order = v.topo()
        self.assertEqual(len(order), 10_001)
        self.assertIs(order[0], x)
        self.assertIs(order[-1], v)

    def test_wrap_rejects_strings(self):
        with self.assertRaises(AssertionError):
            Value(1) + "2"


if __name__ == "__main__":
    unittest.main()
