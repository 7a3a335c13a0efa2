import unittest

from service_chain import Component, ServiceChain


class TestServiceChain(unittest.TestCase):

    def setUp(self):
        self.chain = ServiceChain(7.5)
        for i in (2, 0, 1):
            self.chain.add_component(Component(i, (1.0,)))

    def test_components_keep_append_order(self):
        self.assertEqual([c.index for c in self.chain.components], [2, 0, 1])
        self.assertEqual(len(self.chain), 3)

    def test_iteration_is_restartable(self):
        first = [c.index for c in self.chain]
        second = [c.index for c in self.chain]
        self.assertEqual(first, [2, 0, 1])
        self.assertEqual(first, second)

    def test_latency_is_fixed(self):
        self.assertEqual(self.chain.latency, 7.5)
        with self.assertRaises(AttributeError):
            self.chain.latency = 1.0

    def test_components_view_is_read_only(self):
        view = self.chain.components
        self.assertIsInstance(view, tuple)
        self.chain.add_component(Component(3, (1.0,)))
        self.assertEqual(len(view), 3)
        self.assertEqual(len(self.chain.components), 4)


if __name__ == "__main__":
    unittest.main()
