import unittest

from keyed_matrix import Matrix


class TestMatrix(unittest.TestCase):

    def test_put_overwrites(self):
        m = Matrix()
        m.put(1, 2, "a")
        m.put(1, 2, "b")
        self.assertEqual(m.get(1, 2), "b")
        self.assertEqual(len(m), 1)

    def test_values_in_insertion_order(self):
        m = Matrix()
        m.put(1, 3, "v2")
        m.put(1, 2, "v1")
        self.assertEqual(m.values_for(1), ["v2", "v1"])
        m = Matrix()
        m.put(1, 2, "v1")
        m.put(1, 3, "v2")
        self.assertEqual(m.values_for(1), ["v1", "v2"])

    def test_absent_pair(self):
        m = Matrix()
        self.assertIsNone(m.get(9, 9))
        self.assertEqual(m.get(9, 9, "none"), "none")
        self.assertNotIn((9, 9), m)
        self.assertEqual(m.values_for(9), [])

    def test_keys_in_first_encounter_order(self):
        m = Matrix()
        m.put(3, 0, "a")
        m.put(1, 0, "b")
        m.put(3, 1, "c")
        m.put(2, 2, "d")
        self.assertEqual(m.keys(), [3, 1, 2])
        self.assertEqual(list(m.items()), [(3, 0, "a"), (3, 1, "c"), (1, 0, "b"), (2, 2, "d")])

    def test_pairs_are_ordered(self):
        m = Matrix()
        m.put(1, 2, "forward")
        self.assertIn((1, 2), m)
        self.assertNotIn((2, 1), m)
        self.assertIsNone(m.get(2, 1))


if __name__ == "__main__":
    unittest.main()
