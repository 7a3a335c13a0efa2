import unittest

import util


class TestShapeChecks(unittest.TestCase):

    def test_check_array(self):
        self.assertTrue(util.check_array([1, 2], 2))
        self.assertFalse(util.check_array([1, 2], 3))
        self.assertFalse(util.check_array(None, 0))

    def test_check_matrix(self):
        self.assertTrue(util.check_matrix([[1, 2], [3, 4]], 2, 2))
        self.assertFalse(util.check_matrix([[1, 2], [3]], 2, 2))
        self.assertFalse(util.check_matrix([[1, 2]], 2, 2))
        self.assertTrue(util.check_matrix([[1, 2, 3]] * 7, -1, 3))
        self.assertTrue(util.check_matrix([], -1, 3))
        self.assertFalse(util.check_matrix(None, -1, 3))


class TestRandom(unittest.TestCase):

    def test_shuffle_is_a_permutation(self):
        arr = list(range(20))
        util.shuffle(arr)
        self.assertEqual(sorted(arr), list(range(20)))

    def test_seed_makes_runs_repeatable(self):
        util.seed(7)
        first = list(range(10))
        util.shuffle(first)
        values = [util.random_int(5) for _ in range(5)]
        util.seed(7)
        second = list(range(10))
        util.shuffle(second)
        self.assertEqual(first, second)
        self.assertEqual(values, [util.random_int(5) for _ in range(5)])

    def test_bounds(self):
        for _ in range(100):
            self.assertTrue(0 <= util.random_int(3) < 3)
            self.assertTrue(2.0 <= util.random_double(2.0, 4.0) < 4.0)
            self.assertTrue(0.0 <= util.random_double() < 1.0)

    def test_small_lists(self):
        empty, single = [], [1]
        util.shuffle(empty)
        util.shuffle(single)
        self.assertEqual((empty, single), ([], [1]))

    def test_swap(self):
        arr = [1, 2, 3]
        util.swap(arr, 0, 2)
        self.assertEqual(arr, [3, 2, 1])


if __name__ == "__main__":
    unittest.main()
