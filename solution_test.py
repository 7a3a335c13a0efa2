import os
import tempfile
import unittest

from keyed_matrix import Matrix
from placement import Placement
from routing import Route
from solution import Solution
from util import to_file


class TestPlacement(unittest.TestCase):

    def test_rendering(self):
        self.assertEqual(str(Placement([1, 0, None], 2)), "x=[[0,1],[1,0],[0,0]];")

    def test_queries(self):
        placement = Placement([1, 0, 1], 2)
        self.assertEqual(placement.server_of(2), 1)
        self.assertEqual(placement.as_matrix().sum(), 3)

    def test_server_out_of_range(self):
        with self.assertRaises(ValueError):
            Placement([2], 2)


class TestRoute(unittest.TestCase):

    def test_rendering_is_one_based(self):
        self.assertEqual(str(Route(0, 1, (0, 2, 1))), "<1,3,2>")
        self.assertEqual(str(Route(3, 4)), "<4,5>")

    def test_key(self):
        self.assertEqual(Route(2, 5, [2, 5]).key, (2, 5))


class TestSolution(unittest.TestCase):

    def setUp(self):
        self.placement = Placement([0, 1], 2)
        self.routes = [Route(0, 1), Route(0, 2, (0, 3, 2)), Route(1, 0)]

    def test_routes_are_indexed(self):
        solution = Solution(self.placement, self.routes)
        self.assertIs(solution.placement, self.placement)
        self.assertEqual(solution.routes.keys(), [0, 1])
        self.assertEqual(solution.routes.get(0, 2), Route(0, 2, (0, 3, 2)))

    def test_last_route_for_a_pair_wins(self):
        solution = Solution(self.placement, [Route(0, 1, (0, 1)), Route(0, 1, (0, 2, 1))])
        self.assertEqual(len(solution.routes), 1)
        self.assertEqual(solution.routes.get(0, 1).path, (0, 2, 1))

    def test_prebuilt_matrix_is_used_as_is(self):
        m = Matrix()
        m.put(0, 1, Route(0, 1))
        solution = Solution(self.placement, m)
        self.assertIs(solution.routes, m)

    def test_rendering(self):
        expected = "x=[[1,0],[0,1]];\nroutes={\n<1,2>,\n<1,4,3>,\n<2,1>\n};"
        self.assertEqual(str(Solution(self.placement, self.routes)), expected)

    def test_rendering_without_routes(self):
        self.assertEqual(str(Solution(self.placement, [])), "x=[[1,0],[0,1]];\nroutes={\n\n};")

    def test_rendering_is_deterministic(self):
        first = str(Solution(Placement([0, 1], 2), list(self.routes)))
        second = str(Solution(Placement([0, 1], 2), list(self.routes)))
        self.assertEqual(first, second)

    def test_to_file(self):
        solution = Solution(self.placement, self.routes)
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "solution.txt")
            to_file(solution, path)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read(), str(solution) + "\n")


if __name__ == "__main__":
    unittest.main()
