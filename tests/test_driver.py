import io
import unittest
import sys
import os
from contextlib import redirect_stderr, redirect_stdout

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.driver import format_array, main, run
from sortlab.sorters.sort_strategy import SortStrategy
from sortlab.validators import is_permutation


class TestDriverRun(unittest.TestCase):

    def test_pipeline(self):
        result = run(SortStrategy.MERGE_SORT, size=10, seed="greedisgood")
        self.assertEqual(result.sorted_values, list(range(10)))
        self.assertTrue(result.ascending)
        self.assertTrue(is_permutation(result.shuffled, range(10)))
        self.assertEqual(result.seed, "greedisgood")

    def test_shuffled_input_is_kept(self):
        result = run(SortStrategy.HOARE_QUICKSORT, size=20, seed="greedisgood")
        self.assertNotEqual(result.shuffled, result.sorted_values)

    def test_same_seed_every_strategy(self):
        shuffled = None
        for strategy in SortStrategy:
            result = run(strategy, size=15, seed="abc")
            if shuffled is None:
                shuffled = result.shuffled
            self.assertEqual(result.shuffled, shuffled)
            self.assertEqual(result.sorted_values, list(range(15)))

    def test_empty_array(self):
        result = run(SortStrategy.SELECTION_SORT, size=0, seed="x")
        self.assertEqual(result.sorted_values, [])
        self.assertTrue(result.ascending)

    def test_format_array(self):
        self.assertEqual(format_array([3, 1, 2]), "3 1 2")
        self.assertEqual(format_array([]), "")


class TestDriverMain(unittest.TestCase):

    def _main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue().splitlines()

    def test_prints_before_after_and_flag(self):
        code, lines = self._main("--algorithm", "insertion_sort_binary", "--size", "6", "--seed", "s")
        self.assertEqual(code, 0)
        self.assertEqual(len(lines), 3)
        self.assertEqual(sorted(int(v) for v in lines[0].split()), list(range(6)))
        self.assertEqual(lines[1], "0 1 2 3 4 5")
        self.assertEqual(lines[2], "true")

    def test_search_flags(self):
        code, lines = self._main("--size", "10", "--search", "4", "--insertion-point", "20")
        self.assertEqual(code, 0)
        self.assertIn("binary_search(4) = 4", lines)
        self.assertIn("insertion_point(20) = 10", lines)

    def test_list_strategies(self):
        code, lines = self._main("--list")
        self.assertEqual(code, 0)
        self.assertEqual(len(lines), len(SortStrategy))
        self.assertTrue(lines[0].startswith("hoare_quicksort"))

    def test_unknown_algorithm_exits(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["--algorithm", "bogo_sort"])
        self.assertEqual(ctx.exception.code, 2)

    def test_negative_size_exits(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["--size", "-3"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
