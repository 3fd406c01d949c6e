import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.sorters.merge_sort import merge, merge_sort


class TestMergeSort(unittest.TestCase):
    """Tests for the in-place merge sort."""

    def _sorted(self, data, *bounds):
        merge_sort(data, *bounds)
        return data

    def test_empty_list(self):
        self.assertEqual(self._sorted([]), [])

    def test_single_element(self):
        self.assertEqual(self._sorted([42]), [42])

    def test_sorted_list(self):
        self.assertEqual(self._sorted([1, 2, 3, 4, 5]), [1, 2, 3, 4, 5])

    def test_reverse_sorted(self):
        self.assertEqual(self._sorted([5, 4, 3, 2, 1]), [1, 2, 3, 4, 5])

    def test_duplicates(self):
        self.assertEqual(self._sorted([3, 1, 4, 1, 5, 9, 2, 6]), [1, 1, 2, 3, 4, 5, 6, 9])

    def test_negative_values(self):
        self.assertEqual(self._sorted([0, -3, 7, -3, 2]), [-3, -3, 0, 2, 7])

    def test_returns_none_and_mutates_in_place(self):
        data = [2, 1]
        self.assertIsNone(merge_sort(data))
        self.assertEqual(data, [1, 2])

    def test_tuples(self):
        data = [((1, 2), (3, 4)), ((0, 1), (0, 2)), ((1, 0), (2, 0))]
        expected = sorted(data)
        self.assertEqual(self._sorted(data), expected)

    def test_stability(self):
        """Merge sort must be stable: equal keys keep original order."""
        data = [(1, 'a'), (2, 'b'), (1, 'c'), (2, 'd')]
        wrapped = [_Key(k, i) for i, (k, _) in enumerate(data)]
        merge_sort(wrapped)
        self.assertEqual([w.index for w in wrapped], [0, 2, 1, 3])

    def test_sub_range_only(self):
        data = [9, 5, 4, 3, 0]
        merge_sort(data, 1, 3)
        self.assertEqual(data, [9, 3, 4, 5, 0])


class TestMerge(unittest.TestCase):

    def test_merge_two_runs(self):
        data = [1, 4, 7, 2, 3, 9]
        merge(data, 0, 2, 5)
        self.assertEqual(data, [1, 2, 3, 4, 7, 9])

    def test_merge_leaves_outside_untouched(self):
        data = [100, 5, 6, 1, 2, -100]
        merge(data, 1, 2, 4)
        self.assertEqual(data, [100, 1, 2, 5, 6, -100])

    def test_merge_exhausted_left_run(self):
        data = [1, 2, 3, 4]
        merge(data, 0, 1, 3)
        self.assertEqual(data, [1, 2, 3, 4])


class _Key:
    """Orders by key only."""

    def __init__(self, key, index):
        self.key = key
        self.index = index

    def __le__(self, other):
        return self.key <= other.key

    def __lt__(self, other):
        return self.key < other.key


if __name__ == '__main__':
    unittest.main()
