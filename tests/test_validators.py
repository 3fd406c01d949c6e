import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.validators import first_inversion_index, is_ascending, is_permutation


class TestValidators(unittest.TestCase):

    def test_is_ascending(self):
        self.assertTrue(is_ascending([]))
        self.assertTrue(is_ascending([1]))
        self.assertTrue(is_ascending([1, 1, 2, 5]))
        self.assertFalse(is_ascending([1, 3, 2]))
        self.assertFalse(is_ascending([2, 1]))

    def test_is_ascending_does_not_mutate(self):
        data = [3, 2, 1]
        is_ascending(data)
        self.assertEqual(data, [3, 2, 1])

    def test_first_inversion_index(self):
        self.assertIsNone(first_inversion_index([1, 2, 2, 3]))
        self.assertEqual(first_inversion_index([1, 4, 3, 2]), 1)
        self.assertEqual(first_inversion_index([5, 1]), 0)
        self.assertIsNone(first_inversion_index([]))

    def test_is_permutation(self):
        self.assertTrue(is_permutation([1, 2, 2], [2, 1, 2]))
        self.assertFalse(is_permutation([1, 2, 2], [1, 1, 2]))
        self.assertFalse(is_permutation([1, 2], [1, 2, 3]))
        self.assertTrue(is_permutation([], []))


if __name__ == '__main__':
    unittest.main()
