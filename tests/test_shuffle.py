import random
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.generators.shuffle import consecutive_array, shuffle
from sortlab.validators import is_permutation


class TestConsecutiveArray(unittest.TestCase):

    def test_default_start(self):
        self.assertEqual(consecutive_array(5), [0, 1, 2, 3, 4])

    def test_custom_start(self):
        self.assertEqual(consecutive_array(3, start=-1), [-1, 0, 1])

    def test_empty(self):
        self.assertEqual(consecutive_array(0), [])


class TestShuffle(unittest.TestCase):

    def test_same_seed_same_permutation(self):
        a = consecutive_array(100)
        b = consecutive_array(100)
        shuffle(a, "greedisgood")
        shuffle(b, "greedisgood")
        self.assertEqual(a, b)

    def test_different_seeds_differ(self):
        a = consecutive_array(100)
        b = consecutive_array(100)
        shuffle(a, "greedisgood")
        shuffle(b, "thereisnocowlevel")
        self.assertNotEqual(a, b)

    def test_actually_permutes(self):
        a = consecutive_array(100)
        shuffle(a, "greedisgood")
        self.assertNotEqual(a, consecutive_array(100))

    def test_preserves_values(self):
        data = [4, 4, 1, -2, 9, 0, 4]
        original = list(data)
        shuffle(data, "seed")
        self.assertTrue(is_permutation(data, original))

    def test_bytes_and_int_seeds(self):
        a, b = consecutive_array(30), consecutive_array(30)
        shuffle(a, b"seed")
        shuffle(b, b"seed")
        self.assertEqual(a, b)
        c, d = consecutive_array(30), consecutive_array(30)
        shuffle(c, 1234)
        shuffle(d, 1234)
        self.assertEqual(c, d)

    def test_tiny_inputs(self):
        empty, single = [], [1]
        shuffle(empty, "x")
        shuffle(single, "x")
        self.assertEqual(empty, [])
        self.assertEqual(single, [1])

    def test_global_random_state_untouched(self):
        random.seed(99)
        expected = random.random()
        random.seed(99)
        shuffle(consecutive_array(50), "greedisgood")
        self.assertEqual(random.random(), expected)

    def test_every_position_reachable(self):
        """Over many seeds, the first element lands in every slot."""
        seen = set()
        for s in range(200):
            data = consecutive_array(5)
            shuffle(data, s)
            seen.add(data.index(0))
        self.assertEqual(seen, set(range(5)))


if __name__ == '__main__':
    unittest.main()
