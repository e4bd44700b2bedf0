import os
import sys
import unittest

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.word_generator import gen_words_with_concatenations, generate_random_words
from components.work_loads import WorkLoad
from concat_words.wordlist import is_valid_word


class TestGenerateRandomWords(unittest.TestCase):
    def test_length_and_types(self):
        n = 5_000
        words = generate_random_words(n, seed=123)
        self.assertEqual(len(words), n)
        self.assertTrue(all(is_valid_word(w) and 3 <= len(w) <= 8 for w in words))

    def test_reproducibility(self):
        a = generate_random_words(1_000, seed=999)
        b = generate_random_words(1_000, seed=999)
        c = generate_random_words(1_000, seed=1000)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_uniqueness(self):
        words = generate_random_words(600, seed=42, min_len=2, max_len=2)
        self.assertEqual(len(set(words)), 600)

    def test_unique_overflow_raises(self):
        with self.assertRaises(ValueError):
            generate_random_words(27, seed=1, min_len=1, max_len=1)

    def test_non_unique_allows_overflow(self):
        self.assertEqual(len(generate_random_words(100, seed=1, unique=False, min_len=1, max_len=1)), 100)

    def test_bad_lengths_raise(self):
        with self.assertRaises(ValueError):
            generate_random_words(10, min_len=0)
        with self.assertRaises(ValueError):
            generate_random_words(10, min_len=5, max_len=4)


class TestConcatenationGenerator(unittest.TestCase):
    def test_distinct_valid_words(self):
        words = gen_words_with_concatenations(2_000, concat_freq=0.4, seed=7)
        self.assertEqual(len(words), 2_000)
        self.assertEqual(len(set(words)), 2_000)
        self.assertTrue(all(is_valid_word(w) and len(w) <= 40 for w in words))

    def test_planted_words_show_up(self):
        low = gen_words_with_concatenations(1_000, concat_freq=0.0, seed=3)
        high = gen_words_with_concatenations(1_000, concat_freq=0.5, seed=3)
        self.assertTrue(all(len(w) <= 5 for w in low))
        self.assertGreater(sum(len(w) > 5 for w in high), 100)

    def test_same_seed_reproducibility(self):
        a = gen_words_with_concatenations(500, concat_freq=0.3, seed=2024)
        b = gen_words_with_concatenations(500, concat_freq=0.3, seed=2024)
        self.assertEqual(a, b)

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            gen_words_with_concatenations(-1)
        with self.assertRaises(ValueError):
            gen_words_with_concatenations(10, concat_freq=1.0)
        with self.assertRaises(ValueError):
            gen_words_with_concatenations(10, max_parts=1)


class TestWorkLoad(unittest.TestCase):
    def test_dispatch(self):
        wl = WorkLoad(seed=5)
        self.assertEqual(wl.words(50), generate_random_words(50, 5, True))
        self.assertEqual(wl.words(50, concat_freq=0.3), gen_words_with_concatenations(50, 0.3, 5))
        self.assertEqual(wl.concat_words(80, concat_freq=0.5, max_parts=2),
                         gen_words_with_concatenations(80, 0.5, 5, 2))


if __name__ == "__main__":
    unittest.main(verbosity=2)
