import os
import sys
import unittest

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from concat_words.errors import DictionaryClosedError
from concat_words.tracker import CandidateTracker, RankingState
from concat_words.trie import Trie


class TestRankingState(unittest.TestCase):
    def test_starts_empty(self):
        r = RankingState()
        self.assertIsNone(r.longest)
        self.assertIsNone(r.second_longest)
        self.assertEqual(r.total_count, 0)

    def test_longer_word_demotes_longest(self):
        r = RankingState()
        r.offer("abc")
        r.offer("abcdef")
        self.assertEqual((r.longest, r.second_longest, r.total_count), ("abcdef", "abc", 2))

    def test_shorter_word_fills_second(self):
        r = RankingState()
        r.offer("abcdef")
        r.offer("abc")
        r.offer("ab")
        self.assertEqual((r.longest, r.second_longest, r.total_count), ("abcdef", "abc", 3))

    def test_ties_never_replace(self):
        r = RankingState()
        r.offer("aaaa")
        r.offer("bbbb")
        r.offer("cccc")
        self.assertEqual((r.longest, r.second_longest), ("aaaa", "bbbb"))
        self.assertEqual(r.confirmed, ["aaaa", "bbbb", "cccc"])


class TestCandidateTracker(unittest.TestCase):
    def build(self, words):
        trie, tracker = Trie(), CandidateTracker()
        for w in words:
            tracker.add(w, trie.insert(w))
        return trie, tracker

    def test_records_only_words_with_candidates(self):
        _, tracker = self.build(["cat", "dog", "catdog"])
        self.assertEqual(len(tracker), 1)

    def test_verify_confirms_and_drains(self):
        trie, tracker = self.build(["cat", "dog", "catdog", "catfish"])
        ranking = tracker.verify(trie)
        self.assertEqual(ranking.confirmed, ["catdog"])
        self.assertEqual(len(tracker), 0)

    def test_word_counted_once_with_many_matching_suffixes(self):
        trie, tracker = self.build(["a", "aa", "aaa", "aaaa"])
        ranking = tracker.verify(trie)
        self.assertEqual(ranking.total_count, 3)
        self.assertEqual(ranking.confirmed, ["aa", "aaa", "aaaa"])

    def test_extend_creates_or_appends(self):
        tracker = CandidateTracker()
        [rec] = tracker.extend("catdog", "dog")
        self.assertEqual(rec.suffixes, ["dog"])
        self.assertEqual(tracker.extend("catdog", "atdog"), [rec])
        self.assertEqual(rec.suffixes, ["dog", "atdog"])
        self.assertEqual(len(tracker), 1)

    def test_extend_reaches_every_copy(self):
        tracker = CandidateTracker()
        first = tracker.add("catdog", ["atdog"])
        records = tracker.extend("catdog", "dog", copies=3)
        self.assertEqual(len(records), 3)
        self.assertIs(records[0], first)
        self.assertEqual([r.suffixes for r in records], [["atdog", "dog"], ["dog"], ["dog"]])
        self.assertEqual(len(tracker), 3)

    def test_closed_after_verify(self):
        trie, tracker = self.build(["a", "aa"])
        tracker.verify(trie)
        with self.assertRaises(DictionaryClosedError):
            tracker.verify(trie)
        with self.assertRaises(DictionaryClosedError):
            tracker.add("b", ["b"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
