"""
Concatenated-word finder.

Two phases over one explicitly owned `Trie`:

1. **Build.** Every word is inserted once, in input order. Insertion reports
   the tails left over wherever an earlier word ended along the way; those
   become pending records in a `CandidateTracker`. A word that turns out to be
   a prefix of words inserted *before* it hands each of them the matching
   tail too, so the result does not depend on input order.
2. **Verify.** Once all words are in, each pending tail is segmented against
   the complete trie. A word whose tail splits into dictionary words is a
   concatenation of two or more words of the list.

Example
-------
>>> report = find_concatenated_words(["cat", "dog", "catdog"])
>>> report.longest, report.second_longest, report.total_count
('catdog', None, 1)
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from concat_words.config import NONE_FOUND
from concat_words.errors import DictionaryClosedError, InvalidWordError
from concat_words.matcher import segment as segment_text
from concat_words.tracker import CandidateTracker
from concat_words.trie import Trie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcatenationReport:
  longest: Optional[str]
  second_longest: Optional[str]
  total_count: int
  confirmed: Tuple[str, ...] = ()
  dictionary_size: int = 0
  node_count: int = 1
  avg_branch_factor: float = 0.0

  def lines(self) -> list[str]:
    """The three summary lines, with `NONE_FOUND` for a missing word."""
    return [
      f"Longest concatenated word is : {self.longest or NONE_FOUND}",
      f"2nd longest concatenated word is : {self.second_longest or NONE_FOUND}",
      f"There are {self.total_count} concatenated words in the file.",
    ]

  def __str__(self):
    return "\n".join(self.lines())


class ConcatWordFinder:
  """Owns the dictionary for one run: `add` words, then `finish` once."""

  def __init__(self):
    self.trie = Trie()
    self.tracker = CandidateTracker()
    self._words_added = 0
    # extra insertions of a word beyond the first
    self._repeats = Counter()
    self._report = None

  @property
  def finished(self) -> bool:
    return self._report is not None

  def add(self, word: str) -> None:
    if self.finished:
      raise DictionaryClosedError("cannot add words after finish()")
    if not word:
      raise InvalidWordError(word, reason="empty word")

    end = self.trie.prefix_search(word)
    late_prefix = end is not None and not end.is_terminal and bool(end.children)
    if end is not None and end.is_terminal:
      self._repeats[word] += 1

    self.tracker.add(word, self.trie.insert(word))
    self._words_added += 1

    if late_prefix:
      # Longer words already stored below this node can now split here.
      cut = len(word)
      for longer in self.trie.enumerate_prefix(word):
        if len(longer) > cut:
          self.tracker.extend(longer, longer[cut:], copies=1 + self._repeats[longer])
      logger.debug("late prefix %r added break candidates", word)

  def add_all(self, words: Iterable[str]) -> int:
    before = self._words_added
    for word in words:
      self.add(word)
    return self._words_added - before

  def finish(self) -> ConcatenationReport:
    """Verify every pending candidate and return the ranking.

    Raises
    ------
    DictionaryClosedError
        If called more than once.
    """
    if self.finished:
      raise DictionaryClosedError("finish() was already called")
    logger.info("dictionary built: %d words, %d pending", self._words_added, len(self.tracker))

    ranking = self.tracker.verify(self.trie)
    self._report = ConcatenationReport(
      longest=ranking.longest,
      second_longest=ranking.second_longest,
      total_count=ranking.total_count,
      confirmed=tuple(ranking.confirmed),
      dictionary_size=len(self.trie),
      node_count=self.trie.count_nodes(),
      avg_branch_factor=self.trie.count_nodes(get_avg_branch_factor=True),
    )
    return self._report

  @property
  def report(self) -> Optional[ConcatenationReport]:
    return self._report

  def segment(self, word: str) -> Optional[list[str]]:
    """Split `word` into two or more stored words, or None.

    Only meaningful after `finish`, when the dictionary is complete.
    """
    if not self.finished:
      raise DictionaryClosedError("segment() needs a finished dictionary")
    node = self.trie.root
    for cut in range(len(word) - 1):
      node = None if node.children is None else node.children.get(word[cut])
      if node is None:
        return None
      if node.is_terminal:
        rest = segment_text(self.trie, word[cut + 1:])
        if rest is not None:
          return [word[:cut + 1]] + rest
    return None


def find_concatenated_words(words: Iterable[str]) -> ConcatenationReport:
  """Build a dictionary from `words` and report its concatenated words."""
  finder = ConcatWordFinder()
  finder.add_all(words)
  return finder.finish()
