"""
Candidate tracker: holds break candidates until the dictionary is complete,
then confirms concatenated words and ranks them.
"""
import logging

from concat_words.errors import DictionaryClosedError
from concat_words.matcher import matches

logger = logging.getLogger(__name__)


class PendingRecord:
  """One inserted word and the suffixes still to be checked for it."""
  __slots__ = ("word", "suffixes")

  def __init__(self, word, suffixes):
    self.word = word
    self.suffixes = list(suffixes)

  def __repr__(self):
    return f"PendingRecord({self.word!r}, {self.suffixes!r})"


class RankingState:
  """Running longest / second-longest / count over confirmed words.

  `None` in either slot means none found yet. Only strictly longer words
  replace a holder, so among equal lengths the first one offered wins.
  """
  __slots__ = ("longest", "second_longest", "total_count", "confirmed")

  def __init__(self):
    self.longest = None
    self.second_longest = None
    self.total_count = 0
    self.confirmed = []

  @staticmethod
  def _length(word):
    return 0 if word is None else len(word)

  def offer(self, word):
    self.total_count += 1
    self.confirmed.append(word)
    n = len(word)
    if n > self._length(self.longest):
      self.second_longest = self.longest
      self.longest = word
    elif n > self._length(self.second_longest):
      self.second_longest = word


class CandidateTracker:
  """Collects `PendingRecord`s during construction and verifies them once.

  Records are verified oldest first, so among equal-length words the one
  recorded earliest takes a ranking slot. `extend` exists for words that
  gain a break point after their own insertion, when a shorter prefix word
  is inserted later.
  """

  def __init__(self):
    self._records = []
    self._by_word = {}
    self._verified = False

  def __len__(self):
    return len(self._records)

  def _check_open(self):
    if self._verified:
      raise DictionaryClosedError("candidates were already verified")

  def add(self, word, suffixes):
    """Record `word` with its break candidates; no-op if there are none."""
    self._check_open()
    if not suffixes:
      return None
    record = PendingRecord(word, suffixes)
    self._records.append(record)
    self._by_word.setdefault(word, []).append(record)
    return record

  def extend(self, word, suffix, copies=1):
    """Add one break candidate to every occurrence of `word` seen so far.

    `copies` is how many times `word` has been inserted. Occurrences that
    already have a record get the suffix appended; the rest get a new record.

    Returns
    -------
    list[PendingRecord]
        The records for `word` after the update.
    """
    self._check_open()
    records = self._by_word.get(word, [])
    for record in records:
      record.suffixes.append(suffix)
    for _ in range(copies - len(records)):
      self.add(word, [suffix])
    return self._by_word.get(word, [])

  def verify(self, trie):
    """Confirm pending words against the finished `trie` and rank them.

    A word is confirmed by the first of its suffixes that `matches`, and is
    counted once no matter how many suffixes would match. All records are
    dropped afterwards.

    Returns
    -------
    RankingState
    """
    self._check_open()
    self._verified = True

    ranking = RankingState()
    records, self._records, self._by_word = self._records, [], {}
    for record in records:
      for suffix in record.suffixes:
        if matches(trie, suffix):
          logger.debug("confirmed %r via suffix %r", record.word, suffix)
          ranking.offer(record.word)
          break
    logger.info("verified %d pending words, %d confirmed", len(records), ranking.total_count)
    return ranking
