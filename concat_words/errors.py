"""Exceptions raised by the concatenated-word finder."""


class ConcatWordsError(Exception):
  """Base class for every error raised by this package."""


class InvalidWordError(ConcatWordsError, ValueError):
  """A word that cannot go into the dictionary (empty, or not lowercase a-z)."""

  def __init__(self, word, line_number=None, reason="not a lowercase a-z word"):
    self.word = word
    self.line_number = line_number
    self.reason = reason
    where = f" on line {line_number}" if line_number is not None else ""
    super().__init__(f"invalid word {word!r}{where}: {reason}")


class DictionaryClosedError(ConcatWordsError, RuntimeError):
  """The dictionary was already verified; no more inserts or verifications."""
