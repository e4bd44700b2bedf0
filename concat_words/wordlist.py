"""
Input boundary: turns raw lines into dictionary words.

Trailing line terminators are stripped and blank lines skipped. Anything that
is not a run of lowercase a-z letters is rejected here so the trie never has
to deal with it: skipped with a warning by default, or raised as
`InvalidWordError` in strict mode.
"""
import logging

from concat_words.config import ALPHABET, DEFAULT_ENCODING, LINE_TERMINATORS, STRICT_WORDS
from concat_words.errors import InvalidWordError

logger = logging.getLogger(__name__)

_ALLOWED = frozenset(ALPHABET)


def is_valid_word(word):
  return bool(word) and all(ch in _ALLOWED for ch in word)


def iter_words(lines, *, strict=None):
  """Yield the valid words from `lines`, in order.

  Parameters
  ----------
  lines : Iterable[str]
      Raw lines, with or without their terminators.
  strict : bool | None, default=None
      Raise on the first invalid word instead of skipping it. None means
      `config.STRICT_WORDS`.

  Raises
  ------
  InvalidWordError
      In strict mode, for the first line that is not a lowercase a-z word.
  """
  if strict is None:
    strict = STRICT_WORDS
  skipped = 0
  for lineno, line in enumerate(lines, start=1):
    word = line.rstrip(LINE_TERMINATORS)
    if not word:
      continue
    if not is_valid_word(word):
      if strict:
        raise InvalidWordError(word, line_number=lineno)
      logger.warning("skipping invalid word %r on line %d", word, lineno)
      skipped += 1
      continue
    yield word
  if skipped:
    logger.info("skipped %d invalid lines", skipped)


def decode_lines(data, encoding=DEFAULT_ENCODING):
  """Split an uploaded byte string (or str) into lines, keeping terminators."""
  if isinstance(data, bytes):
    data = data.decode(encoding)
  return data.splitlines(keepends=True)
