import random
import string

ALPHABET = string.ascii_lowercase


def _random_word(rng, min_len, max_len):
  return "".join(rng.choice(ALPHABET) for _ in range(rng.randint(min_len, max_len)))


def generate_random_words(num_words, seed=None, unique=True, min_len=3, max_len=8):
  """
  Return `num_words` random lowercase words.
  - unique=True: every word distinct (the finder's input contract)
  - unique=False: duplicates allowed
  """
  if num_words < 0:
    raise ValueError("num_words must be non-negative")
  if min_len < 1 or max_len < min_len:
    raise ValueError("need 1 <= min_len <= max_len")
  capacity = sum(len(ALPHABET) ** n for n in range(min_len, max_len + 1))
  if unique and num_words > capacity:
    raise ValueError(f"num_words must be at most {capacity} for unique words")
  rng = random.Random(seed)

  if not unique:
    return [_random_word(rng, min_len, max_len) for _ in range(num_words)]

  seen = set()
  out = []
  while len(out) < num_words:
    w = _random_word(rng, min_len, max_len)
    if w not in seen:
      seen.add(w)
      out.append(w)
  return out


def gen_words_with_concatenations(num_words, concat_freq=0.3, seed=None, max_parts=3,
                                  min_len=1, max_len=5, max_concat_len=40):
  """Generate a distinct, shuffled word list with planted concatenations.

  Roughly `concat_freq` of the words are built by gluing 2..max_parts
  words drawn from the list so far (repeats allowed, so "abab" from "ab"
  can appear). Short base words make accidental concatenations likely
  too, which is what the finder has to cope with.
  concat_freq: 0 -> no planted concatenations, must be < 1
  """
  if num_words < 0:
    raise ValueError("num_words must be non-negative")
  if not 0 <= concat_freq < 1:
    raise ValueError("concat_freq must be in [0, 1)")
  if max_parts < 2:
    raise ValueError("max_parts must be at least 2")
  rng = random.Random(seed)

  words = []
  seen = set()
  attempts = 0
  while len(words) < num_words:
    attempts += 1
    if attempts > 100 * (num_words + 1):
      raise ValueError("could not generate enough distinct words; widen the length range")
    if words and rng.random() < concat_freq:
      parts = rng.choices(words, k=rng.randint(2, max_parts))
      w = "".join(parts)
      if len(w) > max_concat_len:
        continue
    else:
      w = _random_word(rng, min_len, max_len)
    if w in seen:
      continue
    seen.add(w)
    words.append(w)

  rng.shuffle(words)
  return words
