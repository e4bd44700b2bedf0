"""
Segmentation matcher: can a string be split into dictionary words?

A string matches when it is non-empty and can be cut into one or more
non-empty pieces, each of which is a word stored in the trie. Reading the
string left to right, every time the current trie node terminates a word the
matcher may either keep extending the current word or close it and restart
at the root. The same word may be used any number of times.

Rather than exploring those choices recursively (exponential on inputs such
as "aaaa...ab" over the dictionary {"a", "aa", "aaa", ...}), `_break_table`
answers the question for every offset of the string once, from the end
backwards. Each offset costs at most one trie walk, so a query is O(n^2)
trie steps with O(n) extra space and no recursion.

The trie must be complete before any query: a word inserted later can turn
a non-match into a match.
"""


def _break_table(trie, text):
  """Return `nxt` where `nxt[i]` is the end of a first word starting at `i`.

  `nxt[i]` is an offset `j > i` such that `text[i:j]` is a stored word and
  `text[j:]` matches (or `j == len(text)`). It is None when `text[i:]`
  cannot be segmented. `nxt[len(text)]` is the sentinel `len(text)`.
  """
  n = len(text)
  nxt = [None] * (n + 1)
  nxt[n] = n
  root = trie.root

  for start in range(n - 1, -1, -1):
    node = root
    for end in range(start + 1, n + 1):
      children = node.children
      node = None if children is None else children.get(text[end - 1])
      if node is None:
        break
      if node.is_terminal and nxt[end] is not None:
        nxt[start] = end
        break
  return nxt


def matches(trie, text):
  """Return True if `text` splits into one or more words stored in `trie`.

  Parameters
  ----------
  trie : concat_words.trie.Trie
      A fully built dictionary.
  text : str
      String to segment. The empty string never matches.

  Returns
  -------
  bool
  """
  if not text:
    return False
  return _break_table(trie, text)[0] is not None


def segment(trie, text):
  """Return one split of `text` into stored words, or None.

  Words are chosen shortest-first at each boundary, so the result is
  deterministic for a given trie and string.
  """
  if not text:
    return None
  nxt = _break_table(trie, text)
  if nxt[0] is None:
    return None

  parts = []
  i, n = 0, len(text)
  while i < n:
    j = nxt[i]
    parts.append(text[i:j])
    i = j
  return parts
