"""
Standard Trie (character-per-edge) that records break candidates on insert.

This module is the dictionary half of the concatenated-word finder. Every input
word is inserted once; while walking down, each node that already terminates a
previously inserted word marks a place where the new word *might* split. The
unconsumed tail at that point is returned as a "missing suffix" so the caller
can check it once the whole dictionary is known.

Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts (`children=None`
  until the first child is added).
- **Deferred verification:** `insert` never decides whether a word is a
  concatenation. A suffix can only be checked against the complete dictionary,
  see `concat_words.matcher`.
- **Iterative traversals:** All traversals are iterative (no recursion), avoiding
  Python recursion limits on long words.


Classes
-------
TrieNode
    Minimal node holding `children` (dict[str, TrieNode] or None) and `is_terminal`.
Trie
    Insert with break candidates, lookups, prefix enumeration, and structural stats.


Complexity (typical)
--------------------
- insert: O(L) plus O(L) per recorded suffix copy
- search / prefix_search: O(L)
- enumerate prefix: O(L + K * avg_suffix_length), where K is number of results yielded


Conventions & Notes
-------------------
- **Alphabet:** Words are expected to be lowercase a-z. The trie does not
  validate characters; `concat_words.wordlist` does that at the input boundary.
- **Empty string:** Never stored. The root is never terminal, so `insert("")`
  raises `ValueError`.
- **Duplicates:** Re-inserting a word is allowed and returns the same break
  candidates again; nothing is deduplicated here.
"""


class TrieNode:
  __slots__ = ("children", "is_terminal")

  def __init__(self):
    self.children = None
    self.is_terminal = False


class Trie:
  __slots__ = ("root", "_size")

  def __init__(self):
    self.root = TrieNode()
    self._size = 0

  def __len__(self):
    return self._size

  def __contains__(self, word):
    return self.search(word) is not None


  def insert(self, word):
    """Insert `word` and return its break candidates.

    Parameters
    ----------
    word : str
        Non-empty word to insert.

    Returns
    -------
    list[str]
        For every offset `i` at which the walk sits on a node that already
        terminates an earlier word, the tail `word[i:]`. Ordered by offset,
        possibly empty.

    Raises
    ------
    ValueError
        If `word` is empty.

    Notes
    -----
    - Lazily creates the `children` dict only when a node gets its first child.
    - The terminal check happens *before* consuming each character, so the
      word's own end node never yields an (empty) suffix.
    """
    if not word:
      raise ValueError("cannot insert an empty word")

    missing = []
    node = self.root

    for i, ch in enumerate(word):
      if node.is_terminal:
        missing.append(word[i:])
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
            node.children = {ch: nxt}
        else:
            children[ch] = nxt
      node = nxt

    if not node.is_terminal:
      node.is_terminal = True
      self._size += 1
    return missing


  def prefix_search(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing.

    Complexity
    ----------
    O(L) where L = len(prefix).
    """
    node = self.root
    for ch in prefix:
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node


  def search(self, word):
    """Return the terminal node for `word` if present, else None.
    """
    node = self.prefix_search(word)
    return node if node and node.is_terminal else None


  def enumerate_prefix(self, prefix, k=None):
    """Yield stored words that start with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str
        The prefix to enumerate from. Use "" to export the entire trie.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.

    Yields
    ------
    str
        Words found under the prefix, `prefix` itself first when it is stored.

    Implementation details
    ----------------------
    - Uses a shared mutable character buffer and only joins to a Python string
      at yield time.
    - Traversal order follows child insertion order.
    """
    node = self.prefix_search(prefix)
    if node is None:
      return

    yielded = 0
    buf = list(prefix)

    def child_iter(n):
      if not n.children:
          return iter(())
      return iter(n.children.keys())

    if node.is_terminal:
      yield "".join(buf)
      if k is not None:
          yielded += 1
          if yielded >= k:
              return

    stack = [(node, child_iter(node), len(buf))]

    while stack:
      n, it, depth = stack[-1]
      try:
          ch = next(it)
          child = n.children[ch]
          buf.append(ch)
          if child.is_terminal:
              yield "".join(buf)
              if k is not None:
                  yielded += 1
                  if yielded >= k:
                      return
          stack.append((child, child_iter(child), len(buf) - 1))
      except StopIteration:
          stack.pop()
          buf[depth:] = []


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only.

    Returns
    -------
    int | float
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
