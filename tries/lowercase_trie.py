"""
Lowercase Trie (character-per-node) with fixed 26-slot children.

This module provides a prefix trie over the closed alphabet `a..z`.
Key design choices:
- **Fixed-width children:** every `TrieNode` owns a list of exactly 26 slots,
  indexed by `ord(ch) - ord("a")`. A slot is either `None` (empty) or a node
  whose `label` is the letter for that slot. Slots are allocated eagerly when
  the node is created, so lookups are plain list indexing.
- **Sorted enumeration for free:** visiting slots in index order is visiting
  letters in alphabetical order, so `words()` is lexicographically sorted
  without any sorting step.
- **Checked contract:** `insert` / `contains` accept only non-empty strings of
  `a..z`. The check runs under `__debug__` (the normal interpreter) and raises
  `InvalidWordError` before any mutation; `python -O` skips it.
- **Iterative traversals:** enumeration uses an explicit stack, so the
  longest word is not bounded by the recursion limit.


Classes
-------
TrieNode
    Node holding `label`, `is_terminal` and 26 `children` slots.
Trie
    Public API: insert, contains, words, is_lowercase, plus batch_insert and
    structural stats.
InvalidWordError
    Raised for input outside the alphabet (or empty) when checks are on.


Complexity
----------
- insert / contains: O(L)
- batch insert (sorted): ~O(total new characters created)
- words: O(total characters emitted + nodes visited)
    """

import logging

log = logging.getLogger("trie_bench")

ALPHA_SIZE = 26
UNSET = ""
_OFFSET = ord("a")


def slot_index(ch):
  """Alphabet index of a lowercase letter (`'a' -> 0 ... 'z' -> 25`)."""
  return ord(ch) - _OFFSET


class InvalidWordError(ValueError):
  """Input violated the trie's alphabet contract."""

  def __init__(self, operation, word):
    self.operation = operation
    self.word = word
    super().__init__(
      f"{operation}: {word!r} is not a non-empty string of lowercase letters a-z")


class TrieNode:
  __slots__ = ("label", "is_terminal", "children")

  def __init__(self, label=UNSET):
    self.label = label
    self.is_terminal = False
    self.children = [None] * ALPHA_SIZE

  def has_any_child(self):
    for child in self.children:
      if child is not None:
        return True
    return False

  def __repr__(self):
    return f"TrieNode(label={self.label!r}, is_terminal={self.is_terminal})"


class Trie:
  __slots__ = ("root", "_size")

  def __init__(self):
    self.root = TrieNode()
    self._size = 0

  @staticmethod
  def is_lowercase(s):
    """Return True iff every character of `s` is in `a..z` (True for "")."""
    for ch in s:
      if not "a" <= ch <= "z":
        return False
    return True

  @classmethod
  def _check(cls, operation, word):
    if not isinstance(word, str) or not word or not cls.is_lowercase(word):
      raise InvalidWordError(operation, word)

  def insert(self, word):
    """Insert a single word and return the trie so calls chain.

    Parameters
    ----------
    word : str
        Non-empty string of lowercase letters.

    Returns
    -------
    Trie
        `self`, e.g. `t.insert("man").insert("many")`.

    Raises
    ------
    InvalidWordError
        When checks are enabled and `word` is empty or leaves the alphabet.

    Complexity
    ----------
    O(L) time, at most L new nodes where L = len(word).
    """
    if __debug__:
      self._check("insert", word)

    node = self.root
    for ch in word:
      i = slot_index(ch)
      nxt = node.children[i]
      if nxt is None:
        nxt = TrieNode(ch)
        node.children[i] = nxt
      node = nxt

    if not node.is_terminal:
      node.is_terminal = True
      self._size += 1
    return self

  def batch_insert(self, words, *, dedup=True, presorted=False):
    """Bulk-insert many words, reusing the common prefix of neighbours.

    Parameters
    ----------
    words : Iterable[str]
        Words to insert. All are validated before the trie is touched.
    dedup : bool, default=True
        Drop duplicates within the batch before walking.
    presorted : bool, default=False
        If True, `words` is already in ascending order; only the stable
        O(n) dedup pass runs.

    Returns
    -------
    Trie
        `self`.

    Notes
    -----
    Iterates words in sorted order and keeps the node path of the previous
    word; the walk for the next word restarts at the end of their Longest
    Common Prefix (LCP) instead of the root.
    """
    words = self._prepare_batch(words, dedup, presorted)
    if __debug__:
      for w in words:
        self._check("batch_insert", w)

    created = 0
    prev = ""
    path = [self.root]

    for w in words:
      lp, lw = len(prev), len(w)
      i = 0
      while i < lp and i < lw and prev[i] == w[i]:
        i += 1

      del path[i + 1:]
      node = path[-1]

      for ch in w[i:]:
        idx = slot_index(ch)
        nxt = node.children[idx]
        if nxt is None:
          nxt = TrieNode(ch)
          node.children[idx] = nxt
          created += 1
        path.append(nxt)
        node = nxt

      if not node.is_terminal:
        node.is_terminal = True
        self._size += 1
      prev = w

    log.debug("batch_insert: %d words, %d new nodes", len(words), created)
    return self

  @staticmethod
  def _prepare_batch(words, dedup=True, presorted=False):
    """Sort and optionally deduplicate a batch.

    Returns
    -------
    list[str]
        Words ready for `batch_insert`.

    Complexity
    ----------
    O(n log n) when sorting; O(n) when `presorted=True`.
    """
    if not presorted:
      return sorted(set(words)) if dedup else sorted(words)

    if dedup:
      unique = []
      last = None
      for w in words:
        if w != last:
          unique.append(w)
          last = w
      return unique
    return list(words)

  def contains(self, word):
    """Return True iff `word` was inserted.

    Strict prefixes and extensions of stored words are not members unless
    they were inserted themselves.
    """
    if __debug__:
      self._check("contains", word)

    node = self.root
    for ch in word:
      node = node.children[slot_index(ch)]
      if node is None:
        return False
    return node.is_terminal

  def iter_words(self):
    """Yield every stored word once, in ascending lexicographic order.

    Implementation details
    ----------------------
    - Explicit stack of `(node, slot_iterator, depth)` frames.
    - A shared character buffer holds the current root-to-node path. Entering
      a child appends its label; when the child's frame is exhausted (or the
      child is a leaf and gets no frame) the buffer is cut back to the
      parent's depth, so sibling branches never see each other's letters.
    """
    buf = []
    stack = [(self.root, iter(self.root.children), 0)]

    while stack:
      node, it, depth = stack[-1]
      child = next(it, False)
      if child is False:
        stack.pop()
        del buf[depth:]
        continue
      if child is None:
        continue

      del buf[depth:]
      buf.append(child.label)
      if child.is_terminal:
        yield "".join(buf)
      if child.has_any_child():
        stack.append((child, iter(child.children), depth + 1))

  def words(self):
    """Return all stored words as a sorted list (empty for an empty trie)."""
    return list(self.iter_words())

  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return the average number of occupied slots over nodes with
        at least one child.

    Returns
    -------
    int | float

    Complexity
    ----------
    O(#nodes * 26) time, O(depth * 26) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      occupied = [c for c in node.children if c is not None]
      if occupied:
        total_deg += len(occupied)
        internal += 1
        stack.extend(occupied)
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes

  def __len__(self):
    return self._size

  def __contains__(self, word):
    # container protocol: invalid input is simply not a member
    if not isinstance(word, str) or not word or not self.is_lowercase(word):
      return False
    return self.contains(word)

  def __iter__(self):
    return self.iter_words()

  def __repr__(self):
    return f"Trie(words={self._size})"
