"""
compound_words.py

Finds dictionary words that are concatenations of two or more other
dictionary entries.

A word is tested by trying split points left to right: the first part must be
a stored word, and the remainder must itself decompose (or be a stored word
when the first part runs to the end).  The first split that works is the one
reported, so the part count is that of the left-most shortest-first
segmentation, not the minimum or maximum possible.

Candidates are scanned grouped by length, longest length first, and in
insertion order within a length.
"""

from dataclasses import dataclass, field

from trie import TrieNode, build_index


@dataclass(frozen=True)
class DecompositionResult:
    is_decomposable: bool
    part_count: int
    parts: tuple = field(default=())


NOT_DECOMPOSABLE = DecompositionResult(False, 0)


@dataclass(frozen=True)
class CompoundWord:
    word: str
    part_count: int
    parts: tuple

    def __str__(self):
        return self.word


class Dictionary:
    """
    Loaded words grouped by length.  Insertion order is kept inside each
    length bucket; a repeated word is stored once.
    """

    def __init__(self, words=()):
        self._by_length = {}
        self._seen = set()
        for w in words:
            self.add(w)

    def add(self, word: str) -> bool:
        """Add `word`; returns False if it was already present or empty."""
        if not word or word in self._seen:
            return False
        self._seen.add(word)
        self._by_length.setdefault(len(word), []).append(word)
        return True

    def lengths(self):
        return set(self._by_length)

    def lengths_descending(self):
        return sorted(self._by_length, reverse=True)

    def words_of_length(self, length: int):
        return list(self._by_length.get(length, ()))

    def longest_first(self):
        """Yield every word, longest length bucket first."""
        for length in self.lengths_descending():
            yield from self._by_length[length]

    def __len__(self):
        return len(self._seen)

    def __contains__(self, word):
        return word in self._seen

    def __iter__(self):
        return self.longest_first()


def decompose(root: TrieNode, text: str, start: int = 0, end: int = None) -> DecompositionResult:
    """
    Decide whether text[start..end] (inclusive) splits into stored words.

    Split points are tried in increasing order and the first success wins.
    When the first part spans the whole range the result is that part alone
    (one part).  An empty range is simply not decomposable.

    Results are tabulated per start position from the right end backwards,
    which gives the same answer as the plain recursion without recursing or
    re-solving the same suffix twice.
    """
    if end is None:
        end = len(text) - 1
    if start > end:
        return NOT_DECOMPOSABLE
    if start < 0 or end >= len(text):
        raise IndexError(f"range [{start}, {end}] out of bounds for {text!r}")

    # counts[s]: parts found for text[s..end] (0 = none); splits[s]: end of first part
    counts = [0] * (end + 2)
    splits = [None] * (end + 2)
    for s in range(end, start - 1, -1):
        node = root
        for i in range(s, end + 1):
            node = node.child(text[i])
            if node is None:
                break
            if i == end:
                if node.is_word:
                    counts[s], splits[s] = 1, i
            elif node.is_word and counts[i + 1]:
                counts[s], splits[s] = 1 + counts[i + 1], i
                break

    if not counts[start]:
        return NOT_DECOMPOSABLE

    parts = []
    s = start
    while s <= end:
        i = splits[s]
        parts.append(text[s:i + 1])
        s = i + 1
    return DecompositionResult(True, counts[start], tuple(parts))


def is_compound(root: TrieNode, word: str) -> bool:
    """True if `word` is built from at least two stored words."""
    result = decompose(root, word)
    return result.is_decomposable and result.part_count > 1


def find_compound_words(root: TrieNode, dictionary: Dictionary):
    """
    Yield a CompoundWord for every dictionary word made of two or more stored
    words, longest words first.  The trie is only read here.
    """
    for word in dictionary.longest_first():
        result = decompose(root, word)
        if result.is_decomposable and result.part_count > 1:
            yield CompoundWord(word, result.part_count, result.parts)


def load_dictionary(words):
    """
    Build the trie and the length-grouped dictionary from one word sequence.
    Returns (root, dictionary, rejected); rejected words are in neither.
    """
    words = list(words)
    root, rejected = build_index(words)
    bad = set(rejected)
    dictionary = Dictionary(w for w in words if w not in bad)
    return root, dictionary, rejected
