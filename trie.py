"""
trie.py

Prefix tree over the lowercase a–z alphabet.  Every node owns a fixed array
of 26 child slots (one per letter); an empty slot simply means "no edge".
Insertion and lookup are O(L) in the length of the word.
"""

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)
_ORD_A = ord("a")


class InvalidCharacterError(ValueError):
    """Raised when a word contains a character outside a–z."""

    def __init__(self, word, char, position):
        self.word = word
        self.char = char
        self.position = position
        super().__init__(
            f"invalid character {char!r} at position {position} in word {word!r}"
        )


def char_index(ch: str, word: str = "", position: int = 0) -> int:
    """
    Return the child slot for `ch`.  Raises InvalidCharacterError for anything
    that is not a single lowercase a–z letter.
    """
    if len(ch) != 1 or not ("a" <= ch <= "z"):
        raise InvalidCharacterError(word or ch, ch, position)
    return ord(ch) - _ORD_A


class TrieNode:
    def __init__(self):
        # children: slot i holds the TrieNode for letter ALPHABET[i], or None
        self.children = [None] * ALPHABET_SIZE
        # is_word: True if the path from root down to here spells a stored word
        self.is_word = False

    def insert(self, word: str):
        """
        Insert `word` into this trie.  The word is validated up front, so a
        rejected word never leaves half a path behind.  Empty words are
        refused with ValueError.
        """
        if not word:
            raise ValueError("cannot insert an empty word")
        slots = [char_index(ch, word, pos) for pos, ch in enumerate(word)]
        node = self
        for slot in slots:
            if node.children[slot] is None:
                node.children[slot] = TrieNode()
            node = node.children[slot]
        node.is_word = True

    def child(self, ch: str):
        """Return the child along edge `ch`, or None when there is no such edge."""
        if len(ch) != 1 or not ("a" <= ch <= "z"):
            return None
        return self.children[ord(ch) - _ORD_A]

    def _walk(self, text: str):
        node = self
        for ch in text:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    __contains__ = contains

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def words(self, prefix: str = ""):
        """Yield every stored word in alphabetical order."""
        stack = [(self, prefix)]
        while stack:
            node, spelled = stack.pop()
            if node.is_word:
                yield spelled
            for slot in range(ALPHABET_SIZE - 1, -1, -1):
                sub = node.children[slot]
                if sub is not None:
                    stack.append((sub, spelled + ALPHABET[slot]))

    def count(self) -> int:
        """Number of words stored at or below this node."""
        return sum(1 for _ in self.words())

    def __iter__(self):
        return self.words()


def build_index(words):
    """
    Build a trie from an iterable of lowercase words.

    Returns (root, rejected) where `rejected` lists the words refused because
    they are empty or contain characters outside a–z.  A bad word is skipped;
    it never aborts the build.
    """
    root = TrieNode()
    rejected = []
    for w in words:
        if not w:
            rejected.append(w)
            continue
        try:
            root.insert(w)
        except InvalidCharacterError:
            rejected.append(w)
    return root, rejected
