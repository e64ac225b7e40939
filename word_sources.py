"""
word_sources.py

Loaders that turn a word source into a list of lowercase a–z words, ready for
the trie.  Three sources are supported:

  file      one or more whitespace-separated words per line
  wordfreq  wordfreq's English list, most frequent first
  wordnet   WordNet lemma names (via NLTK), alphabetical

Loaders raise RuntimeError on failure; the caller decides whether to exit.
"""

import os
import re
import sys
from dataclasses import dataclass, field

import nltk
from nltk.corpus import wordnet as wn
from wordfreq import iter_wordlist

SOURCES = ("file", "wordfreq", "wordnet")

_debug_enabled = False


################################################################################
# UTILITY FUNCTIONS
################################################################################

def set_debug(enabled: bool):
    global _debug_enabled
    _debug_enabled = enabled


def debug(msg):
    """Print debug message to stderr with a DEBUG prefix (only when enabled)."""
    if _debug_enabled:
        print(f"DEBUG: {msg}", file=sys.stderr)


def warn(msg):
    print(f"Warning: {msg}", file=sys.stderr)


def is_pure_alpha(word):
    """Return True if `word` consists of only lowercase a–z."""
    return bool(re.fullmatch(r"[a-z]+", word))


def normalize_word(token: str) -> str:
    return token.strip().lower()


@dataclass
class WordList:
    words: list = field(default_factory=list)
    # (line number, original token) for every token that was not a–z
    skipped: list = field(default_factory=list)

    def __len__(self):
        return len(self.words)


################################################################################
# 1. Plain word file
################################################################################

def load_word_file(path: str) -> WordList:
    """
    Read words from `path`.  Every whitespace-separated token is a word; it is
    lowercased and kept only if it is pure a–z, otherwise a warning is printed
    and the token is skipped.  Raises RuntimeError if the file can't be read.
    """
    debug(f"load_word_file: Starting with path='{path}'")
    if not os.path.isfile(path):
        raise RuntimeError(f"file loader error: file not found: {path}")

    result = WordList()
    try:
        # undecodable bytes become U+FFFD, which fails is_pure_alpha below
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, start=1):
                for token in line.split():
                    w = normalize_word(token)
                    if not is_pure_alpha(w):
                        warn(f"skipping invalid word '{token}' on line {lineno}")
                        result.skipped.append((lineno, token))
                        continue
                    result.words.append(w)
    except OSError as e:
        raise RuntimeError(f"file loader error: could not read {path}: {e}")

    debug(f"load_word_file: Collected {len(result.words)} words, skipped {len(result.skipped)}")
    return result


################################################################################
# 2. wordfreq loader
################################################################################

def load_wordfreq_words(limit: int = None) -> WordList:
    """
    English words from wordfreq in descending frequency order, a–z only.
    `limit` caps how many accepted words are returned.
    """
    debug(f"load_wordfreq_words: limit={limit}")
    result = WordList()
    seen = set()
    try:
        for w in iter_wordlist("en"):
            if limit is not None and len(result.words) >= limit:
                break
            w_lower = normalize_word(w)
            if not is_pure_alpha(w_lower):
                continue
            if w_lower in seen:
                continue
            seen.add(w_lower)
            result.words.append(w_lower)
    except Exception as e:
        raise RuntimeError(f"wordfreq loader error: {e}")

    if not result.words and limit != 0:
        raise RuntimeError("wordfreq loader error: no words retrieved")
    debug(f"load_wordfreq_words: {len(result.words)} entries")
    return result


################################################################################
# 3. WordNet (NLTK) loader
################################################################################

def load_wordnet_words(limit: int = None) -> WordList:
    """
    All WordNet lemma names that are purely a–z, sorted.  Downloads the
    corpus through nltk if it is not installed yet.
    """
    try:
        wn.ensure_loaded()
    except LookupError:
        debug("load_wordnet_words: corpus missing, fetching it with nltk")
        try:
            nltk.download("wordnet", quiet=True)
            wn.ensure_loaded()
        except Exception as e:
            raise RuntimeError(f"wordnet loader error: corpus unavailable: {e}")

    try:
        candidates = {
            normalize_word(lemma)
            for synset in wn.all_synsets()
            for lemma in synset.lemma_names()
        }
    except Exception as e:
        raise RuntimeError(f"wordnet loader error: {e}")

    words = sorted(w for w in candidates if is_pure_alpha(w))
    if not words:
        raise RuntimeError("wordnet loader error: no lemmas found")
    debug(f"load_wordnet_words: {len(words)} usable lemmas")
    return WordList(words=words if limit is None else words[:limit])


def load_words(source: str, path: str = None, limit: int = None) -> WordList:
    """Load words from one of SOURCES."""
    if source == "file":
        if not path:
            raise RuntimeError("file loader error: no input path given")
        words = load_word_file(path)
        if limit is not None:
            words.words = words.words[:limit]
        return words
    if source == "wordfreq":
        return load_wordfreq_words(limit)
    if source == "wordnet":
        return load_wordnet_words(limit)
    raise RuntimeError(f"unknown word source '{source}' (expected one of {', '.join(SOURCES)})")
