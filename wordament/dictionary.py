from __future__ import annotations

import logging
from typing import Iterable

import httpx
import numpy as np

from wordament.wordlist import load_words

logger = logging.getLogger("wordament")

ALPHABET_SIZE = 26
NO_CHILD = -1

_ORD_A = ord("a")
_INITIAL_CAPACITY = 64


def letter_index(ch: str) -> int:
    idx = ord(ch) - _ORD_A
    if not 0 <= idx < ALPHABET_SIZE:
        raise ValueError(f"Letter outside a-z: {ch!r}")
    return idx


class DictionaryIndex:
    """Prefix trie stored as an arena of nodes addressed by integer index.

    Row ``n`` of the child table holds the 26 child indices of node ``n``
    (``NO_CHILD`` where absent). Node 0 is the root; its children are the
    first letters of every word. Built once, read-only afterwards, so one
    index can be shared by any number of concurrent searches.
    """

    ROOT = 0

    def __init__(self, children: np.ndarray, is_word: np.ndarray, word_count: int):
        self._children = children
        self._is_word = is_word
        self._is_leaf = ~(children != NO_CHILD).any(axis=1)
        self._word_count = word_count
        for arr in (self._children, self._is_word, self._is_leaf):
            arr.flags.writeable = False

    @classmethod
    def build(cls, words: Iterable[str]) -> DictionaryIndex:
        """Build the index from lowercase a-z words. Empty strings are skipped."""
        children = np.full((_INITIAL_CAPACITY, ALPHABET_SIZE), NO_CHILD, dtype=np.int32)
        is_word = np.zeros(_INITIAL_CAPACITY, dtype=bool)
        size = 1
        word_count = 0

        for word in words:
            if not word:
                continue
            node = cls.ROOT
            for ch in word:
                idx = letter_index(ch)
                child = int(children[node, idx])
                if child == NO_CHILD:
                    if size == len(children):
                        children = np.vstack([children, np.full_like(children, NO_CHILD)])
                        is_word = np.concatenate([is_word, np.zeros_like(is_word)])
                    child = size
                    children[node, idx] = child
                    size += 1
                node = child
            if not is_word[node]:
                word_count += 1
            is_word[node] = True

        return cls(children[:size].copy(), is_word[:size].copy(), word_count)

    def step(self, node: int, letter: str) -> int | None:
        """Index of ``node``'s child for ``letter``, or None if no word continues that way."""
        child = int(self._children[node, letter_index(letter)])
        return None if child == NO_CHILD else child

    def is_word_at(self, node: int) -> bool:
        return bool(self._is_word[node])

    def is_terminal_at(self, node: int) -> bool:
        return bool(self._is_leaf[node])

    def classify(self, candidate: str) -> tuple[bool, bool]:
        """Return ``(is_word, is_terminal)`` for a candidate prefix.

        A terminal prefix cannot be extended into any dictionary word, so a
        search must stop there. Missing prefixes (and the empty string) are
        reported as ``(False, True)``.
        """
        if not candidate:
            return False, True
        node = self.ROOT
        for ch in candidate:
            node = self.step(node, ch)
            if node is None:
                return False, True
        return self.is_word_at(node), self.is_terminal_at(node)

    @property
    def node_count(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        try:
            return self.classify(word)[0]
        except ValueError:
            return False

    def render(self) -> str:
        """Indented dump of the trie, one line per node, depth marked by ``- ``."""
        lines: list[str] = []

        def walk(node: int, depth: int):
            for idx in np.flatnonzero(self._children[node] != NO_CHILD):
                child = int(self._children[node, idx])
                status = "is word" if self._is_word[child] else "not word"
                lines.append(f"{'- ' * depth}{chr(_ORD_A + int(idx))}: {status}")
                walk(child, depth + 1)

        walk(self.ROOT, 0)
        return "\n".join(lines)


def load_dictionary(
    source: str,
    min_length: int = 1,
    client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> DictionaryIndex:
    words = load_words(source, min_length, client=client, timeout=timeout)
    index = DictionaryIndex.build(words)
    logger.info("Dictionary built: %d words, %d nodes", len(index), index.node_count)
    return index
