"""A trie keyed by alphagrams (sorted letters) rather than by spelling.

Every path from the root spells an alphagram in ascending order, so the node
reached by following "ACER" holds all the anagrams of CARE (ACRE, CARE, RACE).
Most nodes only exist as prefixes and have no anagrams.
"""

import sys
import time
from typing import Iterable, Self

from tqdm import tqdm

from word_explorer.letters import LETTER_A, alphagram, is_lexicon_word, to_idx

DEFINITION_NOT_AVAILABLE = "Definition not available"


class LexiconError(Exception):
    """The word list is missing or has nothing usable in it."""


class AlphagramTrie:
    _children: list[Self | None]
    anagrams: set[str]
    definitions: dict[str, str]

    def __init__(self):
        self._children = [None] * 26
        self.anagrams = set()
        self.definitions = {}

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return bool(self.anagrams)

    def children(self):
        """(letter, child) pairs in ascending letter order."""
        for i, child in enumerate(self._children):
            if child:
                yield chr(i + LETTER_A), child

    # ---

    def add_word(self, word: str, definition: str | None = None) -> Self | None:
        """Index word under its alphagram. Returns the terminal node.

        Words with anything other than A-Z (either case) are skipped (returns None).
        """
        # Check before uppercasing: "ß".upper() is "SS".
        if not word.isascii():
            return None
        word = word.upper()
        if not is_lexicon_word(word):
            return None
        node = self
        for let in alphagram(word):
            c = to_idx(let)
            if not node.starts_word(c):
                node._children[c] = AlphagramTrie()
            node = node.descend(c)
        node.anagrams.add(word)
        if definition is not None:
            node.definitions[word] = definition
        return node

    def find_node(self, letters: str) -> Self | None:
        """Walk to the node for these letters (in any order) without creating any."""
        node = self
        for let in alphagram(letters):
            if not ("A" <= let <= "Z"):
                return None
            node = node.descend(to_idx(let))
            if node is None:
                return None
        return node

    def anagrams_of(self, letters: str) -> list[str]:
        node = self.find_node(letters)
        return sorted(node.anagrams) if node else []

    def contains(self, word: str):
        word = word.upper()
        node = self.find_node(word)
        return node is not None and word in node.anagrams

    def get_definition(self, word: str) -> str:
        word = word.upper()
        node = self.find_node(word)
        if node is None or word not in node.anagrams:
            return DEFINITION_NOT_AVAILABLE
        return node.definitions.get(word) or DEFINITION_NOT_AVAILABLE

    def size(self):
        return len(self.anagrams) + sum(c.size() for _, c in self.children())

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for _, c in self.children())

    def max_word_length(self):
        depths = [1 + c.max_word_length() for _, c in self.children()]
        return max(depths, default=0)

    def find_steals(
        self, letters: str, anywhere: bool = False
    ) -> list[tuple[str, str]]:
        """Find every word that can be made by adding letters to these ones.

        Returns (word, added letters) pairs, with the added letters as an
        alphagram. Results come out in ascending-letter traversal order, with a
        shorter word before the longer words that extend it. A word is reported
        even if there's a shorter steal on the way to it.

        By default only the nodes below the base alphagram's own node are
        searched, so every added letter sorts at or after the last base letter.
        If that node doesn't exist there are no steals. With anywhere, the added
        letters can go anywhere, which finds every superset in the lexicon.
        """
        base = alphagram(letters)
        out = []
        if anywhere:
            _collect_supersets(self, base, 0, "", out)
        else:
            node = self.find_node(base)
            if node is not None:
                for letter, child in node.children():
                    _collect_descendants(child, letter, out)
        return out

    @staticmethod
    def create_from_wordlist(entries: Iterable[str | tuple[str, str]]) -> Self:
        """Build a trie from words or (word, definition) pairs."""
        trie = AlphagramTrie()
        for entry in entries:
            word, definition = (entry, None) if isinstance(entry, str) else entry
            trie.add_word(word, definition)
        return trie

    @staticmethod
    def create_from_file(path: str, progress=False) -> Self:
        start_s = time.time()
        trie = AlphagramTrie()
        num_words = 0
        num_skipped = 0
        try:
            with open(path, encoding="utf-8") as f:
                for line in tqdm(f, desc=path, unit=" lines", disable=not progress):
                    entry = parse_entry(line)
                    if entry is None:
                        if line.strip() and not line.strip().startswith("#"):
                            num_skipped += 1
                        continue
                    trie.add_word(*entry)
                    num_words += 1
        except OSError as e:
            raise LexiconError(f"Unable to read word list {path}: {e}") from e
        if num_words == 0:
            raise LexiconError(f"No words found in {path}")
        if num_skipped:
            sys.stderr.write(f"Skipped {num_skipped} malformed entries in {path}\n")
        elapsed_s = time.time() - start_s
        sys.stderr.write(f"Loaded {num_words} words from {path} in {elapsed_s:.2f}s\n")
        return trie


def parse_entry(line: str) -> tuple[str, str | None] | None:
    """Parse a "WORD definition..." line. Returns None for unusable lines."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    parts = line.split(None, 1)
    if not parts[0].isascii():
        return None
    word = parts[0].upper()
    if not is_lexicon_word(word):
        return None
    definition = parts[1].strip() if len(parts) > 1 else None
    return word, definition


def _emit(node: AlphagramTrie, added: str, out: list):
    for word in sorted(node.anagrams):
        out.append((word, added))


def _collect_descendants(node: AlphagramTrie, added: str, out: list):
    _emit(node, added, out)
    for letter, child in node.children():
        _collect_descendants(child, added + letter, out)


def _collect_supersets(
    node: AlphagramTrie, base: str, i: int, added: str, out: list
):
    # A base letter is always consumed at the first chance. Since equal letters
    # are interchangeable this gives each superset exactly one path.
    if i == len(base) and added:
        _emit(node, added, out)
    for letter, child in node.children():
        if i < len(base) and letter == base[i]:
            _collect_supersets(child, base, i + 1, added, out)
        elif i == len(base) or letter < base[i]:
            _collect_supersets(child, base, i, added + letter, out)
        # Otherwise base[i] can never appear further down this path.
