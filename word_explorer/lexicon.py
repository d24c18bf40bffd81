"""Keep one AlphagramTrie per lexicon, since building one is the slow part."""

import os
import threading
from typing import Callable

from word_explorer.trie import AlphagramTrie


class LexiconCache:
    """Builds each named lexicon at most once and hands back the same trie after that.

    Several threads asking for the same lexicon wait on a single build.
    """

    def __init__(
        self,
        lexicon_dir: str = "wordlists",
        loader: Callable[[str], AlphagramTrie] = AlphagramTrie.create_from_file,
    ):
        self.lexicon_dir = lexicon_dir
        self.loader = loader
        self._tries: dict[str, AlphagramTrie] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def path_for(self, name: str):
        return os.path.join(self.lexicon_dir, f"{name}.txt")

    def add(self, name: str, trie: AlphagramTrie):
        with self._lock:
            self._tries[name] = trie

    def loaded(self) -> list[str]:
        with self._lock:
            return list(self._tries)

    def get(self, name: str) -> AlphagramTrie:
        with self._lock:
            trie = self._tries.get(name)
            if trie is not None:
                return trie
            name_lock = self._locks.setdefault(name, threading.Lock())

        with name_lock:
            # Someone else may have finished the build while we waited.
            with self._lock:
                trie = self._tries.get(name)
            if trie is None:
                trie = self.loader(self.path_for(name))
                with self._lock:
                    self._tries[name] = trie
        return trie
