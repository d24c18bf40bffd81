"""Helpers for treating words as multisets of letters.

Multisets are passed around as alphagrams: strings with their letters sorted.
"""

from collections import Counter

LETTER_A = ord("A")


def to_idx(letter: str):
    assert "A" <= letter <= "Z"
    return ord(letter) - LETTER_A


def is_lexicon_word(word: str):
    if not word:
        return False
    for let in word:
        if let < "A" or let > "Z":
            return False
    return True


def alphagram(letters: str) -> str:
    return "".join(sorted(letters.upper()))


def from_counter(counts: Counter) -> str:
    return "".join(sorted(counts.elements()))


def subtract_letters(a: str, b: str) -> str:
    """Remove one occurrence from a for each letter in b.

    Letters in b which don't appear (often enough) in a are ignored.
    subtract_letters("EE", "E") == "E".
    """
    counts = Counter(a)
    for let in b:
        if counts[let] > 0:
            counts[let] -= 1
    return from_counter(counts)


def add_letters(a: str, b: str) -> str:
    return from_counter(Counter(a) + Counter(b))

