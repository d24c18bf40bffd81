"""How likely is it that a particular set of letters comes out of the bag?

This is the multivariate hypergeometric distribution, with a twist: blanks can
stand in for any letter. For a request needing c_i copies of letter i, where
the pool holds a_i of them and B blanks, the number of matching hands is

    sum over j_i (blanks used for letter i) of
        prod_i C(a_i, c_i - j_i) * C(B, sum_i j_i)

and the probability is that count over C(N, k), where N is the pool size and
k the number of letters requested. Everything but the final division is done
with exact integers.
"""

import math
from collections import Counter

from word_explorer.tiles import NUM_BLANKS, TILE_COUNTS

BLANK = "?"


class ProbabilityModel:
    tile_counts: dict[str, int]
    blanks: int

    def __init__(self, tile_counts: dict[str, int] = TILE_COUNTS, blanks=NUM_BLANKS):
        self.tile_counts = dict(tile_counts)
        self.blanks = blanks
        self._cache = {}

    def pool_size(self):
        return sum(self.tile_counts.values()) + self.blanks

    def count_hands(self, letters: str) -> int:
        """Number of distinct k-tile hands that can spell exactly these letters."""
        # by_blanks[j] = ways to cover the letters so far using j blanks.
        by_blanks = [1]
        for let, need in Counter(letters).items():
            if not ("A" <= let <= "Z"):
                raise ValueError(f"Not a letter: {let!r}")
            have = self.tile_counts.get(let, 0)
            ways = [math.comb(have, need - j) for j in range(need + 1)]
            by_blanks = poly_multiply(by_blanks, ways)
        return sum(
            n * math.comb(self.blanks, j) for j, n in enumerate(by_blanks) if n
        )

    def get_probability(self, letters: str) -> float:
        """Percent chance (0-100) of drawing exactly these letters."""
        letters = letters.upper()
        key = "".join(sorted(letters))
        prob = self._cache.get(key)
        if prob is None:
            k = len(key)
            n = self.pool_size()
            if k > n:
                prob = 0.0
            else:
                prob = min(100.0, 100 * self.count_hands(key) / math.comb(n, k))
            self._cache[key] = prob
        return prob

    def without(self, seen: str) -> "ProbabilityModel":
        """The model for the unseen pool once these tiles are known.

        "?" stands for a blank. A letter whose tiles are all accounted for must
        have been a blank.
        """
        counts = dict(self.tile_counts)
        blanks = self.blanks
        for let in seen.upper():
            if let != BLANK and counts.get(let, 0) > 0:
                counts[let] -= 1
            elif blanks > 0:
                blanks -= 1
            else:
                raise ValueError(f"No {let} tiles left to remove for {seen}")
        return ProbabilityModel(counts, blanks)


def poly_multiply(a: list[int], b: list[int]) -> list[int]:
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if not x:
            continue
        for j, y in enumerate(b):
            out[i + j] += x * y
    return out


def round_display(value: float, digits=1) -> float:
    """Round half up, which is what people expect to see on screen."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale
