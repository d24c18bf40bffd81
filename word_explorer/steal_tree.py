"""The tree of words that can be stolen from a root word, one steal at a time.

Each child of a node is a word containing all of its parent's letters plus at
least one more. Probability flows down from the root (100%): a node's
probability is split among its children in proportion to how likely each
child's extra letters are to be drawn.
"""

from dataclasses import dataclass, field
from typing import Iterator, Self

from word_explorer.letters import add_letters, subtract_letters
from word_explorer.probability import ProbabilityModel, round_display
from word_explorer.trie import AlphagramTrie


@dataclass
class TreeNode:
    word: str
    children: list[Self] = field(default_factory=list)
    long_steal: str = ""
    """Letters added to the root word to get this word (an alphagram)."""
    short_steal: str = ""
    """Letters added to the parent word to get this word (an alphagram)."""
    probability: float = 100.0


class StealTree:
    root_word: str
    root: TreeNode
    trie: AlphagramTrie
    model: ProbabilityModel

    def __init__(
        self,
        root_word: str,
        trie: AlphagramTrie,
        model: ProbabilityModel | None = None,
        anywhere=False,
        dedupe=False,
    ):
        """Build the full tree for root_word.

        The root word doesn't have to be in the lexicon. With dedupe, a word only
        appears at the first place it's discovered; otherwise a word reachable by
        adding letters in different orders shows up once for each path.
        """
        self.root_word = root_word.upper()
        self.trie = trie
        self.model = model or ProbabilityModel()
        self.anywhere = anywhere
        self.dedupe = dedupe
        self._seen = {self.root_word}
        self.root = TreeNode(self.root_word)
        self.expand(self.root)
        self._seen = None

    def expand(self, node: TreeNode):
        candidates = []
        for word, added in self.trie.find_steals(node.word, self.anywhere):
            if self.dedupe:
                if word in self._seen:
                    continue
                self._seen.add(word)
            long_steal = add_letters(node.long_steal, added)
            short_steal = subtract_letters(long_steal, node.long_steal)
            candidates.append((word, long_steal, short_steal))
        if not candidates:
            return

        weights = [self.model.get_probability(short) for _, _, short in candidates]
        norm = sum(weights)
        for (word, long_steal, short_steal), weight in zip(candidates, weights):
            if norm > 0:
                prob = node.probability * weight / norm
            else:
                # Nothing can be drawn, but the mass still has to go somewhere.
                prob = node.probability / len(candidates)
            node.children.append(
                TreeNode(
                    word=word,
                    long_steal=long_steal,
                    short_steal=short_steal,
                    probability=prob,
                )
            )
        for child in node.children:
            self.expand(child)

    # --- Read-only views of the finished tree

    def is_valid_root(self):
        return self.trie.contains(self.root_word)

    def definition(self, word: str):
        return self.trie.get_definition(word)

    def display_word(self, node: TreeNode):
        if node is self.root and not self.is_valid_root():
            return node.word.lower()
        return node.word

    def tooltip(self, node: TreeNode):
        if node is self.root:
            return None
        return f"{node.long_steal}   {round_display(node.probability, 1)}%"

    def walk(
        self, node: TreeNode | None = None, depth=0
    ) -> Iterator[tuple[int, TreeNode]]:
        """Pre-order traversal yielding (depth, node)."""
        node = node or self.root
        yield depth, node
        for child in node.children:
            yield from self.walk(child, depth + 1)

    def num_nodes(self):
        return sum(1 for _ in self.walk())

    def generate_word_list(
        self, prefix="", node: TreeNode | None = None
    ) -> list[str]:
        """Every word below node, indented two spaces per level."""
        node = node or self.root
        out = []
        for child in node.children:
            out.append(prefix + "  " + child.word)
            out += self.generate_word_list(prefix + "  ", child)
        return out

    def length_histogram(self, node: TreeNode | None = None) -> dict[int, int]:
        """Count of words below node, keyed by word length."""
        node = node or self.root
        counts = {}
        for depth, n in self.walk(node):
            if depth == 0:
                continue
            counts[len(n.word)] = counts.get(len(n.word), 0) + 1
        return dict(sorted(counts.items()))

    def to_json_data(self, node: TreeNode | None = None):
        """Nested {name, children} structure, as used by d3.hierarchy."""
        node = node or self.root
        return {
            "name": node.word,
            "steal": node.short_steal,
            "prob": node.probability,
            "children": [self.to_json_data(child) for child in node.children],
        }

    def to_records(self) -> list[dict]:
        """Flat rows with dotted path ids ("CARE.CARTE"), as used by d3.stratify."""
        out = []

        def visit(node: TreeNode, path: str):
            out.append(
                {
                    "id": path,
                    "def": self.definition(node.word),
                    "shortsteal": node.short_steal,
                    "prob": node.probability,
                }
            )
            for child in node.children:
                visit(child, f"{path}.{child.word}")

        visit(self.root, self.root.word)
        return out

