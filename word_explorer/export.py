"""Plain-text and JSON renderings of a StealTree."""

import json

from word_explorer.probability import round_display
from word_explorer.steal_tree import StealTree


def format_tree(tree: StealTree, max_depth: int | None = None) -> str:
    lines = []
    for depth, node in tree.walk():
        if max_depth is not None and depth > max_depth:
            continue
        indent = "  " * depth
        if depth == 0:
            lines.append(tree.display_word(node))
            continue
        prob = round_display(node.probability, 1)
        lines.append(f"{indent}{node.word} +{node.short_steal} ({prob}%)")
    return "\n".join(lines)


def format_histogram(histogram: dict[int, int]) -> str:
    if not histogram:
        return ""
    rows = ["length | words", "-------+------"]
    for length, count in histogram.items():
        rows.append(f"{length:>6} | {count:>5}")
    return "\n".join(rows)


def write_word_list(tree: StealTree, path: str):
    with open(path, "w") as out:
        for line in tree.generate_word_list():
            out.write(line)
            out.write("\n")


def write_json(tree: StealTree, path: str, flat=False):
    data = tree.to_records() if flat else tree.to_json_data()
    with open(path, "w") as out:
        json.dump(data, out, indent=2)
        out.write("\n")
