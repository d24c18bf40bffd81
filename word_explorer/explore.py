#!/usr/bin/env python
"""Show every word that can be stolen from a word, and how likely each steal is.

Sample invocation:

    word-explorer --lexicon NWL18 --summary CARE TRAIN
"""

import argparse
import sys
import time

from word_explorer.args import add_standard_args, get_trie_from_args
from word_explorer.export import (
    format_histogram,
    format_tree,
    write_json,
    write_word_list,
)
from word_explorer.probability import ProbabilityModel
from word_explorer.steal_tree import StealTree
from word_explorer.tiles import MIN_QUERY_LENGTH
from word_explorer.trie import LexiconError

WORD_PLACEHOLDER = "{word}"


def output_path(template: str, word: str):
    return template.replace(WORD_PLACEHOLDER, word)


def main():
    parser = argparse.ArgumentParser(
        prog="Word Explorer",
        description="Find all the steals of a word and the odds of drawing each one.",
    )
    parser.add_argument("words", nargs="+", type=str, help="Words to explore.")
    parser.add_argument(
        "--seen",
        type=str,
        default="",
        help="Tiles already seen (on the board or your rack), removed from the pool. "
        "Use ? for a blank.",
    )
    parser.add_argument(
        "--anywhere",
        action="store_true",
        help="Let added letters sort anywhere, not just after the word's own. "
        "Finds every superset in the lexicon.",
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Only show each word the first time it's found.",
    )
    parser.add_argument(
        "--max_depth",
        type=int,
        default=None,
        help="Only print this many levels of the tree.",
    )
    parser.add_argument(
        "--word_list",
        type=str,
        default=None,
        help="Write the indented word list to this file. {word} in the path is "
        "replaced by the word being explored.",
    )
    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Write the tree as JSON to this file. {word} is replaced as for "
        "--word_list.",
    )
    parser.add_argument(
        "--flat_json",
        action="store_true",
        help="Write JSON as flat rows with dotted ids rather than nested nodes.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a table of steals by word length.",
    )
    add_standard_args(parser, progress=True)
    args = parser.parse_args()

    try:
        model = ProbabilityModel().without(args.seen)
    except ValueError as e:
        parser.error(str(e))
    for path in (args.word_list, args.json):
        if path and len(args.words) > 1 and WORD_PLACEHOLDER not in path:
            parser.error(
                f"{path}: use {WORD_PLACEHOLDER} in the output path "
                "to write one file per word"
            )
    try:
        trie = get_trie_from_args(args)
    except LexiconError as e:
        parser.error(str(e))

    status = 0
    for word in args.words:
        if len(word) < MIN_QUERY_LENGTH:
            print(f"You must enter a word of {MIN_QUERY_LENGTH} or more letters.")
            status = 1
            continue
        start_s = time.time()
        tree = StealTree(
            word, trie, model, anywhere=args.anywhere, dedupe=args.dedupe
        )
        elapsed_s = time.time() - start_s
        sys.stderr.write(
            f"{tree.root_word}: {tree.num_nodes() - 1} steals in {elapsed_s:.2f}s\n"
        )

        print(tree.definition(tree.root_word))
        print(format_tree(tree, args.max_depth))
        if args.summary:
            print(format_histogram(tree.length_histogram()))
        if args.word_list:
            write_word_list(tree, output_path(args.word_list, tree.root_word))
        if args.json:
            write_json(
                tree, output_path(args.json, tree.root_word), flat=args.flat_json
            )
        print()

    return status


if __name__ == "__main__":
    sys.exit(main())
