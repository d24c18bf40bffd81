"""Standard command-line arguments shared across tools."""

import argparse

from word_explorer.lexicon import LexiconCache
from word_explorer.tiles import DEFAULT_LEXICON, LEXICONS
from word_explorer.trie import AlphagramTrie


def add_standard_args(parser: argparse.ArgumentParser, *, progress=False):
    parser.add_argument(
        "--lexicon",
        type=str,
        choices=LEXICONS,
        default=DEFAULT_LEXICON,
        help="Name of the word list to use.",
    )
    parser.add_argument(
        "--lexicon_dir",
        type=str,
        default="wordlists",
        help="Directory containing <LEXICON>.txt files.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Path to a word list file with one 'WORD definition' per line. "
        "Overrides --lexicon.",
    )
    if progress:
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a progress bar while loading the word list.",
        )


def get_cache_from_args(args: argparse.Namespace) -> LexiconCache:
    show_progress = getattr(args, "progress", False)

    def loader(path: str):
        return AlphagramTrie.create_from_file(path, progress=show_progress)

    return LexiconCache(args.lexicon_dir, loader=loader)


def get_trie_from_args(
    args: argparse.Namespace, cache: LexiconCache | None = None
) -> AlphagramTrie:
    if args.dictionary:
        return AlphagramTrie.create_from_file(
            args.dictionary, progress=getattr(args, "progress", False)
        )
    cache = cache or get_cache_from_args(args)
    return cache.get(args.lexicon)
