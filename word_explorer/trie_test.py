import pytest

from word_explorer.trie import (
    DEFINITION_NOT_AVAILABLE,
    AlphagramTrie,
    LexiconError,
    parse_entry,
)
from word_explorer.test_utils import MINI_LEXICON


def test_trie():
    t = AlphagramTrie.create_from_wordlist(
        [
            ("CARE", "def1"),
            ("RACE", "def2"),
            ("ACRE", "def3"),
            ("CARTE", "def4"),
            "TEAPOT",
        ]
    )
    assert not t.is_word()
    assert t.size() == 5

    for word, definition in [
        ("CARE", "def1"),
        ("RACE", "def2"),
        ("ACRE", "def3"),
        ("CARTE", "def4"),
    ]:
        assert t.contains(word)
        assert t.get_definition(word) == definition

    assert t.contains("TEAPOT")
    assert t.get_definition("TEAPOT") == DEFINITION_NOT_AVAILABLE

    # ACER is a node with anagrams, but is not a word itself.
    assert not t.contains("ACER")
    # CAR is only a prefix.
    assert not t.contains("CAR")
    assert not t.contains("RANDOM")
    assert t.get_definition("RANDOM") == DEFINITION_NOT_AVAILABLE
    assert t.get_definition("ACER") == DEFINITION_NOT_AVAILABLE

    # Lookups are case-insensitive.
    assert t.contains("care")
    assert t.get_definition("care") == "def1"


def test_anagrams_share_a_node():
    t = AlphagramTrie()
    n1 = t.add_word("CARE")
    n2 = t.add_word("RACE")
    n3 = t.add_word("ACRE")
    assert n1 is n2 is n3
    assert n1.anagrams == {"CARE", "RACE", "ACRE"}
    assert t.find_node("CERA") is n1
    assert t.anagrams_of("ERAC") == ["ACRE", "CARE", "RACE"]
    assert t.anagrams_of("ZZZZ") == []

    # A path from the root spells out the alphagram.
    node = t
    for let in "ACER":
        node = node.descend(ord(let) - ord("A"))
        assert node is not None
    assert node is n1

    # root, A, AC, ACE, ACER
    assert t.num_nodes() == 5
    assert t.max_word_length() == 4


def test_malformed_words_are_skipped():
    t = AlphagramTrie()
    assert t.add_word("C4RE") is None
    assert t.add_word("") is None
    assert t.add_word("RE-CARE") is None
    assert t.size() == 0
    assert t.num_nodes() == 1
    assert not t.contains("C4RE")
    assert t.get_definition("C4RE") == DEFINITION_NOT_AVAILABLE


def test_non_ascii_words_are_skipped():
    t = AlphagramTrie()
    # These would uppercase to plain A-Z words (STRASSE, FINE).
    assert t.add_word("straße") is None
    assert t.add_word("ﬁne") is None
    assert t.add_word("CAFÉ") is None
    assert t.size() == 0
    assert t.add_word("fine") is not None
    assert t.contains("FINE")


def test_parse_entry():
    assert parse_entry("CARE to be concerned about\n") == (
        "CARE",
        "to be concerned about",
    )
    assert parse_entry("care\n") == ("CARE", None)
    assert parse_entry("  RACE\ta contest  \n") == ("RACE", "a contest")
    assert parse_entry("\n") is None
    assert parse_entry("# comment") is None
    assert parse_entry("BR@CE not a word") is None
    assert parse_entry("straße a street") is None
    assert parse_entry("ﬁne") is None


def test_find_steals_scenario():
    t = AlphagramTrie.create_from_wordlist(["CARE", "RACE", "ACRE", "CARTE"])
    assert t.find_steals("CARE") == [("CARTE", "T")]
    assert t.find_steals("CARE", anywhere=True) == [("CARTE", "T")]
    assert t.find_steals("CARTE") == []
    assert t.find_steals("ZZZZ") == []
    assert t.find_steals("ZZZZ", anywhere=True) == []


def test_find_steals_anywhere():
    t = AlphagramTrie.create_from_wordlist(
        ["CARE", "BRACE", "SCARE", "CARTE", "CARETS", "BOX"]
    )
    # Only the nodes below ACER, so the added letters sort after R.
    assert t.find_steals("CARE") == [
        ("SCARE", "S"),
        ("CARETS", "ST"),
        ("CARTE", "T"),
    ]
    assert t.find_steals("CARE", anywhere=True) == [
        ("BRACE", "B"),
        ("SCARE", "S"),
        ("CARETS", "ST"),
        ("CARTE", "T"),
    ]
    # An S has to go before the T, so this is only found by searching anywhere.
    assert t.find_steals("CARTE") == []
    assert t.find_steals("CARTE", anywhere=True) == [("CARETS", "S")]


def test_find_steals_anagrams():
    t = AlphagramTrie.create_from_wordlist(["CARE", "CARTE", "CATER", "CRATE"])
    assert t.find_steals("ACRE") == [
        ("CARTE", "T"),
        ("CATER", "T"),
        ("CRATE", "T"),
    ]


def test_find_steals_repeated_letters():
    t = AlphagramTrie.create_from_wordlist(["TE", "TEE", "TETE", "EYE", "EERY"])
    # TE has fewer E's than TEE, so it's not a steal.
    assert t.find_steals("TEE") == [("TETE", "T")]
    expected = [("EERY", "RY"), ("TEE", "T"), ("TETE", "TT"), ("EYE", "Y")]
    assert t.find_steals("EE") == expected
    assert t.find_steals("EE", anywhere=True) == expected


def test_find_steals_root_without_node():
    t = AlphagramTrie.create_from_wordlist(["ABCDE"])
    # There's no node for BCD's alphagram at the top of the trie.
    assert t.find_node("BCD") is None
    assert t.find_steals("BCD") == []
    assert t.find_steals("BCD", anywhere=True) == [("ABCDE", "AE")]


def test_load_file():
    t = AlphagramTrie.create_from_file(MINI_LEXICON)
    assert not t.is_word()
    assert t.size() == 18

    assert t.contains("CARE")
    assert t.get_definition("CARE") == "to be concerned about"
    assert t.contains("CATERS")
    assert t.get_definition("CATERS") == "to provide food"
    assert t.contains("CARES")
    assert t.get_definition("CARES") == DEFINITION_NOT_AVAILABLE
    assert not t.contains("BRCE")
    assert not t.contains("STRASSE")
    assert t.anagrams_of("ACERT") == [
        "CARET",
        "CARTE",
        "CATER",
        "CRATE",
        "REACT",
        "TRACE",
    ]
    assert t.max_word_length() == 7


def test_load_missing_file():
    with pytest.raises(LexiconError):
        AlphagramTrie.create_from_file("testdata/does-not-exist.txt")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n\nB4D\n")
    with pytest.raises(LexiconError):
        AlphagramTrie.create_from_file(str(path))
