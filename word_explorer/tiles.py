"""Reference tables for the English tile set and the supported lexicons."""

# Standard English distribution: 98 lettered tiles plus two blanks.
TILE_COUNTS = {
    "A": 9,
    "B": 2,
    "C": 2,
    "D": 4,
    "E": 12,
    "F": 2,
    "G": 3,
    "H": 2,
    "I": 9,
    "J": 1,
    "K": 1,
    "L": 4,
    "M": 2,
    "N": 6,
    "O": 8,
    "P": 2,
    "Q": 1,
    "R": 6,
    "S": 4,
    "T": 6,
    "U": 4,
    "V": 2,
    "W": 2,
    "X": 1,
    "Y": 2,
    "Z": 1,
}

NUM_BLANKS = 2
TOTAL_TILES = sum(TILE_COUNTS.values()) + NUM_BLANKS  # 100

# Short codes for the word lists that ship alongside the explorer.
LEXICONS = ("CSW19", "NWL18", "LONG")
DEFAULT_LEXICON = "CSW19"

# Shorter queries have too many steals to be useful.
MIN_QUERY_LENGTH = 4
