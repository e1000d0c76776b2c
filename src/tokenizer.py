"""Split text into candidate words on whitespace, digits and a fixed punctuation set."""

import re
from typing import List

# Any single delimiter ends a word; runs of delimiters produce empty pieces
# that are dropped.
DELIMITER_PATTERN = r"""[\s0-9,.!?"$%&]"""

_delimiters = re.compile(DELIMITER_PATTERN)


def split_words(text: str) -> List[str]:
    return [word for word in _delimiters.split(text) if word]


def read_words(path) -> List[str]:
    """Read a UTF-8 text file and return its words in order."""
    with open(path, encoding="utf-8") as fp:
        return split_words(fp.read())
