"""Parse pronunciation dictionary text into word and code entries.

The input follows the format of the CMU Pronouncing Dictionary:
comment lines start with ``;;;``, every other line holds a word
and its phonetic code, separated by two spaces::

    ;;; # CMUdict  --  Major Version: 0.07
    ZEBRA  Z IY1 B R AH0
"""
import logging
import re
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Union

import pandas as pd

from .constants import (
    COMMENT_MARKER,
    WORD_CODE_SEPARATOR,
    entry_column_names,
)

LINE_ENDING = re.compile(r"\r\n|\r|\n")
COMMENT = re.compile(re.escape(COMMENT_MARKER) + r".*")


class Entry(NamedTuple):
    """A word and its pronunciation code."""
    word: str
    code: Optional[str]


class ParsedDictionary:
    """Entries of a dictionary file in source order, and its license header.

    Parameters
    ----------
    entries: Iterable[Entry]
    license: str
        All comment lines of the source file, each terminated by a newline
    """

    def __init__(self, entries: Iterable[Entry], license: str = ""):
        self.entries = list(entries)
        self.license = license

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __eq__(self, other):
        if not isinstance(other, ParsedDictionary):
            return NotImplemented
        return (self.entries, self.license) == (other.entries, other.license)

    def __repr__(self):
        return (f"{self.__class__.__name__}("
                f"<{len(self.entries)} entries>, license={self.license!r})")

    @property
    def malformed(self) -> List[Entry]:
        """Entries from lines that lacked the word/code separator."""
        return [entry for entry in self.entries if entry.code is None]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the entries as a DataFrame with a word and a code column."""
        return pd.DataFrame(self.entries, columns=entry_column_names)


def split_line(line: str) -> Entry:
    """Split a dictionary line on the first double space.

    A line without the separator gives an entry without a code.
    """
    word, separator, code = line.partition(WORD_CODE_SEPARATOR)
    if not separator:
        return Entry(word, None)
    return Entry(word, code)


def parse_dictionary(text: str) -> ParsedDictionary:
    """Parse the content of a dictionary file.

    Line endings are normalized, comment lines are collected as the license
    text and removed, and the remaining lines are split into entries.

    Parameters
    ----------
    text: str
        Raw content of a dictionary file

    Returns
    -------
    ParsedDictionary
    """
    text = LINE_ENDING.sub("\n", text)
    license = "".join(f"{comment}\n" for comment in COMMENT.findall(text))
    text = COMMENT.sub("", text).strip()

    entries = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        entry = split_line(line)
        if entry.code is None:
            logging.warning(
                "Line %s has no word/code separator: %r", line_number, line)
        entries.append(entry)
    logging.debug("Parsed %s entries", len(entries))
    return ParsedDictionary(entries, license)


def read_dictionary(
        file_path: Union[str, Path], encoding: str = "utf-8"
) -> ParsedDictionary:
    """Read and parse a dictionary file."""
    logging.info("Read dictionary file %s", file_path)
    text = Path(file_path).read_text(encoding=encoding)
    return parse_dictionary(text)


def _as_pair(entry):
    if isinstance(entry, dict):
        return entry["word"], entry["code"]
    return entry[0], entry[1]


def render_dictionary(entries: Iterable, license: str = "") -> str:
    """Join entries back into the dictionary text format.

    The license header is written first, with trailing whitespace trimmed,
    followed by one ``WORD  CODE`` line per entry.

    Parameters
    ----------
    entries: Iterable
        Entry tuples or ``{"word": ..., "code": ...}`` rows
    license: str
    """
    lines = "".join(
        f"{word}{WORD_CODE_SEPARATOR}{code}\n"
        for word, code in map(_as_pair, entries)
    )
    return f"{license.rstrip()}\n{lines}"
