"""Constant values used by cmudict_db.

* File names and table names.
* Validation schemas for the configuration and the parsed dictionary entries.
* SQL query template strings to create tables, insert, update, delete and
select entries.
"""
from enum import Enum
from pathlib import Path

import pandera as pa
from pandera import Column, DataFrameSchema
from schema import Schema, Optional, Or

DEFAULT_DICTIONARY = "cmudict.0.7a"
"""File name of the CMU Pronouncing Dictionary release"""

DEFAULT_DATABASE = f"{DEFAULT_DICTIONARY}.sqlite"
"""Database file used when no path is given"""

LICENSE_NAME = "license"
"""Metadata name under which the comment header of the dictionary is stored"""

COMMENT_MARKER = ";;;"
WORD_CODE_SEPARATOR = "  "

ENTRY_TABLE = "cmudict"
METADATA_TABLE = "metadata"

INVALID_PREFIX = "invalid_codes"

# ARPAbet phones of the CMU Pronouncing Dictionary.
# Vowels carry a lexical stress marker: 0 (none), 1 (primary), 2 (secondary)
VOWELS = [
    "AA", "AE", "AH", "AO", "AW", "AY", "EH", "ER",
    "EY", "IH", "IY", "OW", "OY", "UH", "UW",
]
CONSONANTS = [
    "B", "CH", "D", "DH", "F", "G", "HH", "JH", "K", "L", "M", "N",
    "NG", "P", "R", "S", "SH", "T", "TH", "V", "W", "Y", "Z", "ZH",
]
LICIT_PHONES = CONSONANTS + [
    f"{vowel}{stress}" for vowel in VOWELS for stress in (0, 1, 2)
]

# Define validation Schemas
config_schema = Schema({
    Optional("database"): Or(str, Path),
    Optional("dictionary_file"): Or(str, Path),
    Optional("output_dir"): Or(str, Path),
}, ignore_extra_keys=True)

entry_schema = DataFrameSchema({
    "word": Column(pa.String, nullable=False),
    "code": Column(pa.String, nullable=False),
})

entry_column_names = ["word", "code"]

# Define SQL query templates
CREATE_ENTRY_TABLE_STMT = f"""CREATE TABLE IF NOT EXISTS {ENTRY_TABLE} (
word TEXT PRIMARY KEY UNIQUE NOT NULL,
code TEXT NOT NULL);
"""

CREATE_CODE_INDEX_STMT = (
    f"CREATE INDEX IF NOT EXISTS {ENTRY_TABLE}_code_idx "
    f"ON {ENTRY_TABLE} (code);"
)

CREATE_METADATA_TABLE_STMT = f"""CREATE TABLE IF NOT EXISTS {METADATA_TABLE} (
name TEXT PRIMARY KEY UNIQUE NOT NULL,
data TEXT NOT NULL);
"""

INSERT_ENTRY_STMT = f"INSERT INTO {ENTRY_TABLE} (word, code) VALUES (?, ?);"

INSERT_METADATA_STMT = (
    f"INSERT INTO {METADATA_TABLE} (name, data) VALUES (?, ?);"
)


class Query(Enum):
    """The fixed set of parameterized statements a CmudictDb prepares.

    The value of each member is the SQL template.
    Selections and lookups return rows, the other statements write.
    """

    LOOKUP_WORD = f"SELECT word, code FROM {ENTRY_TABLE} WHERE word = ?;"
    LOOKUP_CODE = f"SELECT word, code FROM {ENTRY_TABLE} WHERE code = ?;"
    FUZZY_LOOKUP_WORD = (
        f"SELECT word, code FROM {ENTRY_TABLE} WHERE word LIKE ?;")
    FUZZY_LOOKUP_CODE = (
        f"SELECT word, code FROM {ENTRY_TABLE} WHERE code LIKE ?;")
    LOOKUP_METADATA = (
        f"SELECT name, data FROM {METADATA_TABLE} WHERE name = ?;")
    SELECT_ALL_ENTRIES = f"SELECT word, code FROM {ENTRY_TABLE};"
    SELECT_ENTRY_COUNT = f"SELECT COUNT(*) AS total FROM {ENTRY_TABLE};"
    ADD_ENTRY = INSERT_ENTRY_STMT
    ADD_METADATA = INSERT_METADATA_STMT
    UPDATE_WORD = f"UPDATE {ENTRY_TABLE} SET word = ? WHERE word = ?;"
    UPDATE_CODE = f"UPDATE {ENTRY_TABLE} SET code = ? WHERE code = ?;"
    UPDATE_METADATA = (
        f"UPDATE {METADATA_TABLE} SET data = ? WHERE name = ?;")
    DELETE_ENTRY = f"DELETE FROM {ENTRY_TABLE} WHERE word = ?;"
    DELETE_METADATA = f"DELETE FROM {METADATA_TABLE} WHERE name = ?;"

    @property
    def returns_rows(self) -> bool:
        return self.name.startswith(("SELECT", "LOOKUP", "FUZZY"))
