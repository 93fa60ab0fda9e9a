"""Populate a lexicon database from a pronunciation dictionary file."""
import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Union

from .constants import (
    DEFAULT_DATABASE,
    LICENSE_NAME,
    CREATE_ENTRY_TABLE_STMT,
    CREATE_CODE_INDEX_STMT,
    CREATE_METADATA_TABLE_STMT,
    INSERT_ENTRY_STMT,
    INSERT_METADATA_STMT,
    entry_schema,
)
from .parser import ParsedDictionary, read_dictionary


def create_tables(connection: sqlite3.Connection):
    """Create the metadata and the entry tables if they don't exist."""
    logging.debug("Creating tables: metadata, cmudict")
    cursor = connection.cursor()
    cursor.execute(CREATE_METADATA_TABLE_STMT)
    cursor.execute(CREATE_ENTRY_TABLE_STMT)
    cursor.execute(CREATE_CODE_INDEX_STMT)
    connection.commit()
    cursor.close()


def _entry_values(parsed: ParsedDictionary):
    for word, code in parsed:
        yield (
            word.upper(),
            code.upper() if code is not None else None,
        )


def import_to_store(
        parsed: ParsedDictionary,
        db: Union[str, Path] = DEFAULT_DATABASE,
        validate: bool = True,
) -> int:
    """Store a parsed dictionary in a database.

    The license text is saved as metadata, and the entries are inserted
    in source order with upper-cased words and codes.

    Parameters
    ----------
    parsed: ParsedDictionary
    db: str or Path
        File path to the database, created if it doesn't exist
    validate: bool
        Check that every entry has a word and a code before inserting

    Returns
    -------
    int
        Number of inserted entries

    Raises
    ------
    pandera.errors.SchemaError
        If validate is True and an entry lacks a code
    sqlite3.IntegrityError
        If a word occurs twice. Entries inserted before it are kept.
    """
    if validate and len(parsed):
        entry_schema.validate(parsed.to_dataframe())

    logging.info("Import %s entries to %s", len(parsed), db)
    with closing(sqlite3.connect(str(db))) as connection:
        connection.execute("PRAGMA journal_mode = MEMORY;")
        create_tables(connection)
        cursor = connection.cursor()
        cursor.execute(INSERT_METADATA_STMT, (LICENSE_NAME, parsed.license))
        connection.commit()
        try:
            cursor.executemany(INSERT_ENTRY_STMT, _entry_values(parsed))
        except sqlite3.IntegrityError as error:
            connection.commit()
            logging.error("Import to %s stopped: %s", db, error)
            raise
        connection.commit()
        cursor.close()
    return len(parsed)


def import_from_file(
        dictionary_file: Union[str, Path],
        db: Union[str, Path] = None,
        validate: bool = True,
) -> Path:
    """Read a dictionary file and store its content in a database.

    If no database path is given, the database is created next to
    the dictionary file, with the ``.sqlite`` suffix added to its name.

    Returns
    -------
    Path
        The path of the database
    """
    db = Path(f"{dictionary_file}.sqlite") if db is None else Path(db)
    parsed = read_dictionary(dictionary_file)
    total = import_to_store(parsed, db, validate=validate)
    logging.info("Imported %s entries from %s", total, dictionary_file)
    return db
