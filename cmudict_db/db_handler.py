"""Connect to and query the database containing the pronunciation dictionary."""
import asyncio
import logging
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from .constants import (
    DEFAULT_DATABASE,
    LICENSE_NAME,
    Query,
    entry_column_names,
)
from .importer import create_tables
from .parser import render_dictionary


class CmudictDb:
    """Handler of the db connection.

    Open the database, prepare one cursor per query template,
    and run the queries on a single worker thread.
    Every lookup and write operation is a coroutine that returns
    the selected rows as dicts, or an empty list for writes.
    Words and codes are upper-cased before they are bound to a query,
    metadata names and data are used as given.

    Operations that are scheduled concurrently, e.g. with ``asyncio.gather``,
    run in no particular order. Await an operation before starting one
    that depends on it.

    Parameters
    ----------
    db: str or Path
        Name of database to connect to, e.g. file path to the local db on disk
    """

    def __init__(self, db: Union[str, Path] = DEFAULT_DATABASE):
        self._db = db
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="cmudict-db")
        try:
            self._connect_and_prepare()
        except sqlite3.Error:
            self._executor.shutdown(wait=False)
            raise

    def _connect_and_prepare(self):
        """Connect to db, create missing tables and prepare the cursors."""
        logging.debug("Connecting to the database %s", self._db)
        self._connection = sqlite3.connect(
            str(self._db), check_same_thread=False)
        self._connection.row_factory = sqlite3.Row
        create_tables(self._connection)
        self._cursors = {
            query: self._connection.cursor() for query in Query
        }

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.unload()

    def _execute(self, query: Query, values: tuple) -> List[Dict]:
        logging.debug("Execute SQL Query: %s %s", query.value, values)
        cursor = self._cursors[query]
        try:
            cursor.execute(query.value, values)
            if query.returns_rows:
                return [dict(row) for row in cursor.fetchall()]
            self._connection.commit()
        except sqlite3.Error as error:
            logging.error("Couldn't run query %s: %s", query.name, error)
            if self._connection.in_transaction:
                self._connection.rollback()
            raise
        if cursor.rowcount == 0:
            logging.debug("%s affected no rows", query.name)
        return []

    async def _submit(self, query: Query, *values) -> List[Dict]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, self._execute, query, values)

    async def lookup_word(self, word: str) -> List[Dict]:
        """Search for the given word."""
        return await self._submit(Query.LOOKUP_WORD, word.upper())

    async def lookup_code(self, code: str) -> List[Dict]:
        """Search for the given code."""
        return await self._submit(Query.LOOKUP_CODE, code.upper())

    async def fuzzy_lookup_word(self, pattern: str) -> List[Dict]:
        """Search words matching the given pattern.

        The underscore matches exactly one character,
        the percent symbol matches any number of characters.
        """
        return await self._submit(Query.FUZZY_LOOKUP_WORD, pattern.upper())

    async def fuzzy_lookup_code(self, pattern: str) -> List[Dict]:
        """Search codes matching the given pattern.

        Same wildcards as for `fuzzy_lookup_word`. Surround a phoneme sequence
        with percent symbols to find rhymes, assonance or consonance,
        e.g. ``"%R AH1 P T%"``.
        """
        return await self._submit(Query.FUZZY_LOOKUP_CODE, pattern.upper())

    async def lookup_metadata(self, name: str) -> List[Dict]:
        """Search the metadata by name."""
        return await self._submit(Query.LOOKUP_METADATA, name)

    async def add_entry(self, word: str, code: str) -> List[Dict]:
        """Insert a new entry. Raises sqlite3.IntegrityError if the word exists."""
        return await self._submit(Query.ADD_ENTRY, word.upper(), code.upper())

    async def add_metadata(self, name: str, data: str) -> List[Dict]:
        """Insert a new metadata record. Raises sqlite3.IntegrityError if the name exists."""
        return await self._submit(Query.ADD_METADATA, name, data)

    async def update_word(self, new_word: str, old_word: str) -> List[Dict]:
        """Replace the word of an entry."""
        return await self._submit(
            Query.UPDATE_WORD, new_word.upper(), old_word.upper())

    async def update_code(self, new_code: str, old_code: str) -> List[Dict]:
        """Replace a code in every entry that has it."""
        return await self._submit(
            Query.UPDATE_CODE, new_code.upper(), old_code.upper())

    async def update_metadata(self, data: str, name: str) -> List[Dict]:
        """Replace the data of a metadata record."""
        return await self._submit(Query.UPDATE_METADATA, data, name)

    async def delete_entry(self, word: str) -> List[Dict]:
        """Delete the entry of the given word."""
        return await self._submit(Query.DELETE_ENTRY, word.upper())

    async def delete_metadata(self, name: str) -> List[Dict]:
        """Delete the metadata record with the given name."""
        return await self._submit(Query.DELETE_METADATA, name)

    async def fetch_entries(self) -> List[Dict]:
        """Select all entries, in the order of the db storage."""
        return await self._submit(Query.SELECT_ALL_ENTRIES)

    async def count_entries(self) -> int:
        """Return the number of entries in the dictionary."""
        rows = await self._submit(Query.SELECT_ENTRY_COUNT)
        return rows[0]["total"]

    async def to_dataframe(self) -> pd.DataFrame:
        """Return all entries as a DataFrame with a word and a code column."""
        entries = await self.fetch_entries()
        return pd.DataFrame.from_records(entries, columns=entry_column_names)

    async def save_as_text(self, file_path: Union[str, Path]) -> str:
        """Write the dictionary to a text file in the original format.

        The license metadata is written as the header, followed by
        one line per entry.

        Parameters
        ----------
        file_path: str or Path
            Overwritten if it exists

        Returns
        -------
        str
            The text that was written to the file

        Raises
        ------
        OSError
            If the file can't be written
        """
        license_rows = await self.lookup_metadata(LICENSE_NAME)
        license = license_rows[0]["data"] if license_rows else ""
        entries = await self.fetch_entries()
        text = render_dictionary(entries, license)

        logging.info("Write %s entries to %s", len(entries), file_path)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            self._executor, self._write_text, file_path, text)
        return text

    @staticmethod
    def _write_text(file_path, text):
        with open(file_path, "w", encoding="utf-8", newline="") as outfile:
            outfile.write(text)

    def get_connection(self):
        """Return the object instance's sqlite3 connection."""
        return self._connection

    def unload(self):
        """Wait for queued queries, close every prepared cursor and the connection."""
        logging.debug("Unloading the database %s", self._db)
        self._executor.shutdown(wait=True)
        for query in Query:
            self._cursors[query].close()
        self._connection.close()

    def close(self):
        """Same as `unload`, for use with contextlib.closing."""
        self.unload()
