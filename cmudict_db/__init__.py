"""Convert the CMU Pronouncing Dictionary to an sqlite database and query it."""

from .constants import DEFAULT_DATABASE, LICENSE_NAME, Query
from .db_handler import CmudictDb
from .importer import create_tables, import_from_file, import_to_store
from .parser import (
    Entry,
    ParsedDictionary,
    parse_dictionary,
    read_dictionary,
    render_dictionary,
)

__version__ = "0.1.0"
