"""Command line interface to build and query a pronunciation dictionary database."""

import asyncio
import logging
import pathlib
import pprint
import sqlite3

import click
from pandera.errors import SchemaError

from .constants import (
    DEFAULT_DATABASE,
    DEFAULT_DICTIONARY,
    INVALID_PREFIX,
    LICIT_PHONES,
)
from .db_handler import CmudictDb
from .importer import import_to_store
from .parser import read_dictionary
from .utils import (
    ensure_path_exists,
    load_config,
    set_logging_config,
    time_process,
    validate_phonemes,
)

CFG = {
    'database': DEFAULT_DATABASE,
    'dictionary_file': DEFAULT_DICTIONARY,
    'output_dir': 'output',
}
CONFIG_FILE = load_config("./config.py")
CFG.update(CONFIG_FILE)
CONTEXT_SETTINGS = dict(
    default_map=CFG,
    help_option_names=['-h', '--help'],
)
NO_DB_COMMANDS = ["import", "validate"]


def run_query(coroutine):
    """Run a CmudictDb operation to completion and return its rows."""
    try:
        return asyncio.run(coroutine)
    except sqlite3.Error as error:
        raise click.ClickException(f"Database error: {error}")


def echo_rows(rows):
    if not rows:
        click.secho("No matches", fg="yellow")
    for row in rows:
        click.echo("  ".join(str(value) for value in row.values()))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-db",
    "--database",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="The path to the dictionary database.",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=pathlib.Path),
    help="The directory where the log file and reports are written.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Print logging messages to the console in addition to the log file. "
         "-v is informative, -vv is detailed (for debugging)."
)
@click.pass_context
def main(ctx, database, output_dir, verbose):
    """Build and query an sqlite database of the CMU Pronouncing Dictionary.

    Default file paths are specified in the config.py file.
    If provided, CLI arguments override the default values from the config.
    """
    output_dir = ensure_path_exists(output_dir)
    set_logging_config(verbose, logfile=(output_dir / "log.txt"))
    logging.info("START LOG")
    CFG.update(ctx.params)
    CFG["output_dir"] = output_dir
    if verbose:
        click.secho("Configuration values:", fg="yellow")
        click.echo(pprint.pformat(CFG))
        click.echo(f"Invoked command: {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand in NO_DB_COMMANDS:
        return
    ctx.obj = db = CmudictDb(database)

    @ctx.call_on_close
    def close_db():
        db.unload()
        logging.debug("DATABASE CLOSED")


@main.command("import")
@click.argument(
    "dictionary_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Skip the check that every line has a word and a code.",
)
@time_process
def import_dictionary(dictionary_file, no_validate):
    """Import a dictionary file into the database."""
    if dictionary_file is None:
        dictionary_file = pathlib.Path(CFG.get("dictionary_file"))
    database = CFG.get("database")
    click.secho(f"Import {dictionary_file} to {database}", fg="cyan")
    try:
        parsed = read_dictionary(dictionary_file)
        import_to_store(parsed, database, validate=not no_validate)
    except SchemaError:
        malformed = ", ".join(repr(entry.word) for entry in parsed.malformed)
        raise click.ClickException(
            f"Lines without a word/code separator: {malformed}")
    except (OSError, sqlite3.Error) as error:
        raise click.ClickException(str(error))


@main.command("lookup")
@click.argument("query")
@click.option(
    "-c", "--code", "search_code",
    is_flag=True,
    help="Search the phonetic codes instead of the words.",
)
@click.option(
    "-f", "--fuzzy",
    is_flag=True,
    help="Treat QUERY as a pattern: _ matches one character, "
         "% matches any number of characters.",
)
@click.pass_obj
def lookup(db_obj, query, search_code, fuzzy):
    """Look up words or codes in the dictionary."""
    operations = {
        (False, False): db_obj.lookup_word,
        (True, False): db_obj.lookup_code,
        (False, True): db_obj.fuzzy_lookup_word,
        (True, True): db_obj.fuzzy_lookup_code,
    }
    operation = operations[(search_code, fuzzy)]
    echo_rows(run_query(operation(query)))


@main.command("add")
@click.argument("word")
@click.argument("code")
@click.pass_obj
def add_entry(db_obj, word, code):
    """Add a new word with its phonetic code."""
    run_query(db_obj.add_entry(word, code))
    click.secho(f"Added {word.upper()}", fg="cyan")


@main.command("update-word")
@click.argument("new_word")
@click.argument("old_word")
@click.pass_obj
def update_word(db_obj, new_word, old_word):
    """Rename OLD_WORD to NEW_WORD."""
    run_query(db_obj.update_word(new_word, old_word))


@main.command("update-code")
@click.argument("new_code")
@click.argument("old_code")
@click.pass_obj
def update_code(db_obj, new_code, old_code):
    """Replace OLD_CODE with NEW_CODE in every entry that has it."""
    run_query(db_obj.update_code(new_code, old_code))


@main.command("delete")
@click.argument("word")
@click.pass_obj
def delete_entry(db_obj, word):
    """Delete a word from the dictionary."""
    run_query(db_obj.delete_entry(word))


@main.command("metadata")
@click.argument("name")
@click.argument("data", required=False)
@click.option(
    "-r", "--replace",
    is_flag=True,
    help="Overwrite the data of an existing metadata record.",
)
@click.pass_obj
def metadata(db_obj, name, data, replace):
    """Show the metadata record NAME, or store DATA under NAME."""
    if data is None:
        rows = run_query(db_obj.lookup_metadata(name))
        if not rows:
            click.secho(f"No metadata named {name}", fg="yellow")
        for row in rows:
            click.echo(row["data"])
    elif replace:
        run_query(db_obj.update_metadata(data, name))
    else:
        run_query(db_obj.add_metadata(name, data))


@main.command("delete-metadata")
@click.argument("name")
@click.pass_obj
def delete_metadata(db_obj, name):
    """Delete the metadata record NAME."""
    run_query(db_obj.delete_metadata(name))


@main.command("export")
@click.argument(
    "outfile",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
)
@click.pass_obj
def export(db_obj, outfile):
    """Write the database content to a dictionary text file."""
    try:
        run_query(db_obj.save_as_text(outfile))
    except OSError as error:
        raise click.ClickException(f"Couldn't write {outfile}: {error}")
    click.secho(f"Dictionary written to {outfile}", fg="cyan")


@main.command("validate")
@click.argument(
    "dictionary_file",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
def validate(dictionary_file):
    """List entries whose codes contain symbols that aren't ARPAbet phonemes."""
    parsed = read_dictionary(dictionary_file)
    invalid = validate_phonemes(parsed, LICIT_PHONES, "invalid")
    outfile = pathlib.Path(CFG.get("output_dir")) / f"{INVALID_PREFIX}.txt"
    with open(outfile, "w", encoding="utf-8") as report:
        report.writelines(f"{word}  {code}\n" for word, code in invalid)
    click.secho(
        f"{len(invalid)} of {len(parsed)} entries have invalid codes. "
        f"See {outfile}",
        fg="cyan")
