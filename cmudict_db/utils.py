"""Utility functions for cmudict_db"""

import functools
import importlib.util
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List

import click
from schema import SchemaError

from .constants import config_schema


def ensure_path_exists(path):
    """Make sure a directory exists and is a Path object."""
    path_obj = Path(path)
    path_obj.mkdir(exist_ok=True, parents=True)
    return path_obj


def load_module_from_path(file_path):
    """Load a python module from a .py file, e.g. the config file in the working directory."""
    module_path = Path(file_path).resolve()
    assert module_path.suffix == ".py", (
            f"Inappropriate file type: {module_path.suffix} ({file_path})")
    module_name = module_path.stem

    spec = importlib.util.spec_from_file_location(module_name, module_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def load_module_dict(module_path) -> Dict:
    """Load a dict of the public variables defined in a python module, ``{var_name:value}``."""
    module = load_module_from_path(module_path)
    module_dict = module.__dict__
    return {
        key: value for key, value in module_dict.items()
        if value and not key.startswith("_")
    }


def load_config(filename) -> Dict:
    """Load variable names (lower case) and their values as a dict from a .py file.

    Only the keys known to the config schema are validated,
    other variables are passed through.
    A missing file gives an empty dict.
    """
    try:
        config = {k.lower(): v for k, v in load_module_dict(filename).items()}
    except FileNotFoundError:
        return {}
    try:
        config_schema.validate(config)
    except SchemaError as error:
        logging.error("Invalid config values in %s: %s", filename, error)
        raise
    return config


def validate_phonemes(entries: Iterable, valid_phonemes: list,
                      return_entries="valid") -> List:
    """Sort dictionary entries by whether all phonemes of their code are valid.

    Parameters
    ----------
    entries: Iterable
        (word, code) pairs
    valid_phonemes: list
    return_entries: str
        "valid" or "invalid"
    """
    sorted_entries: dict = {"valid": [], "invalid": []}
    for word, code in entries:
        phonemes = code.split(" ") if code else [""]
        if all(p in valid_phonemes for p in phonemes):
            sorted_entries["valid"].append((word, code))
        else:
            logging.debug(
                "Code of %s contains invalid phonemes: %s", word, code)
            sorted_entries["invalid"].append((word, code))
    return sorted_entries.get(return_entries, [])


def time_process(f):
    """Print how long a CLI command took."""
    @functools.wraps(f)
    def timed(*args, **kwargs):
        start = datetime.now()
        result = f(*args, **kwargs)
        click.secho(f"Processing time: {datetime.now() - start}", fg="blue")
        return result
    return timed


LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def log_level(verbosity: int):
    """Map the number of -v flags to a log level, DEBUG from -vv on."""
    return LOG_LEVELS.get(verbosity, logging.DEBUG)


def set_logging_config(verbose=0, logfile="log.txt"):
    """Log everything to logfile, and to stderr at the level set by verbose."""
    logging.basicConfig(
        level=logging.DEBUG,
        format=(
            "%(asctime)s | %(levelname)s "
            "| %(module)s-%(funcName)s-%(lineno)04d | %(message)s"),
        datefmt='%Y-%m-%d %H:%M',
        filename=logfile,
        filemode='a')

    if verbose:
        console = logging.StreamHandler()
        console.setLevel(log_level(verbose))
        console.setFormatter(
            logging.Formatter('%(asctime)-10s | %(levelname)s | %(message)s'))
        logging.getLogger().addHandler(console)

    return verbose
