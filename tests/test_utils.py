"""Test suite for helper functions in utils.py."""
import logging
from pathlib import Path

import pytest
from schema import SchemaError

from cmudict_db import utils
from cmudict_db.constants import LICIT_PHONES

DUMMY_CONFIG = Path(__file__).parent / "dummy_config.py"


def test_load_config():
    # when
    result = utils.load_config(DUMMY_CONFIG)
    # then
    assert result["database"] == "tests/dummy_data.sqlite"
    assert result["dictionary_file"] == "tests/dummy_cmudict"
    assert result["output_dir"] == "tests/delete_me"
    assert result["unknown_setting"] == "passed through"


def test_load_config_missing_file(tmp_path):
    assert utils.load_config(tmp_path / "no_config.py") == {}


def test_load_config_invalid_value(tmp_path):
    # given
    config_file = tmp_path / "bad_config.py"
    config_file.write_text("DATABASE = 42\n")
    # when
    with pytest.raises(SchemaError):
        utils.load_config(config_file)


def test_load_module_from_path_raises_error():
    with pytest.raises(AssertionError):
        utils.load_module_from_path("wrong_path_extension.txt")


@pytest.mark.parametrize(
    "return_entries,expected",
    [
        ("valid", [("ZEBRA", "Z IY1 B R AH0")]),
        ("invalid", [("SUPERFAKEWORD", "XO XO XO1"), ("BADLINE", None)]),
        ("other", []),
    ],
    ids=["valid", "invalid", "unknown_key"]
)
def test_validate_phonemes(return_entries, expected):
    # given
    entries = [
        ("ZEBRA", "Z IY1 B R AH0"),
        ("SUPERFAKEWORD", "XO XO XO1"),
        ("BADLINE", None),
    ]
    # when
    result = utils.validate_phonemes(entries, LICIT_PHONES, return_entries)
    # then
    assert result == expected


@pytest.mark.parametrize(
    "verbosity,expected",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG),
     (5, logging.DEBUG)]
)
def test_log_level(verbosity, expected):
    assert utils.log_level(verbosity) == expected


def test_ensure_path_exists(tmp_path):
    input_path = tmp_path / "new_folder" / "nested"
    result = utils.ensure_path_exists(input_path)
    assert input_path.exists()
    assert isinstance(result, Path)
