"""Configuration values for the unit tests."""

import pytest

from cmudict_db.db_handler import CmudictDb
from cmudict_db.importer import import_from_file


@pytest.fixture(scope="session")
def license_text():
    """Comment header of the test dictionary, as it is stored."""
    return (
        ";;; # CMUdict  --  Major Version: 0.07\n"
        ";;; Copyright (C) 1993-2015 Carnegie Mellon University.\n"
    )


@pytest.fixture(scope="session")
def dictionary_text(license_text):
    """A small, well-formed dictionary in the CMU format."""
    return license_text + (
        "ABRUPT  AH0 B R AH1 P T\n"
        "CORRUPT  K ER0 AH1 P T\n"
        "ERUPT  IH0 R AH1 P T\n"
        "IRRUPT  IH0 R AH1 P T\n"
        "ZEBRA  Z IY1 B R AH0\n"
        "ZEBRAS  Z IY1 B R AH0 Z\n"
        "ZEBULON  Z EH1 B Y UW0 L AA0 N\n"
    )


@pytest.fixture
def dictionary_file(tmp_path, dictionary_text):
    """Write the test dictionary to disk and return the file path."""
    file_path = tmp_path / "cmudict.test"
    file_path.write_text(dictionary_text, encoding="utf-8")
    return file_path


@pytest.fixture
def db_path(tmp_path, dictionary_file):
    """Path to a database populated with the test dictionary."""
    return import_from_file(dictionary_file, tmp_path / "cmudict.sqlite")


@pytest.fixture
def cmudict_db_obj(db_path):
    """Instance of the class object we want to test.

    Connect to the test database, yield the CmudictDb object,
    and unload it after the test is done with the object.
    """
    db_obj = CmudictDb(db_path)
    yield db_obj
    db_obj.unload()
