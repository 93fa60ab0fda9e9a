"""Test suite for the dictionary parser in parser.py."""

import pandas as pd
import pytest

from cmudict_db import parser
from cmudict_db.parser import Entry


def test_parse_dictionary(dictionary_text, license_text):
    # when
    result = parser.parse_dictionary(dictionary_text)
    # then
    assert isinstance(result, parser.ParsedDictionary)
    assert len(result) == 7
    assert result[0] == Entry("ABRUPT", "AH0 B R AH1 P T")
    assert result[-1] == Entry("ZEBULON", "Z EH1 B Y UW0 L AA0 N")
    assert result.license == license_text


@pytest.mark.parametrize(
    "text",
    [
        "ZEBRA  Z IY1 B R AH0\r\nZEBRAS  Z IY1 B R AH0 Z\r\n",
        "ZEBRA  Z IY1 B R AH0\rZEBRAS  Z IY1 B R AH0 Z\r",
        "ZEBRA  Z IY1 B R AH0\r\nZEBRAS  Z IY1 B R AH0 Z\n",
        "\n\nZEBRA  Z IY1 B R AH0\n\n\nZEBRAS  Z IY1 B R AH0 Z\n\n",
    ],
    ids=["crlf", "cr", "mixed", "blank_lines"]
)
def test_parse_dictionary_line_endings(text):
    # given
    expected = [
        Entry("ZEBRA", "Z IY1 B R AH0"),
        Entry("ZEBRAS", "Z IY1 B R AH0 Z"),
    ]
    # when
    result = parser.parse_dictionary(text)
    # then
    assert result.entries == expected
    assert result.license == ""


def test_parse_dictionary_hoists_comments():
    # given
    text = (
        ";;; first\r\n"
        "ABRUPT  AH0 B R AH1 P T\r\n"
        ";;; second\r\n"
        "ZEBRA  Z IY1 B R AH0\r\n"
    )
    # when
    result = parser.parse_dictionary(text)
    # then
    assert result.license == ";;; first\n;;; second\n"
    assert [entry.word for entry in result] == ["ABRUPT", "ZEBRA"]


def test_parse_dictionary_license_lines():
    # given
    text = ";;; LICENSE LINE 1\n;;; LINE 2\nZEBRA  Z IY1 B R AH0\n"
    # when
    result = parser.parse_dictionary(text)
    # then
    assert result.license == ";;; LICENSE LINE 1\n;;; LINE 2\n"
    assert result.entries == [Entry("ZEBRA", "Z IY1 B R AH0")]


def test_parse_dictionary_malformed_line(caplog):
    # given
    text = "ZEBRA  Z IY1 B R AH0\nBADLINE Z IY1\n"
    # when
    result = parser.parse_dictionary(text)
    # then
    assert result[1] == Entry("BADLINE Z IY1", None)
    assert result.malformed == [Entry("BADLINE Z IY1", None)]
    assert "no word/code separator" in caplog.text


@pytest.mark.parametrize(
    "line,expected",
    [
        ("ZEBRA  Z IY1 B R AH0", Entry("ZEBRA", "Z IY1 B R AH0")),
        ("A  B  C", Entry("A", "B  C")),
        ("ZEBRA Z IY1", Entry("ZEBRA Z IY1", None)),
    ],
    ids=["well_formed", "first_separator_only", "no_separator"]
)
def test_split_line(line, expected):
    assert parser.split_line(line) == expected


def test_render_dictionary():
    # given
    entries = [
        Entry("ZEBRA", "Z IY1 B R AH0"),
        {"word": "ZEBRAS", "code": "Z IY1 B R AH0 Z"},
    ]
    license = ";;; header\n\n  "
    # when
    result = parser.render_dictionary(entries, license)
    # then
    assert result == (
        ";;; header\n"
        "ZEBRA  Z IY1 B R AH0\n"
        "ZEBRAS  Z IY1 B R AH0 Z\n"
    )


def test_render_dictionary_round_trip(dictionary_text):
    # given
    parsed = parser.parse_dictionary(dictionary_text)
    # when
    text = parser.render_dictionary(parsed, parsed.license)
    result = parser.parse_dictionary(text)
    # then
    assert text == dictionary_text
    assert result == parsed


def test_to_dataframe(dictionary_text):
    # when
    result = parser.parse_dictionary(dictionary_text).to_dataframe()
    # then
    assert isinstance(result, pd.DataFrame)
    assert list(result.columns) == ["word", "code"]
    assert len(result.index) == 7
    assert result.iloc[4]["word"] == "ZEBRA"


def test_read_dictionary(dictionary_file, license_text):
    # when
    result = parser.read_dictionary(dictionary_file)
    # then
    assert len(result) == 7
    assert result.license == license_text


def test_read_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parser.read_dictionary(tmp_path / "no_such_file")
