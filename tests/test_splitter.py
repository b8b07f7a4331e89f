"""Tests for the quote-aware field splitter"""
import re

import pytest

from record_deduper.common.exceptions import ConfigurationError
from record_deduper.keys.splitter import FieldSplitter


def test_plain_split_keeps_surrounding_whitespace():
    assert FieldSplitter('|').split("1|Robert|Smith   |Waverley") == [
        "1", "Robert", "Smith   ", "Waverley"
    ]


def test_apostrophe_inside_a_word_is_data():
    assert FieldSplitter('|').split("5|Bob|O'Brien   |Bronte") == [
        "5", "Bob", "O'Brien   ", "Bronte"
    ]


def test_apostrophe_inside_single_quoted_field_is_data():
    assert FieldSplitter('|').split("'O'Brien'|x") == ["O'Brien", "x"]


@pytest.mark.parametrize("line, expected", [
    ('a,"b,c",d', ['a', 'b,c', 'd']),
    ("a,'b,c',d", ['a', 'b,c', 'd']),
    ("x,'quoted, text',y", ['x', 'quoted, text', 'y']),
    ('"say ""hi""",x', ['say "hi"', 'x']),
    ('"",x', ['', 'x']),
])
def test_quoted_sections_protect_separators(line, expected):
    assert FieldSplitter(',').split(line) == expected


def test_backslash_escapes_separator():
    assert FieldSplitter(',').split(r"a\,b,c") == ['a,b', 'c']


def test_trailing_backslash_is_literal():
    assert FieldSplitter(',').split("a,b\\") == ['a', 'b\\']


def test_unterminated_quote_runs_to_end_of_line():
    assert FieldSplitter(',').split('a,"b,c') == ['a', 'b,c']


def test_trailing_separator_yields_empty_field():
    assert FieldSplitter(',').split("a,b,") == ['a', 'b', '']


def test_multi_character_separator():
    assert FieldSplitter('::').split("a::b:c::d") == ['a', 'b:c', 'd']


def test_regex_separator_collapses_whitespace_runs():
    splitter = FieldSplitter(re.compile(r"\s+"))

    assert splitter.split("100 Robert   Smith") == ['100', 'Robert', 'Smith']


def test_tab_separator():
    assert FieldSplitter('\t').split("a\tb c\td") == ['a', 'b c', 'd']


def test_escaping_can_be_disabled():
    assert FieldSplitter(',', escape_char='').split(r"a\,b") == ['a\\', 'b']


def test_empty_separator_is_rejected():
    with pytest.raises(ConfigurationError):
        FieldSplitter('')
