"""
Tests for header/footer template tokens
"""
from datetime import date

import pytest

from pdf_engine.utils.tokens import format_date, page_tokens, substitute

FEB_9 = date(2026, 2, 9)


@pytest.mark.parametrize("fmt, expected", [
    ("short", "02/09/2026"),
    ("medium", "Feb 9, 2026"),
    ("long", "February 9, 2026"),
    ("iso", "2026-02-09"),
])
def test_format_date(fmt, expected):
    assert format_date(FEB_9, fmt) == expected


def test_unknown_date_format():
    with pytest.raises(ValueError):
        format_date(FEB_9, "julian")


def test_every_occurrence_is_replaced():
    values = page_tokens(3, 5, FEB_9)
    assert substitute("{page}/{total} - {page}", values) == "3/5 - 3"
    assert substitute("Printed {date}", values) == "Printed 02/09/2026"


def test_other_braces_are_literal():
    values = page_tokens(1, 2, FEB_9)
    assert substitute("{Page} {pages} {", values) == "{Page} {pages} {"
    assert substitute("{{page}}", values) == "{1}"


def test_values_are_not_rescanned():
    assert substitute("{total}", {"{total}": "{page}", "{page}": "1"}) == "{page}"


def test_empty_template():
    assert substitute("", page_tokens(1, 1, FEB_9)) == ""
    assert substitute(None, page_tokens(1, 1, FEB_9)) == ""
