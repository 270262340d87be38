import pytest

from promptlint.lint_engine.models import ListValue, RepeatableTextValue, TextValue
from promptlint.lint_engine.text import (
    count_commas,
    is_value_empty,
    normalize_text,
    split_comma_list,
    value_to_text,
)


def test_normalize_text_collapses_and_strips():
    assert normalize_text("  a   b\tc\n") == "a b c"
    assert normalize_text(None) == ""
    assert normalize_text(normalize_text(" x  y ")) == "x y"


@pytest.mark.parametrize(
    "value",
    [None, "", "  \t", TextValue(text=" "), ListValue(), ListValue(items=("", " ")), RepeatableTextValue(), [], [" "]],
)
def test_empty_values(value):
    assert is_value_empty(value)


@pytest.mark.parametrize("value", [0, 12, 0.0, "16:9", TextValue(text="x"), ListValue(items=("", "a"))])
def test_non_empty_values(value):
    assert not is_value_empty(value)


def test_value_to_text_joins_sequences():
    assert value_to_text(TextValue(text=" a  b ")) == "a b"
    assert value_to_text(ListValue(items=("red", " ", "blue "))) == "red, blue"
    assert value_to_text(RepeatableTextValue(entries=("fog",))) == "fog"
    assert value_to_text(None) == ""


def test_comma_helpers():
    assert count_commas("a, b,c") == 2
    assert split_comma_list("red, blue ,  green") == ("red", "blue", "green")
    assert split_comma_list(" , ,") == ()
