import pytest

from page_authoring.validation import (
    ValidationResult,
    check_answer_number,
    check_required,
    required,
)


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_required_rejects_blank_values(value):
    assert not required(value)


def test_required_accepts_text_with_surrounding_whitespace():
    assert required("  hello ")


def test_check_required_attaches_message_to_field():
    result = ValidationResult()

    assert check_required(result, "title", "ok", "Title")
    assert not check_required(result, "src", "  ", "URL")

    assert not result.ok
    assert result.errors == {"src": "URL is required"}


@pytest.mark.parametrize(
    ("value", "count", "expected"),
    [
        ("", 3, "Correct is required"),
        ("abc", 3, "Correct is not a number"),
        ("1.5", 3, "Correct is not a number"),
        ("1_0", 10, "Correct is not a number"),
        ("+2", 3, "Correct is not a number"),
        ("-1", 3, "Correct is not a number"),
        ("\u0662", 3, "Correct is not a number"),
        ("\uff13", 3, "Correct is not a number"),
        ("0", 3, "Correct is out of range"),
        ("4", 3, "Correct is out of range"),
        ("1", 0, "Correct is out of range"),
        ("1", 3, None),
        (" 3 ", 3, None),
    ],
)
def test_check_answer_number(value, count, expected):
    assert check_answer_number(value, count) == expected


def test_merge_combines_errors():
    first = ValidationResult({"title": "Title is required"})
    second = ValidationResult({"slide-1": "URL is required"})

    merged = first.merge(second)

    assert merged is first
    assert merged.errors["slide-1"] == "URL is required"
    assert len(merged.errors) == 2
