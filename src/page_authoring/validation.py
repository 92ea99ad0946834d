from __future__ import annotations

from dataclasses import dataclass, field


def required(value: str | None) -> bool:
    """True when the value is non-empty after stripping surrounding whitespace."""
    return value is not None and len(value.strip()) > 0


@dataclass
class ValidationResult:
    """Per-field validation messages collected in a single pass.

    Keys are field names for top-level inputs and row handle keys for
    collection rows. The result is ok only when no message was attached.
    """

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, key: str, message: str) -> None:
        self.errors[key] = message

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.update(other.errors)
        return self


def check_required(result: ValidationResult, key: str, value: str | None, name: str) -> bool:
    if required(value):
        return True
    result.add(key, f"{name} is required")
    return False


def check_answer_number(value: str | None, answer_count: int) -> str | None:
    """Validate the 1-based "correct answer" number of a quiz question.

    Returns the error message, or None when the value is a run of ASCII
    digits whose number lies within [1, answer_count].
    """
    if not required(value):
        return "Correct is required"
    text = value.strip()
    # Plain ASCII digits only; int() would also take "1_0", "+2" or non-ASCII digits.
    if not (text.isascii() and text.isdigit()):
        return "Correct is not a number"
    number = int(text)
    if number < 1 or number > answer_count:
        return "Correct is out of range"
    return None


__all__ = ["ValidationResult", "check_answer_number", "check_required", "required"]
