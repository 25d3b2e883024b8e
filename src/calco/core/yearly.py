import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar, Union

logger = logging.getLogger(__name__)

MIN_GPA = 0.75
MAX_GPA = 10.0
MIN_SUBJECTS = 1
MAX_SUBJECTS = 15

MARKS_PER_SUBJECT = 100
GPA_OFFSET = 0.75
GPA_MULTIPLIER = 10

RawValue = Union[str, int, float, None]

# Plain ASCII decimal text, as a number input field would send it.
_NUMBER_TEXT = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class InvalidInputError(ValueError):
    pass


@dataclass(frozen=True)
class RawInput:
    odd_gpa: RawValue
    odd_subjects: RawValue
    even_gpa: RawValue
    even_subjects: RawValue


def _parse_number(value: RawValue, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{field_name} is required")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidInputError(f"{field_name} is required")
        if not _NUMBER_TEXT.fullmatch(value):
            raise InvalidInputError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidInputError(f"{field_name} must be a number") from exc
    if not math.isfinite(number):
        raise InvalidInputError(f"{field_name} must be a finite number")
    return number


def _parse_gpa(value: RawValue, field_name: str) -> float:
    gpa = _parse_number(value, field_name)
    if not MIN_GPA <= gpa <= MAX_GPA:
        raise InvalidInputError(f"{field_name} must be between {MIN_GPA} and {MAX_GPA:g}")
    return gpa


def _parse_subjects(value: RawValue, field_name: str) -> int:
    number = _parse_number(value, field_name)
    if not number.is_integer():
        raise InvalidInputError(f"{field_name} must be a whole number")
    subjects = int(number)
    if not MIN_SUBJECTS <= subjects <= MAX_SUBJECTS:
        raise InvalidInputError(f"{field_name} must be between {MIN_SUBJECTS} and {MAX_SUBJECTS}")
    return subjects


@dataclass(frozen=True)
class ValidatedInput:
    odd_gpa: float
    odd_subjects: int
    even_gpa: float
    even_subjects: int

    def __post_init__(self) -> None:
        # Re-check so the type cannot be built around from_raw.
        for name in ("odd_gpa", "even_gpa"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise InvalidInputError(f"{name} must be a number")
            _parse_gpa(value, name)
        for name in ("odd_subjects", "even_subjects"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidInputError(f"{name} must be an integer")
            _parse_subjects(value, name)

    @classmethod
    def from_raw(cls, raw: RawInput) -> "ValidatedInput":
        return cls(
            odd_gpa=_parse_gpa(raw.odd_gpa, "odd_gpa"),
            odd_subjects=_parse_subjects(raw.odd_subjects, "odd_subjects"),
            even_gpa=_parse_gpa(raw.even_gpa, "even_gpa"),
            even_subjects=_parse_subjects(raw.even_subjects, "even_subjects"),
        )


def format_two_places(value: float) -> str:
    """
    Fixed two-decimal text for display.
    Ties round away from zero on the exact binary value, so 8.125 -> "8.13".
    """
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class YearlyResult:
    yearly_gpa: float
    total_marks: int
    obtained_marks: int
    overall_percentage: float

    error: ClassVar[bool] = False

    @property
    def yearly_gpa_text(self) -> str:
        return format_two_places(self.yearly_gpa)

    @property
    def percentage_text(self) -> str:
        return format_two_places(self.overall_percentage)


@dataclass(frozen=True)
class InvalidResult:
    error: ClassVar[bool] = True


CalculationResult = Union[YearlyResult, InvalidResult]

INVALID = InvalidResult()


def gpa_to_percentage(gpa: float) -> float:
    # The floor is unreachable while MIN_GPA == GPA_OFFSET.
    return max(0.0, (gpa - GPA_OFFSET) * GPA_MULTIPLIER)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _semester_obtained(gpa: float, subjects: int) -> float:
    return subjects * MARKS_PER_SUBJECT * (gpa_to_percentage(gpa) / 100)


def calculate_yearly(validated: ValidatedInput) -> YearlyResult:
    """
    YGPA = (odd + even) / 2
    obtained = round(Σ subjects * 100 * percentage / 100), rounded once after summing
    overall % = obtained / total * 100, from the rounded obtained marks
    """
    yearly_gpa = (validated.odd_gpa + validated.even_gpa) / 2

    obtained = _semester_obtained(validated.odd_gpa, validated.odd_subjects) + _semester_obtained(
        validated.even_gpa, validated.even_subjects
    )
    obtained_marks = round_half_up(obtained)

    total_marks = (validated.odd_subjects + validated.even_subjects) * MARKS_PER_SUBJECT
    overall_percentage = (obtained_marks / total_marks) * 100

    return YearlyResult(
        yearly_gpa=yearly_gpa,
        total_marks=total_marks,
        obtained_marks=obtained_marks,
        overall_percentage=overall_percentage,
    )


def calculate(raw: RawInput) -> CalculationResult:
    try:
        validated = ValidatedInput.from_raw(raw)
    except InvalidInputError as exc:
        logger.debug("Rejected yearly marks input: %s", exc)
        return INVALID
    return calculate_yearly(validated)
