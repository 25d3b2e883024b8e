from dataclasses import dataclass
from typing import Tuple

from calco.core.yearly import MAX_GPA, MAX_SUBJECTS, MIN_GPA, MIN_SUBJECTS


@dataclass(frozen=True)
class ScaleRow:
    grade_point: float
    percentage: int

    @property
    def percentage_label(self) -> str:
        return f"{self.percentage}%"


@dataclass(frozen=True)
class Scholarship:
    name: str
    url: str


# MAKAUT 10 point scale, shown for reference only.
GRADE_SCALE: Tuple[ScaleRow, ...] = (
    ScaleRow(6.25, 55),
    ScaleRow(6.75, 60),
    ScaleRow(7.25, 65),
    ScaleRow(7.75, 70),
    ScaleRow(8.25, 75),
)

VALIDATION_HINTS: Tuple[str, ...] = (
    f"SGPA must be {MIN_GPA}-{MAX_GPA:g}",
    f"Subjects must be {MIN_SUBJECTS}-{MAX_SUBJECTS}",
)

SCHOLARSHIPS: Tuple[Scholarship, ...] = (
    Scholarship("Swami Vivekananda Scholarship", "https://svmcm.wb.gov.in/"),
    Scholarship("OASIS Scholarship", "https://oasis.gov.in/"),
    Scholarship("Aikashree Scholarship", "https://wbmdfcscholarship.in/"),
)
