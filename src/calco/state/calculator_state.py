from dataclasses import dataclass
from typing import Optional

from calco.core.yearly import CalculationResult, RawInput, calculate


@dataclass
class CalculatorState:
    odd_gpa: str = ""
    odd_subjects: str = ""
    even_gpa: str = ""
    even_subjects: str = ""
    result: Optional[CalculationResult] = None

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def as_raw_input(self) -> RawInput:
        return RawInput(
            odd_gpa=self.odd_gpa,
            odd_subjects=self.odd_subjects,
            even_gpa=self.even_gpa,
            even_subjects=self.even_subjects,
        )

    def calculate(self) -> CalculationResult:
        self.result = calculate(self.as_raw_input())
        return self.result

    def reset(self) -> None:
        self.odd_gpa = ""
        self.odd_subjects = ""
        self.even_gpa = ""
        self.even_subjects = ""
        self.result = None
