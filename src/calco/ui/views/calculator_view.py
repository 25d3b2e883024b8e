import logging

import flet as ft

from calco.core.reference import GRADE_SCALE, SCHOLARSHIPS, VALIDATION_HINTS
from calco.core.yearly import YearlyResult
from calco.state.calculator_state import CalculatorState

logger = logging.getLogger(__name__)

HOW_IT_WORKS = (
    "Enter your ODD semester SGPA and number of subjects including theory and practical, "
    "then enter your EVEN semester SGPA and number of subjects including theory and practical. "
    "Click Calculate to get your yearly aggregate marks, obtained marks and overall percentage."
)


def _number_field(label: str, hint: str) -> ft.TextField:
    return ft.TextField(
        label=label,
        hint_text=hint,
        width=220,
        keyboard_type=ft.KeyboardType.NUMBER,
        text_align=ft.TextAlign.CENTER,
    )


def _stat(label: str, value: ft.Text) -> ft.Column:
    return ft.Column(
        controls=[
            ft.Text(label, size=16),
            ft.Container(
                padding=16,
                border_radius=16,
                bgcolor=ft.Colors.BLUE_GREY_50,
                content=value,
            ),
        ]
    )


class CalculatorView:
    def __init__(self, page: ft.Page, state: CalculatorState) -> None:
        self.page = page
        self.state = state

        self.odd_gpa = _number_field("Odd Sem SGPA", "0.00")
        self.odd_subjects = _number_field("Odd Sem No of Subjects", "0")
        self.even_gpa = _number_field("Even Sem SGPA", "0.00")
        self.even_subjects = _number_field("Even Sem No of Subjects", "0")

        self.total_marks_text = ft.Text(size=28, weight=ft.FontWeight.BOLD)
        self.obtained_marks_text = ft.Text(size=28, weight=ft.FontWeight.BOLD)
        self.ygpa_text = ft.Text(size=28, weight=ft.FontWeight.BOLD)
        self.percentage_text = ft.Text(size=28, weight=ft.FontWeight.BOLD)

        self.valid_panel = ft.Row(
            controls=[
                ft.Column(
                    controls=[
                        _stat("Your Total Marks", self.total_marks_text),
                        _stat("Your Obtained Marks", self.obtained_marks_text),
                    ]
                ),
                ft.Column(
                    controls=[
                        _stat("YGPA", self.ygpa_text),
                        _stat("Overall Percentage", self.percentage_text),
                    ]
                ),
            ],
            visible=False,
        )
        self.invalid_panel = ft.Column(
            controls=[
                ft.Text("Invalid !", size=32, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                ft.Text("Please check your inputs:"),
                *[ft.Text(hint) for hint in VALIDATION_HINTS],
            ],
            visible=False,
        )
        self.results = ft.Column(
            controls=[
                ft.Text("Your Results", size=22, weight=ft.FontWeight.BOLD),
                self.valid_panel,
                self.invalid_panel,
            ],
            visible=False,
        )

    def _fields(self):
        return (
            ("odd_gpa", self.odd_gpa),
            ("odd_subjects", self.odd_subjects),
            ("even_gpa", self.even_gpa),
            ("even_subjects", self.even_subjects),
        )

    def render_result(self) -> None:
        result = self.state.result
        if result is None:
            self.results.visible = False
            return

        self.results.visible = True
        if isinstance(result, YearlyResult):
            self.total_marks_text.value = str(result.total_marks)
            self.obtained_marks_text.value = str(result.obtained_marks)
            self.ygpa_text.value = result.yearly_gpa_text
            self.percentage_text.value = f"{result.percentage_text}%"
            self.valid_panel.visible = True
            self.invalid_panel.visible = False
        else:
            self.valid_panel.visible = False
            self.invalid_panel.visible = True

    def handle_calculate(self, _) -> None:
        for name, field in self._fields():
            setattr(self.state, name, field.value or "")
        result = self.state.calculate()
        logger.debug("Calculated yearly marks, error=%s", result.error)
        self.render_result()
        self.page.update()

    def handle_reset(self, _) -> None:
        self.state.reset()
        for _name, field in self._fields():
            field.value = ""
        self.render_result()
        self.page.update()

    def _grade_table(self) -> ft.DataTable:
        return ft.DataTable(
            columns=[
                ft.DataColumn(ft.Text("Grade Point")),
                ft.DataColumn(ft.Text("Percentage")),
            ],
            rows=[
                ft.DataRow(
                    cells=[
                        ft.DataCell(ft.Text(f"{row.grade_point:.2f}")),
                        ft.DataCell(ft.Text(row.percentage_label)),
                    ]
                )
                for row in GRADE_SCALE
            ],
        )

    def build(self) -> ft.View:
        return ft.View(
            route="/",
            controls=[
                ft.AppBar(title=ft.Text("Calco - MAKAUT Yearly Marks Calculator")),
                ft.Container(
                    padding=20,
                    content=ft.Column(
                        scroll=ft.ScrollMode.AUTO,
                        controls=[
                            ft.Text("SGPA to Total Marks, Obtained Marks & Percentage", size=18),
                            ft.Text("This tool helps you calculate your yearly aggregate marks based on your semester grades."),
                            ft.Text("Applicable for scholarships:", weight=ft.FontWeight.BOLD),
                            *[ft.TextButton(s.name, url=s.url) for s in SCHOLARSHIPS],
                            ft.Divider(),
                            ft.Text("How it works", size=20, weight=ft.FontWeight.BOLD),
                            ft.Text(HOW_IT_WORKS),
                            ft.Divider(),
                            ft.Text("Calculate Your Marks", size=20, weight=ft.FontWeight.BOLD),
                            ft.Row(
                                controls=[
                                    ft.Column(controls=[ft.Text("Odd Sem"), self.odd_gpa, self.odd_subjects]),
                                    ft.Column(controls=[ft.Text("Even Sem"), self.even_gpa, self.even_subjects]),
                                ]
                            ),
                            ft.Row(
                                controls=[
                                    ft.Button("Calculate", on_click=self.handle_calculate),
                                    ft.Button("Reset", on_click=self.handle_reset),
                                ]
                            ),
                            self.results,
                            ft.Divider(),
                            ft.Text("MAKAUT 10 Point Scale", size=20, weight=ft.FontWeight.BOLD),
                            self._grade_table(),
                        ],
                    ),
                ),
            ],
        )


def build_calculator_view(page: ft.Page, state: CalculatorState) -> ft.View:
    return CalculatorView(page, state).build()
