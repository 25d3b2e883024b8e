import flet as ft

from calco.config.settings import settings
from calco.state.calculator_state import CalculatorState
from calco.ui.views.calculator_view import build_calculator_view


def main(page: ft.Page) -> None:
    page.title = settings.app_title
    page.views.clear()
    page.views.append(build_calculator_view(page, CalculatorState()))
    page.update()
