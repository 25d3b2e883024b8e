import unittest
from unittest.mock import MagicMock

import flet as ft

from calco.state.calculator_state import CalculatorState
from calco.ui.views.calculator_view import CalculatorView, build_calculator_view


class CalculatorViewTests(unittest.TestCase):
    def setUp(self):
        self.page = MagicMock()
        self.state = CalculatorState()
        self.view = CalculatorView(self.page, self.state)

    def fill(self, odd_gpa, odd_subjects, even_gpa, even_subjects):
        self.view.odd_gpa.value = odd_gpa
        self.view.odd_subjects.value = odd_subjects
        self.view.even_gpa.value = even_gpa
        self.view.even_subjects.value = even_subjects

    def test_build_returns_view(self):
        view = build_calculator_view(self.page, self.state)
        self.assertIsInstance(view, ft.View)
        self.assertEqual(view.route, "/")

    def test_results_hidden_initially(self):
        self.assertFalse(self.view.results.visible)

    def test_calculate_shows_values(self):
        self.fill("8.5", "5", "9.0", "6")
        self.view.handle_calculate(None)

        self.assertTrue(self.view.results.visible)
        self.assertTrue(self.view.valid_panel.visible)
        self.assertFalse(self.view.invalid_panel.visible)
        self.assertEqual(self.view.total_marks_text.value, "1100")
        self.assertEqual(self.view.obtained_marks_text.value, "883")
        self.assertEqual(self.view.ygpa_text.value, "8.75")
        self.assertEqual(self.view.percentage_text.value, "80.27%")
        self.page.update.assert_called()

    def test_calculate_shows_error(self):
        self.fill("0.74", "5", "9.0", "6")
        self.view.handle_calculate(None)

        self.assertTrue(self.view.results.visible)
        self.assertTrue(self.view.invalid_panel.visible)
        self.assertFalse(self.view.valid_panel.visible)

    def test_reset_clears_fields_and_result(self):
        self.fill("8.5", "5", "9.0", "6")
        self.view.handle_calculate(None)
        self.view.handle_reset(None)

        self.assertFalse(self.view.results.visible)
        self.assertIsNone(self.state.result)
        self.assertEqual(self.view.odd_gpa.value, "")
        self.assertEqual(self.state.even_subjects, "")


if __name__ == "__main__":
    unittest.main()
