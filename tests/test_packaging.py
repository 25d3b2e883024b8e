import os
import unittest

from calco import main

PYPROJECT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "pyproject.toml")


class PackagingTests(unittest.TestCase):
    def test_launcher_script_declared(self):
        with open(PYPROJECT, encoding="utf-8") as fh:
            content = fh.read()
        self.assertIn("[project.scripts]", content)
        self.assertIn('calco = "calco.main:run"', content)

    def test_launcher_target_exists(self):
        self.assertTrue(callable(main.run))


if __name__ == "__main__":
    unittest.main()
