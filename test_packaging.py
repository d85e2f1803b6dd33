"""
Checks on the installable module list.
"""
import sys
import unittest
from pathlib import Path

PYPROJECT = Path(__file__).parent / "pyproject.toml"


@unittest.skipIf(sys.version_info < (3, 11), "tomllib needs Python 3.11")
class TestPyModules(unittest.TestCase):

    def setUp(self):
        import tomllib

        with PYPROJECT.open("rb") as fh:
            self.modules = tomllib.load(fh)["tool"]["setuptools"]["py-modules"]

    def test_streamlit_page_not_installed(self):
        # app.py runs the page on import; it is started with `streamlit run`
        self.assertNotIn("app", self.modules)

    def test_library_modules_installed(self):
        for name in ("rules_engine", "health_input", "disease_catalog", "report", "config", "logger"):
            self.assertIn(name, self.modules)
            self.assertTrue((PYPROJECT.parent / f"{name}.py").exists())


if __name__ == "__main__":
    unittest.main()
