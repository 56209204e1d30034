"""
Test cases for the command line listing.
"""
import io
import unittest
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_bindings.direction import AbsoluteDirection, RelativeDirection
from gesture_bindings.gesture import Gesture
from gesture_bindings.main import describe, main


class TestDescribe(unittest.TestCase):
    """Test display lines for bindings."""

    def test_without_description(self):
        self.assertEqual(describe(Gesture(3, AbsoluteDirection.UP)), "3 Finger AbsoluteUp")

    def test_with_description(self):
        gesture = Gesture(4, RelativeDirection.LEFT, "Previous workspace")
        self.assertEqual(describe(gesture), "4 Finger RelativeLeft - Previous workspace")


class TestMain(unittest.TestCase):
    """Test the entry point."""

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue().splitlines()

    def test_lists_default_bindings(self):
        code, lines = self._run([])
        self.assertEqual(code, 0)
        self.assertIn("4 Finger RelativeLeft - Previous workspace", lines)
        self.assertIn("4 Finger AbsoluteDown", lines)

    def test_lists_given_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "gestures.yaml"
            path.write_text("gestures:\n  - \"3+RelativeRight\"\n")
            code, lines = self._run([str(path)])
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["3 Finger RelativeRight"])

    def test_error_exit_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "gestures.yaml"
            path.write_text("gestures:\n  - \"3+Sideways\"\n")
            with self.assertLogs("gesture_bindings", level="ERROR"):
                code, lines = self._run([str(path)])
        self.assertEqual(code, 1)
        self.assertTrue(lines[0].startswith("Error:"))

    def test_invalid_utf8_exit_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "gestures.yaml"
            path.write_bytes(b"\xff\xfe gestures: []\n")
            with self.assertLogs("gesture_bindings.main", level="ERROR"):
                code, lines = self._run([str(path)])
        self.assertEqual(code, 1)
        self.assertTrue(lines[0].startswith("Error:"))

    def test_directory_exit_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("gesture_bindings.main", level="ERROR"):
                code, lines = self._run([tmp])
        self.assertEqual(code, 1)

    def test_missing_file_exit_code(self):
        with self.assertLogs("gesture_bindings.main", level="ERROR"):
            code, lines = self._run(["/nonexistent/gestures.yaml"])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
