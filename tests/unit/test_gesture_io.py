"""Unit tests for gesture_lib.utils.gesture_io."""

import json
import tempfile
import unittest
from pathlib import Path

from gesture_lib.domain.geometry import Point
from gesture_lib.errors import InvalidPathError
from gesture_lib.utils.gesture_io import load_gesture, parse_points, save_gesture

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class TestParsePoints(unittest.TestCase):
    """Tests for parse_points."""

    def test_bare_list(self):
        self.assertEqual(parse_points([[0, 1], [2.5, 3]]), [Point(0, 1), Point(2.5, 3)])

    def test_object_with_points(self):
        data = {'name': 'x', 'points': [[1, 1], [2, 2]]}
        self.assertEqual(parse_points(data), [Point(1, 1), Point(2, 2)])

    def test_object_without_points(self):
        with self.assertRaises(InvalidPathError):
            parse_points({'name': 'x'})

    def test_bad_pair(self):
        with self.assertRaises(InvalidPathError):
            parse_points([[0, 1], [2, 3, 4]])

    def test_non_numeric(self):
        with self.assertRaises(InvalidPathError):
            parse_points([[0, 1], ['a', 3]])

    def test_not_a_list(self):
        with self.assertRaises(InvalidPathError):
            parse_points("0,1 2,3")


class TestGestureFiles(unittest.TestCase):
    """Tests for load_gesture and save_gesture."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_fixture(self):
        points = load_gesture(FIXTURES_DIR / "arrow_template.json")
        self.assertEqual(len(points), 11)
        self.assertEqual(points[0], Point(0, 50))

    def test_save_with_name(self):
        path = self.tmp_dir / "g.json"
        save_gesture(path, [Point(1, 2), Point(3, 4)], name='zig')
        data = json.loads(path.read_text())
        self.assertEqual(data, {'name': 'zig', 'points': [[1.0, 2.0], [3.0, 4.0]]})
        self.assertEqual(load_gesture(path), [Point(1, 2), Point(3, 4)])

    def test_save_without_name(self):
        path = self.tmp_dir / "g.json"
        save_gesture(str(path), [Point(1, 2)])
        self.assertEqual(json.loads(path.read_text()), [[1.0, 2.0]])

    def test_invalid_json(self):
        path = self.tmp_dir / "broken.json"
        path.write_text("[[0, 1], ")
        with self.assertRaises(InvalidPathError):
            load_gesture(path)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_gesture(self.tmp_dir / "missing.json")


if __name__ == '__main__':
    unittest.main()
