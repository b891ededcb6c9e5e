"""Tests for the ``python -m orthoconnect route`` command."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from orthoconnect.__main__ import main
from tests.scene_fixture import make_request_dict


class TestRouteCommand(unittest.TestCase):

    def _run(self, data) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "request.json"
            path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
            with redirect_stdout(out), redirect_stderr(err):
                code = main(["route", str(path), "--strategy", "grid"])
        return code, out.getvalue(), err.getvalue()

    def test_prints_result(self):
        code, out, _ = self._run(make_request_dict())
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out)["path"],
            [[100, 25], [200, 25], [200, 175], [300, 175]],
        )

    def test_missing_key(self):
        data = make_request_dict()
        del data["point_b"]
        code, out, err = self._run(data)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error: malformed request", err)

    def test_wrong_type(self):
        data = make_request_dict()
        data["point_a"]["shape"] = [0, 0, 100, 50]
        code, _, err = self._run(data)
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_not_json(self):
        code, _, err = self._run("{not json")
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_invalid_geometry(self):
        data = make_request_dict()
        data["shape_margin"] = -5
        code, _, err = self._run(data)
        self.assertEqual(code, 1)
        self.assertIn("shape_margin: must be >= 0", err)


if __name__ == "__main__":
    unittest.main()
