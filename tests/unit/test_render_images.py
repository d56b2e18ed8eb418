#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import base64
import tempfile
import unittest
from pathlib import Path

from contractgen.core.errors import DrawingBackendError
from contractgen.render.images import load_image
from tests.test_support import oversized_png, png_bytes


class TestLoadImage(unittest.TestCase):
    def test_accepts_bytes_data_uri_and_path(self) -> None:
        payload = png_bytes()
        data_uri = "data:image/png;base64," + base64.b64encode(payload).decode("ascii")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "logo.png"
            path.write_bytes(payload)
            for ref in (payload, data_uri, str(path)):
                with self.subTest(kind=type(ref).__name__):
                    self.assertEqual(load_image(ref), payload)

    def test_failures_raise_drawing_backend_error(self) -> None:
        cases = (
            b"GIF89a-broken",
            "",
            "data:image/png,rawdata",
            "data:image/png;base64,@@@",
            "/nonexistent/contractgen/logo.png",
        )
        for ref in cases:
            with self.subTest(ref=ref):
                with self.assertRaises(DrawingBackendError):
                    load_image(ref)

    def test_decompression_bomb_is_a_backend_error(self) -> None:
        with self.assertRaisesRegex(DrawingBackendError, "unable to decode image"):
            load_image(oversized_png())


if __name__ == "__main__":
    unittest.main()
