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

import io
import tempfile
import unittest
from pathlib import Path

from pypdf import PdfReader

from contractgen.config import load_app_config
from contractgen.config.installer import PAPER_CONFIGS
from contractgen.render.contract import generate_contract
from contractgen.render.document import save_document
from tests.test_support import (
    LONG_PAYMENT_TERMS,
    make_company,
    make_order,
    make_party,
    with_language,
)


def _read(document) -> PdfReader:
    return PdfReader(io.BytesIO(document.serialize()))


class TestContractPdfIntegration(unittest.TestCase):
    def _generate(self, order=None, **kwargs):
        return generate_contract(
            order or make_order(),
            make_party(),
            make_party(name="Sunny Farms S.r.l.", city="Palermo"),
            make_company(),
            **kwargs,
        )

    def test_single_page_contract(self) -> None:
        document = self._generate()
        reader = _read(document)
        self.assertEqual(len(reader.pages), 1)
        self.assertEqual(document.page_count, 1)
        text = reader.pages[0].extract_text()
        self.assertIn("Page 1 of 1", text)
        self.assertIn("Acme Foods S.p.A.", text)
        self.assertIn("Green Trade S.r.l.", text)

    def test_long_payment_terms_spill_onto_second_page(self) -> None:
        document = self._generate(make_order(payment_terms=LONG_PAYMENT_TERMS))
        reader = _read(document)
        self.assertGreaterEqual(len(reader.pages), 2)
        self.assertEqual(len(reader.pages), document.page_count)
        total = document.page_count
        for index, page in enumerate(reader.pages, start=1):
            text = page.extract_text()
            with self.subTest(page=index):
                self.assertIn(f"Page {index} of {total}", text)
                self.assertIn("Green Trade S.r.l.", text)

    def test_configured_paper_sizes_render(self) -> None:
        expected_points = {"A4": (595.3, 841.9), "LETTER": (612.0, 792.0)}
        for paper, path in PAPER_CONFIGS.items():
            with self.subTest(paper=paper):
                app_config = load_app_config(path)
                document = self._generate(spec=app_config.spec)
                box = _read(document).pages[0].mediabox
                width, height = expected_points[paper]
                self.assertAlmostEqual(float(box.width), width, delta=0.5)
                self.assertAlmostEqual(float(box.height), height, delta=0.5)

    def test_italian_contract_saved_to_disk(self) -> None:
        document = self._generate(spec=with_language(None, "it"))
        with tempfile.TemporaryDirectory() as tmpdir:
            path = save_document(document, Path(tmpdir) / "contratto.pdf")
            reader = PdfReader(str(path))
            self.assertIn("Pagina 1 di 1", reader.pages[0].extract_text())


if __name__ == "__main__":
    unittest.main()
