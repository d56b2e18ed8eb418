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

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from contractgen.config import installer


class TestConfigInstaller(unittest.TestCase):
    def test_user_config_dir_precedence(self) -> None:
        with mock.patch.dict(
            os.environ,
            {installer.XDG_CONFIG_ENV: "/tmp/xdg"},
            clear=False,
        ):
            with mock.patch.object(installer.sys, "platform", "linux"):
                self.assertEqual(installer._user_config_dir(), Path("/tmp/xdg/contractgen"))

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "darwin"):
                with mock.patch.object(installer.Path, "home", return_value=Path("/Users/example")):
                    self.assertEqual(
                        installer._user_config_dir(),
                        Path("/Users/example/.config/contractgen"),
                    )

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "linux"):
                with mock.patch.object(
                    installer, "user_config_dir", return_value="/opt/config/contractgen"
                ):
                    self.assertEqual(installer._user_config_dir(), Path("/opt/config/contractgen"))

    def test_bundled_presets_exist(self) -> None:
        for key, path in installer.PAPER_CONFIGS.items():
            with self.subTest(paper=key):
                self.assertTrue(path.is_file())

    def test_init_user_config_copies_presets(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_cfg = Path(tmpdir) / "usercfg"
            with mock.patch.object(installer, "_user_config_dir", return_value=user_cfg):
                self.assertTrue(installer.user_config_needs_init())
                self.assertEqual(installer.init_user_config(), user_cfg)
                self.assertFalse(installer.user_config_needs_init())
                self.assertTrue((user_cfg / "a4.toml").is_file())
                self.assertTrue((user_cfg / "letter.toml").is_file())

    def test_init_user_config_keeps_user_edits(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_cfg = Path(tmpdir)
            (user_cfg / "a4.toml").write_text("# edited\n", encoding="utf-8")
            with mock.patch.object(installer, "_user_config_dir", return_value=user_cfg):
                installer.init_user_config()
            self.assertEqual((user_cfg / "a4.toml").read_text(encoding="utf-8"), "# edited\n")

    def test_init_user_config_failure_raises(self) -> None:
        with mock.patch.object(installer, "_ensure_user_config", return_value=False):
            with self.assertRaisesRegex(OSError, "unable to create config dir"):
                installer.init_user_config()

    def test_resolve_config_path_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_cfg = Path(tmpdir) / "usercfg"
            with mock.patch.object(installer, "_user_config_dir", return_value=user_cfg):
                self.assertEqual(installer.resolve_config_path("custom.toml"), Path("custom.toml"))
                self.assertEqual(
                    installer.resolve_config_path(paper_size="letter"),
                    user_cfg / "letter.toml",
                )
                with mock.patch.dict(os.environ, {installer.PAPER_SIZE_ENV: "LETTER"}):
                    self.assertEqual(installer.resolve_config_path(), user_cfg / "letter.toml")
                with mock.patch.dict(os.environ, {}, clear=False):
                    os.environ.pop(installer.PAPER_SIZE_ENV, None)
                    self.assertEqual(installer.resolve_config_path(), user_cfg / "a4.toml")
                with self.assertRaisesRegex(ValueError, "unknown paper size"):
                    installer.resolve_config_path(paper_size="B7")

    def test_resolve_config_path_falls_back_to_bundled(self) -> None:
        with mock.patch.object(installer, "_ensure_user_config", return_value=False):
            with mock.patch.dict(os.environ, {}, clear=False):
                os.environ.pop(installer.PAPER_SIZE_ENV, None)
                self.assertEqual(installer.resolve_config_path(), installer.DEFAULT_CONFIG_PATH)
                self.assertEqual(
                    installer.resolve_config_path(paper_size="LETTER"),
                    installer.PAPER_CONFIGS["LETTER"],
                )


if __name__ == "__main__":
    unittest.main()
