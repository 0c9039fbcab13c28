"""Tests for the purepapa command line."""

import os
import shutil
import tempfile
import unittest

import imageio.v3 as iio
import numpy as np
import pytest

from papa_samples import build_papa

from purepapa.cli import main
from purepapa.enums import PAPA_FORMAT


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        # 2x2 RGBA, top row red, bottom row green
        payload = bytes([255, 0, 0, 255] * 2 + [0, 255, 0, 255] * 2)
        self.input = os.path.join(self.tmpdir, "unit.papa")
        with open(self.input, "wb") as f:
            f.write(build_papa(PAPA_FORMAT.RGBA8888, 2, 2, payload))

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    @pytest.fixture(autouse=True)
    def _capsys(self, capsys):
        self.capsys = capsys

    def test_info_only(self):
        self.assertEqual(main([self.input]), 0)
        out = self.capsys.readouterr().out
        self.assertIn("RGBA8888", out)
        self.assertIn("2x2", out)

    def test_raw_export_is_top_first_rgba(self):
        output = os.path.join(self.tmpdir, "raw.png")
        self.assertEqual(main([self.input, "-o", output, "--raw"]), 0)
        image = iio.imread(output)
        np.testing.assert_array_equal(image[0, 0], [255, 0, 0, 255])
        np.testing.assert_array_equal(image[1, 0], [0, 255, 0, 255])

    def test_thumbnail_export(self):
        output = os.path.join(self.tmpdir, "thumb.png")
        self.assertEqual(main([self.input, "-o", output, "-s", "8"]), 0)
        image = iio.imread(output)
        self.assertEqual(image.shape, (8, 8, 4))
        # Top-left stays red; the badge sits bottom-right
        np.testing.assert_array_equal(image[0, 0], [255, 0, 0, 255])

    def test_missing_file_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            main([os.path.join(self.tmpdir, "nope.papa")])
        self.assertEqual(ctx.exception.code, 1)

    def test_bad_file_exits(self):
        path = os.path.join(self.tmpdir, "bad.papa")
        with open(path, "wb") as f:
            f.write(b"\x00" * 200)
        with self.assertRaises(SystemExit) as ctx:
            main([path])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Error reading papa file", self.capsys.readouterr().out)


if __name__ == "__main__":
    unittest.main(verbosity=2)
