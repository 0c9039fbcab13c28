"""Tests for source-over compositing."""

import unittest

import numpy as np

from purepapa.composite import blit
from purepapa.enums import ImageOrigin
from purepapa.image import CanonicalImage


def _random_opaque(width, height, seed=0):
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, (height, width, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    return CanonicalImage(pixels)


def _solid(width, height, rgba):
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return CanonicalImage(pixels)


class TestBlit(unittest.TestCase):
    def test_opaque_source_replaces_region(self):
        src = _random_opaque(2, 3, seed=1)
        dst = _solid(5, 5, (10, 20, 30, 40))
        before = dst.pixels.copy()
        blit(src, dst, 1, 2)
        np.testing.assert_array_equal(dst.pixels[2:5, 1:3], src.pixels)
        mask = np.ones((5, 5), dtype=bool)
        mask[2:5, 1:3] = False
        np.testing.assert_array_equal(dst.pixels[mask], before[mask])

    def test_transparent_source_keeps_destination(self):
        src = _solid(2, 2, (255, 255, 255, 0))
        dst = _random_opaque(4, 4, seed=2)
        before = dst.pixels.copy()
        blit(src, dst, 0, 0)
        np.testing.assert_array_equal(dst.pixels, before)

    def test_half_alpha_blend(self):
        src = _solid(1, 1, (200, 200, 200, 128))
        dst = _solid(1, 1, (50, 0, 50, 255))
        blit(src, dst, 0, 0)
        # (200 * 128 + 50 * 127) / 255 = 125.29, (200 * 128) / 255 = 100.39
        np.testing.assert_array_equal(dst.pixels[0, 0], [125, 100, 125, 255])

    def test_alpha_accumulates(self):
        src = _solid(1, 1, (0, 0, 0, 51))
        dst = _solid(1, 1, (0, 0, 0, 0))
        blit(src, dst, 0, 0)
        self.assertEqual(dst.pixels[0, 0, 3], 51)

    def test_offset_clamped_inside(self):
        src = _random_opaque(2, 2, seed=3)
        for dest, expected in [((10, -5), (2, 0)), ((-3, 7), (0, 2)), ((9, 9), (2, 2))]:
            dst = CanonicalImage.blank(4, 4)
            blit(src, dst, *dest)
            x, y = expected
            np.testing.assert_array_equal(dst.pixels[y:y + 2, x:x + 2], src.pixels)
            self.assertEqual(int(dst.pixels[:, :, 3].astype(bool).sum()), 4)

    def test_larger_source_is_clipped(self):
        src = _random_opaque(6, 6, seed=4)
        dst = CanonicalImage.blank(4, 4)
        blit(src, dst, -1, -1)
        np.testing.assert_array_equal(dst.pixels, src.pixels[1:5, 1:5])

    def test_larger_source_fully_outside(self):
        src = _random_opaque(6, 6, seed=5)
        dst = CanonicalImage.blank(4, 4)
        blit(src, dst, 20, 20)
        self.assertTrue(np.all(dst.pixels == 0))

    def test_origin_mismatch(self):
        src = CanonicalImage.blank(1, 1, ImageOrigin.TOP_FIRST)
        dst = CanonicalImage.blank(2, 2, ImageOrigin.BOTTOM_FIRST)
        with self.assertRaises(ValueError):
            blit(src, dst, 0, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
