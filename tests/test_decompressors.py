"""Tests for texture payload decoding."""

import unittest

import numpy as np

from papa_samples import dxt1_block, dxt5_block

from purepapa.decompressors import (
    DXT1Decompressor,
    DXT5Decompressor,
    MarkerDecompressor,
    MARKER_COLOR,
    UncompressedDecompressor,
    get_decompressor,
)
from purepapa.decompressors.dxt1 import build_color_palettes, unpack_rgb565
from purepapa.decompressors.dxt5 import build_alpha_palettes
from purepapa.enums import PAPA_FORMAT, ImageOrigin
from purepapa.papa import decode_texture

RED_565 = 0xF800     # (248, 0, 0)
GREEN_565 = 0x07E0   # (0, 252, 0)
BLUE_565 = 0x001F    # (0, 0, 248)
WHITE_565 = 0xFFFF   # (248, 252, 248)


def _palette(c0, c1):
    return build_color_palettes(
        np.array([c0], dtype=np.uint16), np.array([c1], dtype=np.uint16)
    )[0]


class TestRawFormats(unittest.TestCase):
    def setUp(self):
        # 2x2 image, top row first, distinct bytes per channel
        self.data = bytes(range(16))

    def test_rgba_rows_flipped(self):
        out = UncompressedDecompressor(PAPA_FORMAT.RGBA8888).decompress(self.data, 2, 2)
        src = np.frombuffer(self.data, dtype=np.uint8).reshape(2, 2, 4)
        np.testing.assert_array_equal(out[1], src[0])
        np.testing.assert_array_equal(out[0], src[1])

    def test_rgbx_forces_opaque(self):
        out = UncompressedDecompressor(PAPA_FORMAT.RGBX8888).decompress(self.data, 2, 2)
        self.assertTrue(np.all(out[:, :, 3] == 255))
        np.testing.assert_array_equal(out[1, 0, :3], [0, 1, 2])

    def test_bgra_swapped(self):
        out = UncompressedDecompressor(PAPA_FORMAT.BGRA8888).decompress(self.data, 2, 2)
        # Source top-left pixel is B=0, G=1, R=2, A=3
        np.testing.assert_array_equal(out[1, 0], [2, 1, 0, 3])

    def test_single_channel_only_red(self):
        out = UncompressedDecompressor(PAPA_FORMAT.R8).decompress(bytes([10, 20, 30, 40]), 2, 2)
        np.testing.assert_array_equal(out[1, :, 0], [10, 20])
        np.testing.assert_array_equal(out[0, :, 0], [30, 40])
        self.assertTrue(np.all(out[:, :, 1:] == 0))

    def test_short_payload_raises(self):
        with self.assertRaises(ValueError):
            UncompressedDecompressor(PAPA_FORMAT.RGBA8888).decompress(self.data[:15], 2, 2)


class TestMarker(unittest.TestCase):
    def test_unknown_tag_gives_marker(self):
        image = decode_texture(b"", 3, 5, 42)
        self.assertEqual((image.width, image.height), (3, 5))
        self.assertEqual(image.origin, ImageOrigin.BOTTOM_FIRST)
        self.assertTrue(np.all(image.pixels == np.array(MARKER_COLOR, dtype=np.uint8)))

    def test_marker_is_opaque(self):
        out = MarkerDecompressor().decompress(b"\xFF" * 8, 2, 2)
        self.assertTrue(np.all(out[:, :, 3] == 255))

    def test_selection(self):
        self.assertIsInstance(get_decompressor(PAPA_FORMAT.DXT1), DXT1Decompressor)
        self.assertIsInstance(get_decompressor(PAPA_FORMAT.DXT5), DXT5Decompressor)
        self.assertIsInstance(get_decompressor(PAPA_FORMAT.R8), UncompressedDecompressor)
        self.assertIsInstance(get_decompressor(PAPA_FORMAT.UNKNOWN), MarkerDecompressor)


class TestColorPalette(unittest.TestCase):
    def test_565_expansion_has_no_bit_replication(self):
        rgb = unpack_rgb565(np.array([WHITE_565, RED_565, GREEN_565, BLUE_565], dtype=np.uint16))
        np.testing.assert_array_equal(rgb, [[248, 252, 248], [248, 0, 0], [0, 252, 0], [0, 0, 248]])

    def test_four_color_mode(self):
        palette = _palette(RED_565, BLUE_565)
        np.testing.assert_array_equal(palette[0], [248, 0, 0, 255])
        np.testing.assert_array_equal(palette[1], [0, 0, 248, 255])
        np.testing.assert_array_equal(palette[2], [165, 0, 82, 255])
        np.testing.assert_array_equal(palette[3], [82, 0, 165, 255])

    def test_equal_endpoints_use_midpoint_and_black(self):
        palette = _palette(GREEN_565, GREEN_565)
        np.testing.assert_array_equal(palette[2], [0, 252, 0, 255])
        np.testing.assert_array_equal(palette[3, :3], [0, 0, 0])

    def test_three_color_mode_midpoint(self):
        palette = _palette(BLUE_565, RED_565)
        np.testing.assert_array_equal(palette[2, :3], [124, 0, 124])
        np.testing.assert_array_equal(palette[3, :3], [0, 0, 0])


class TestDXT1(unittest.TestCase):
    def test_single_block_uses_palette(self):
        indices = [i % 4 for i in range(16)]
        out = DXT1Decompressor().decompress(dxt1_block(RED_565, BLUE_565, indices), 4, 4)
        palette = _palette(RED_565, BLUE_565)
        for y in range(4):
            for x in range(4):
                expected = palette[indices[y * 4 + x]]
                np.testing.assert_array_equal(out[3 - y, x], expected)
        self.assertTrue(np.all(out[:, :, 3] == 255))

    def test_black_entry_stays_opaque(self):
        out = DXT1Decompressor().decompress(dxt1_block(GREEN_565, GREEN_565, [3] * 16), 4, 4)
        self.assertTrue(np.all(out[:, :, :3] == 0))
        self.assertTrue(np.all(out[:, :, 3] == 255))

    def test_partial_edge_blocks(self):
        # 6x5 image: 2x2 blocks, the right and bottom ones only partly inside
        colors = [RED_565, GREEN_565, BLUE_565, WHITE_565]
        data = b"".join(dxt1_block(c, 0) for c in colors)
        out = DXT1Decompressor().decompress(data, 6, 5)
        self.assertEqual(out.shape, (5, 6, 4))
        expected = unpack_rgb565(np.array(colors, dtype=np.uint16))
        for y in range(5):
            for x in range(6):
                block = (y // 4) * 2 + (x // 4)
                np.testing.assert_array_equal(out[4 - y, x, :3], expected[block], err_msg=f"pixel {x},{y}")
                self.assertEqual(out[4 - y, x, 3], 255)

    def test_required_size(self):
        self.assertEqual(DXT1Decompressor.required_size(4, 4), 8)
        self.assertEqual(DXT1Decompressor.required_size(5, 9), 2 * 3 * 8)

    def test_short_payload_raises(self):
        with self.assertRaises(ValueError):
            DXT1Decompressor().decompress(b"\x00" * 8, 8, 4)


class TestAlphaPalette(unittest.TestCase):
    def test_eight_value_mode(self):
        table = build_alpha_palettes(np.array([200], dtype=np.uint8), np.array([100], dtype=np.uint8))[0]
        np.testing.assert_array_equal(table, [200, 100, 185, 171, 157, 142, 128, 114])

    def test_six_value_mode(self):
        table = build_alpha_palettes(np.array([100], dtype=np.uint8), np.array([200], dtype=np.uint8))[0]
        np.testing.assert_array_equal(table, [100, 200, 120, 140, 160, 180, 0, 255])

    def test_equal_anchors_force_extremes(self):
        table = build_alpha_palettes(np.array([50], dtype=np.uint8), np.array([50], dtype=np.uint8))[0]
        self.assertEqual(table[6], 0)
        self.assertEqual(table[7], 255)
        np.testing.assert_array_equal(table[:6], [50] * 6)


class TestDXT5(unittest.TestCase):
    def test_alpha_and_color_indices_independent(self):
        alpha_indices = [i % 8 for i in range(16)]
        color_indices = [(i // 2) % 4 for i in range(16)]
        block = dxt5_block(200, 100, alpha_indices, RED_565, BLUE_565, color_indices)
        out = DXT5Decompressor().decompress(block, 4, 4)
        table = [200, 100, 185, 171, 157, 142, 128, 114]
        palette = _palette(RED_565, BLUE_565)
        for y in range(4):
            for x in range(4):
                i = y * 4 + x
                np.testing.assert_array_equal(out[3 - y, x, :3], palette[color_indices[i], :3])
                self.assertEqual(out[3 - y, x, 3], table[alpha_indices[i]])

    def test_color_block_three_color_mode(self):
        block = dxt5_block(255, 255, [0] * 16, BLUE_565, RED_565, [3] * 16)
        out = DXT5Decompressor().decompress(block, 4, 4)
        self.assertTrue(np.all(out[:, :, :3] == 0))
        self.assertTrue(np.all(out[:, :, 3] == 255))

    def test_partial_block(self):
        block = dxt5_block(0, 255, [7] * 16, GREEN_565, 0)
        out = DXT5Decompressor().decompress(block, 3, 2)
        self.assertEqual(out.shape, (2, 3, 4))
        self.assertTrue(np.all(out[:, :, 1] == 252))
        self.assertTrue(np.all(out[:, :, 3] == 255))

    def test_required_size(self):
        self.assertEqual(DXT5Decompressor.required_size(8, 8), 64)


if __name__ == "__main__":
    unittest.main(verbosity=2)
