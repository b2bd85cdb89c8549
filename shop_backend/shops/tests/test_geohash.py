# shops/tests/test_geohash.py

import math

from django.test import SimpleTestCase

from shops.services import geohash


class GeohashEncodeTests(SimpleTestCase):
    """
    GUARANTEES:
    - Standard bit-interleaving (longitude first)
    - Strictly-greater-than midpoint rule
    - Invalid input raises ValueError
    """

    def test_known_vectors(self):
        self.assertEqual(geohash.encode(57.64911, 10.40744, 11), "u4pruydqqvj")
        self.assertEqual(geohash.encode(42.6, -5.6, 5), "ezs42")

    def test_default_precision_is_nine(self):
        self.assertEqual(len(geohash.encode(51.5074, -0.1278)), 9)

    def test_prefix_is_stable_across_precisions(self):
        full = geohash.encode(57.64911, 10.40744, 11)
        self.assertEqual(geohash.encode(57.64911, 10.40744, 5), full[:5])

    def test_midpoint_goes_to_lower_half(self):
        # 0 is never strictly greater than the first midpoint (0)
        self.assertEqual(geohash.encode(0.0, 0.0, 2), "7z")

    def test_extremes_are_accepted(self):
        self.assertEqual(len(geohash.encode(90.0, 180.0, 6)), 6)
        self.assertEqual(len(geohash.encode(-90.0, -180.0, 6)), 6)

    def test_out_of_range_rejected(self):
        with self.assertRaises(ValueError):
            geohash.encode(91.0, 0.0)
        with self.assertRaises(ValueError):
            geohash.encode(0.0, -180.5)

    def test_non_finite_rejected(self):
        with self.assertRaises(ValueError):
            geohash.encode(math.nan, 0.0)
        with self.assertRaises(ValueError):
            geohash.encode(0.0, math.inf)

    def test_missing_coordinates_rejected(self):
        with self.assertRaises(ValueError):
            geohash.encode(None, 10.0)

    def test_bad_precision_rejected(self):
        with self.assertRaises(ValueError):
            geohash.encode(10.0, 10.0, 0)
        with self.assertRaises(ValueError):
            geohash.encode(10.0, 10.0, 13)


class GeohashDecodeTests(SimpleTestCase):
    def test_bbox_contains_source_point(self):
        lat_min, lat_max, lng_min, lng_max = geohash.decode_bbox("ezs42")
        self.assertTrue(lat_min <= 42.6 <= lat_max)
        self.assertTrue(lng_min <= -5.6 <= lng_max)

    def test_decode_returns_cell_centre(self):
        lat, lng = geohash.decode("ezs42")
        self.assertAlmostEqual(lat, 42.605, places=2)
        self.assertAlmostEqual(lng, -5.603, places=2)

    def test_decode_is_case_insensitive(self):
        self.assertEqual(geohash.decode_bbox("EZS42"), geohash.decode_bbox("ezs42"))

    def test_invalid_character_rejected(self):
        # "a", "i", "l" and "o" are not in the alphabet
        for bad in ("ezsa2", "i", "lo"):
            with self.assertRaises(ValueError):
                geohash.decode_bbox(bad)

    def test_empty_rejected(self):
        with self.assertRaises(ValueError):
            geohash.decode("")
