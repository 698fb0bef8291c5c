"""
Tests for building coordinates from GPS tags.
"""

import unittest
from fractions import Fraction

from exifgeo.geo import GeoCoordinate, dms_to_decimal
from exifgeo.gps import GpsTags
from exifgeo.rational import Rational


def seoul_tags(**overrides):
    tags = {
        "GPSLatitude": ((37, 1), (33, 1), (5994, 100)),
        "GPSLatitudeRef": "N",
        "GPSLongitude": ((126, 1), (58, 1), (408, 10)),
        "GPSLongitudeRef": "E",
        "GPSAltitude": (385, 10),
        "GPSAltitudeRef": b"\x00",
    }
    tags.update(overrides)
    return {key: value for key, value in tags.items() if value is not None}


class TestGpsTags(unittest.TestCase):
    """Test GpsTags parsing and conversion."""

    def setUp(self):
        """Set up the expected decimal axes."""
        self.latitude = dms_to_decimal(Rational(37, 1), Rational(33, 1), Rational(5994, 100), False)
        self.longitude = dms_to_decimal(Rational(126, 1), Rational(58, 1), Rational(408, 10), False)

    def test_from_mapping(self):
        """Test tag values are read and rational pairs converted."""
        tags = GpsTags.from_mapping(seoul_tags())
        self.assertEqual(tags.latitude, (Rational(37, 1), Rational(33, 1), Rational(5994, 100)))
        self.assertEqual(tags.latitude_ref, "N")
        self.assertEqual(tags.altitude, Rational(385, 10))
        self.assertEqual(tags.altitude_ref, 0)

    def test_to_geo_coordinate(self):
        """Test a complete set of tags gives a coordinate with altitude."""
        coordinate = GpsTags.from_mapping(seoul_tags()).to_geo_coordinate()
        self.assertEqual(coordinate, GeoCoordinate(self.latitude, self.longitude, 38.5))

    def test_southern_and_western_hemispheres(self):
        """Test S and W references negate the axes."""
        coordinate = GpsTags.from_mapping(
            seoul_tags(GPSLatitudeRef=b"S\x00", GPSLongitudeRef="w")
        ).to_geo_coordinate()
        self.assertEqual(coordinate.latitude, -self.latitude)
        self.assertEqual(coordinate.longitude, -self.longitude)

    def test_below_sea_level(self):
        """Test altitude reference 1 negates the altitude."""
        coordinate = GpsTags.from_mapping(seoul_tags(GPSAltitudeRef=b"\x01")).to_geo_coordinate()
        self.assertEqual(coordinate.altitude, -38.5)
        coordinate = GpsTags.from_mapping(seoul_tags(GPSAltitudeRef=1)).to_geo_coordinate()
        self.assertEqual(coordinate.altitude, -38.5)

    def test_missing_altitude(self):
        """Test a position without altitude tags has no altitude."""
        coordinate = GpsTags.from_mapping(
            seoul_tags(GPSAltitude=None, GPSAltitudeRef=None)
        ).to_geo_coordinate()
        self.assertIsNotNone(coordinate)
        self.assertIsNone(coordinate.altitude)

    def test_altitude_without_number(self):
        """Test a zero-denominator altitude is treated as missing."""
        coordinate = GpsTags.from_mapping(seoul_tags(GPSAltitude=(0, 0))).to_geo_coordinate()
        self.assertIsNone(coordinate.altitude)

    def test_missing_position(self):
        """Test missing axis or reference tags give no coordinate."""
        self.assertIsNone(GpsTags.from_mapping(seoul_tags(GPSLatitude=None)).to_geo_coordinate())
        self.assertIsNone(GpsTags.from_mapping(seoul_tags(GPSLongitudeRef=None)).to_geo_coordinate())
        self.assertIsNone(GpsTags.from_mapping({}).to_geo_coordinate())

    def test_malformed_triple(self):
        """Test an axis without three components gives no coordinate."""
        tags = seoul_tags(GPSLatitude=((37, 1), (33, 1)))
        self.assertIsNone(GpsTags.from_mapping(tags).to_geo_coordinate())

    def test_zero_denominator(self):
        """Test an axis that does not form a number gives no coordinate."""
        tags = seoul_tags(GPSLongitude=((126, 0), (58, 1), (408, 10)))
        self.assertIsNone(GpsTags.from_mapping(tags).to_geo_coordinate())

    def test_float_convertible_values(self):
        """Test fractions and floats work as axis components."""
        tags = GpsTags(
            latitude=(Fraction(10), Fraction(30), Fraction(0)),
            latitude_ref="S",
            longitude=(20.0, 15.0, 0.0),
            longitude_ref="E",
        )
        self.assertEqual(tags.to_geo_coordinate(), GeoCoordinate(-10.5, 20.25))


if __name__ == "__main__":
    unittest.main()
