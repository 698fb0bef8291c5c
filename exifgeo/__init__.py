"""Geographic coordinates for image GPS metadata.

exifgeo provides an immutable value type for a position on Earth (latitude,
longitude and an optional altitude) together with the conversions between
decimal degrees and degrees-minutes-seconds notation that image metadata
tooling needs.

Components:
    Geographic Values (exifgeo.geo):
        • GeoCoordinate: Immutable latitude/longitude/altitude value
        • decimal_to_dms, decimal_to_dms_string, dms_to_decimal
        • NumPy batch conversions for columns of coordinates

    GPS Tags (exifgeo.gps):
        • GpsTags: Raw GPS tag values turned into a GeoCoordinate

    Rationals (exifgeo.rational):
        • Rational: Numerator/denominator value as stored in EXIF

    Angle Units (exifgeo.unit):
        • Degree, ArcMinute, ArcSecond with family-checked arithmetic

Example:
    >>> from exifgeo import GeoCoordinate, Rational, dms_to_decimal
    >>> lat = dms_to_decimal(Rational(10, 1), Rational(30, 1), Rational(0, 1), True)
    >>> GeoCoordinate(lat, 4.56, 8)
    GeoCoordinate(latitude=-10.5, longitude=4.56, altitude=8.0)
    >>> str(GeoCoordinate(lat, 4.56, 8))
    '-10.5, 4.56, 8M'
"""

from .geo import (
    Dms,
    GeoCoordinate,
    decimal_to_dms,
    decimal_to_dms_array,
    decimal_to_dms_string,
    dms_to_decimal,
    dms_to_decimal_array,
)
from .gps import GpsTags
from .rational import Rational

__version__ = "0.1.0"

__all__ = [
    "GeoCoordinate",
    "Dms",
    "decimal_to_dms",
    "decimal_to_dms_string",
    "dms_to_decimal",
    "decimal_to_dms_array",
    "dms_to_decimal_array",
    "GpsTags",
    "Rational",
]
