"""Geographic coordinate value type and conversions.

Components:
    GeoCoordinate: Immutable latitude/longitude/altitude value
    Dms: Degrees, minutes and seconds of an angle
    decimal_to_dms / decimal_to_dms_string: Decimal degrees to DMS
    dms_to_decimal: DMS components (e.g. GPS rationals) to decimal degrees
    decimal_to_dms_array / dms_to_decimal_array: NumPy batch versions

Typical Usage:
    >>> from exifgeo.geo import GeoCoordinate, dms_to_decimal
    >>> from exifgeo.rational import Rational
    >>>
    >>> lat = dms_to_decimal(Rational(37, 1), Rational(33, 1), Rational(5994, 100), False)
    >>> lon = dms_to_decimal(Rational(126, 1), Rational(58, 1), Rational(408, 10), False)
    >>> GeoCoordinate(lat, lon).to_dms_string()
    '37° 33\\' 59.94", 126° 58\\' 40.8"'
"""

from .geo_coordinate import (
    Dms,
    GeoCoordinate,
    decimal_to_dms,
    decimal_to_dms_string,
    dms_to_decimal,
)
from .vectorized import decimal_to_dms_array, dms_to_decimal_array

__all__ = [
    "GeoCoordinate",
    "Dms",
    "decimal_to_dms",
    "decimal_to_dms_string",
    "dms_to_decimal",
    "decimal_to_dms_array",
    "dms_to_decimal_array",
]
