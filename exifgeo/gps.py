"""Assemble a GeoCoordinate from GPS tag values.

Image metadata readers hand back the GPS directory as a mapping of tag name
to raw value: degree/minute/second rationals for each axis, a hemisphere
reference letter, and optionally an altitude with an above/below sea level
flag. :class:`GpsTags` holds those values and turns them into a
:class:`~exifgeo.geo.GeoCoordinate`.

Reading the binary metadata is left to the caller's library of choice; any
mapping keyed by the standard tag names works, e.g. Pillow's
``{ExifTags.GPSTAGS[k]: v for k, v in gps_ifd.items()}``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, SupportsFloat

from .geo import GeoCoordinate, dms_to_decimal
from .log import get_logger
from .rational import as_rational

logger = get_logger(__name__)

LATITUDE = "GPSLatitude"
LATITUDE_REF = "GPSLatitudeRef"
LONGITUDE = "GPSLongitude"
LONGITUDE_REF = "GPSLongitudeRef"
ALTITUDE = "GPSAltitude"
ALTITUDE_REF = "GPSAltitudeRef"

# GPSAltitudeRef value meaning the altitude is below sea level.
BELOW_SEA_LEVEL = 1


def _decode_ref(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    return str(value).strip("\x00 ").upper() or None


def _decode_altitude_ref(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value[0] if value else None
    return int(value)


def _triple(value: Any) -> Optional[tuple[SupportsFloat, ...]]:
    if value is None:
        return None
    return tuple(as_rational(v) for v in value)


@dataclass(frozen=True)
class GpsTags:
    """Raw GPS tag values for one image.

    Attributes:
        latitude: Degrees, minutes and seconds of latitude.
        latitude_ref: "N" or "S".
        longitude: Degrees, minutes and seconds of longitude.
        longitude_ref: "E" or "W".
        altitude: Altitude magnitude in meters.
        altitude_ref: 0 above sea level, 1 below.
    """

    latitude: Optional[Sequence[SupportsFloat]] = None
    latitude_ref: Optional[str] = None
    longitude: Optional[Sequence[SupportsFloat]] = None
    longitude_ref: Optional[str] = None
    altitude: Optional[SupportsFloat] = None
    altitude_ref: Optional[int] = None

    @classmethod
    def from_mapping(cls, tags: Mapping[str, Any]) -> GpsTags:
        """Read the GPS tags out of a mapping keyed by EXIF tag name.

        Rationals may be given as ``(numerator, denominator)`` pairs; reference
        tags may be bytes.
        """
        altitude = tags.get(ALTITUDE)
        return cls(
            latitude=_triple(tags.get(LATITUDE)),
            latitude_ref=_decode_ref(tags.get(LATITUDE_REF)),
            longitude=_triple(tags.get(LONGITUDE)),
            longitude_ref=_decode_ref(tags.get(LONGITUDE_REF)),
            altitude=None if altitude is None else as_rational(altitude),
            altitude_ref=_decode_altitude_ref(tags.get(ALTITUDE_REF)),
        )

    def _axis(self, dms, ref, negative_ref: str) -> Optional[float]:
        if dms is None or ref is None or len(dms) != 3:
            return None
        return dms_to_decimal(dms[0], dms[1], dms[2], ref.upper() == negative_ref)

    def altitude_meters(self) -> Optional[float]:
        """Signed altitude in meters, None when absent or not a number."""
        if self.altitude is None:
            return None
        value = float(self.altitude)
        if math.isnan(value):
            return None
        if self.altitude_ref == BELOW_SEA_LEVEL:
            value = -value
        return value

    def to_geo_coordinate(self) -> Optional[GeoCoordinate]:
        """Build the coordinate these tags describe.

        Returns:
            Optional[GeoCoordinate]: None when latitude or longitude is
            missing, malformed or does not form a number.
        """
        latitude = self._axis(self.latitude, self.latitude_ref, "S")
        longitude = self._axis(self.longitude, self.longitude_ref, "W")
        if latitude is None or longitude is None:
            logger.debug("GPS tags do not describe a position: %s", self)
            return None
        return GeoCoordinate(latitude, longitude, self.altitude_meters())
