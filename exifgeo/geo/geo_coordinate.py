"""Geographic coordinate value type and DMS conversions.

A :class:`GeoCoordinate` is a position on Earth given as latitude and
longitude in decimal degrees, with an optional altitude in meters. It is an
immutable value: two coordinates are equal when all three fields are equal,
and an absent altitude is distinct from an altitude of zero meters.

The module level functions convert between decimal degrees and the
degrees-minutes-seconds notation used for display and in image GPS metadata:

    >>> decimal_to_dms(-1.3846)
    Dms(degrees=-1, minutes=23, seconds=4.56...)
    >>> decimal_to_dms_string(-1.3846)
    '-1° 23\\' 4.56"'
    >>> dms_to_decimal(Rational(10, 1), Rational(30, 1), Rational(0, 1), True)
    -10.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, SupportsFloat

from ..config import DMS_SECONDS_DECIMALS
from ..log import get_logger
from ..unit import ArcMinute, ArcSecond, Degree

logger = get_logger(__name__)


class Dms(NamedTuple):
    """An angle split into degrees, minutes and seconds.

    Only ``degrees`` carries the sign of the angle; ``minutes`` and
    ``seconds`` are magnitudes.
    """

    degrees: int
    minutes: int
    seconds: float


def decimal_to_dms(value: float) -> Dms:
    """Split a decimal degree angle into its DMS components.

    Degrees and minutes are truncated toward zero, never rounded. Seconds keep
    their fractional part.

    Args:
        value (float): Angle in decimal degrees.

    Returns:
        Dms: The ``(degrees, minutes, seconds)`` triple.
    """
    fraction = Degree(math.fmod(value, 1))
    minutes = abs(fraction).to(ArcMinute)
    seconds = math.fmod(minutes, 1) * 60
    return Dms(int(value), int(minutes), seconds)


def _format_seconds(seconds: float) -> str:
    text = f"{seconds:.{DMS_SECONDS_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def decimal_to_dms_string(value: float) -> str:
    """Format a decimal degree angle as ``D° M' S"``.

    Seconds are rounded to two decimal places with trailing zeros removed.
    A negative angle smaller than one degree keeps its sign as ``-0°``,
    unless it renders as all zeros.

    Example:
        >>> decimal_to_dms_string(0.0)
        '0° 0\\' 0"'
        >>> decimal_to_dms_string(-0.5)
        '-0° 30\\' 0"'
        >>> decimal_to_dms_string(-1e-9)
        '0° 0\\' 0"'
    """
    dms = decimal_to_dms(value)
    seconds = _format_seconds(dms.seconds)
    negative_zero = dms.degrees == 0 and value < 0 and (dms.minutes or seconds != "0")
    sign = "-" if negative_zero else ""
    return f"{sign}{dms.degrees}° {dms.minutes}' {seconds}\""


def dms_to_decimal(
    degrees: SupportsFloat,
    minutes: SupportsFloat,
    seconds: SupportsFloat,
    is_negative: bool,
) -> Optional[float]:
    """Combine DMS components, as stored in GPS metadata, into decimal degrees.

    The magnitude ``|degrees| + minutes / 60 + seconds / 3600`` is computed
    first, then negated once when ``is_negative`` is set (south latitude or
    west longitude).

    Args:
        degrees: Whole or fractional degrees; anything ``float()`` accepts.
        minutes: Minutes of arc.
        seconds: Seconds of arc.
        is_negative (bool): Whether the angle lies in the southern or western
            hemisphere.

    Returns:
        Optional[float]: The angle in decimal degrees, or None when the
        components do not form a number (e.g. a rational with a zero
        denominator).
    """
    value = abs(Degree(float(degrees))) + ArcMinute(float(minutes)) + ArcSecond(float(seconds))
    if math.isnan(value):
        logger.debug(
            "DMS components %s, %s, %s do not form a number", degrees, minutes, seconds
        )
        return None
    if is_negative:
        value = -value
    return float(value)


def _format_number(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


# Stands in for NaN in equality keys, so every NaN matches every other NaN.
_NAN_KEY = ("nan",)


def _field_key(value: Optional[float]):
    if value is not None and math.isnan(value):
        return _NAN_KEY
    return value


@dataclass(frozen=True, eq=False)
class GeoCoordinate:
    """A latitude/longitude pair giving a position on Earth, with optional altitude.

    Values are stored exactly as given. No range check is applied to
    latitude or longitude, so unusual source metadata is preserved rather
    than rejected.

    Attributes:
        latitude (float): Latitude in degrees, positive north.
        longitude (float): Longitude in degrees, positive east.
        altitude (Optional[float]): Altitude in meters, None when the source
            data has none.

    Example:
        >>> here = GeoCoordinate(1.23, 4.56, 8)
        >>> str(here)
        '1.23, 4.56, 8M'
        >>> here == GeoCoordinate(1.23, 4.56)
        False
    """

    latitude: float
    longitude: float
    altitude: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))
        if self.altitude is not None:
            object.__setattr__(self, "altitude", float(self.altitude))

    def _key(self) -> tuple:
        return (_field_key(self.latitude), _field_key(self.longitude), _field_key(self.altitude))

    def __eq__(self, other: object) -> bool:
        """Field-wise exact equality; NaN equals NaN and None only equals None."""
        if not isinstance(other, GeoCoordinate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def is_origin(self) -> bool:
        """True if both latitude and longitude are zero, whatever the altitude."""
        return self.latitude == 0 and self.longitude == 0

    def to_dms_string(self) -> str:
        """Return the position as ``-1° 23' 4.56", 54° 32' 1.92"``; altitude is omitted."""
        return f"{decimal_to_dms_string(self.latitude)}, {decimal_to_dms_string(self.longitude)}"

    def __str__(self) -> str:
        text = f"{_format_number(self.latitude)}, {_format_number(self.longitude)}"
        if self.altitude is not None:
            text += f", {_format_number(self.altitude)}M"
        return text
