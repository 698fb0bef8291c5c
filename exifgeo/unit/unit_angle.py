"""Angular unit definitions for geographic coordinates.

Angles are stored in degrees, the root unit of the family, because that is
the scale geographic coordinates are exchanged in. Arc-minutes and
arc-seconds are sexagesimal subdivisions of a degree and are the units the
DMS (degrees-minutes-seconds) notation is built from.

Classes:
    Degree: Root angular unit.
    ArcMinute: 1/60 of a degree.
    ArcSecond: 1/3600 of a degree.

Type Aliases:
    Angle: Union type for all angular units.

Example:
    >>> total = Degree(10) + ArcMinute(30) + ArcSecond(0)
    >>> float(total)
    10.5
    >>> Degree(0.25).to(ArcMinute)
    15.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Degree(UnitFloat):
    """Angular unit: Degree (root of the angle family).

    Attributes:
        IS_FAMILY_ROOT (bool): True, degrees are the root angle unit.
        PER_ROOT (float): 1.0, no conversion needed.
        SYMBOL (str): "°".

    Example:
        >>> latitude = Degree(37.5665)
        >>> print(latitude)  # "37.5665 °"
    """

    IS_FAMILY_ROOT = True
    PER_ROOT = 1.0
    SYMBOL = "°"


class ArcMinute(Degree):
    """Angular unit: minute of arc (sixty to the degree)."""

    PER_ROOT = 60.0
    SYMBOL = "′"


class ArcSecond(Degree):
    """Angular unit: second of arc (sixty to the minute).

    Example:
        >>> print(ArcSecond(4.56))  # "4.56 ″"
        >>> ArcSecond(3600).to(Degree)  # 1.0
    """

    PER_ROOT = 3600.0
    SYMBOL = "″"


Angle = Degree | ArcMinute | ArcSecond  # Type alias for any angle unit
