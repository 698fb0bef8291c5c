"""Typed angle units for degrees-minutes-seconds arithmetic.

This package provides a small type-safe unit system in which the
degrees-minutes-seconds conversions of exifgeo are expressed. Every value is
stored in degrees (the family root), and the sexagesimal subdivisions convert
to and from it by an exact division or multiplication.

Architecture:
    - unit_base: Foundation Unit class with family management system
    - unit_float: Float-based units stored in their family root unit
    - unit_angle: Angular units (Degree, ArcMinute, ArcSecond)

Example:
    >>> from exifgeo.unit import ArcMinute, ArcSecond, Degree
    >>>
    >>> angle = Degree(1) + ArcMinute(23) + ArcSecond(4.56)
    >>> float(angle)  # ~1.3846
    >>> angle.to(ArcSecond)  # ~4984.56
"""

from .unit_angle import Angle, ArcMinute, ArcSecond, Degree
from .unit_base import Unit
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Degree",
    "ArcMinute",
    "ArcSecond",
    "Angle",
]
