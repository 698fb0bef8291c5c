"""Float-based units stored in their family root unit.

This module provides the UnitFloat class, the foundation for every numeric
unit type in exifgeo. It combines Python's float type with unit safety: the
value is kept in the family root unit (degrees for angles) and operations are
only allowed between units of the same family.

A unit declares PER_ROOT, the number of that unit making up one root unit.
Construction divides by PER_ROOT and conversion multiplies by it, so an
arc-minute value ``m`` is stored as exactly ``m / 60``.

Classes:
    UnitFloat: Base class for all float-based units.

Example:
    >>> class Degree(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     PER_ROOT = 1.0
    ...     SYMBOL = "°"
    ...
    >>> class ArcMinute(Degree):
    ...     PER_ROOT = 60.0
    ...     SYMBOL = "′"
    ...
    >>> half = ArcMinute(30)
    >>> float(half)  # 0.5 (degrees)
    >>> half.to(ArcMinute)  # 30.0
"""
from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for type-safe unit calculations.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        PER_ROOT (ClassVar[float]): Number of this unit in one root unit.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    PER_ROOT: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value in the unit's own scale.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with the value stored in root units.
        """
        return float.__new__(cls, float(value) / cls.PER_ROOT)

    @classmethod
    def from_root(cls, root_value: float) -> UnitFloat:
        """Create instance directly from a value already in root units.

        Args:
            root_value: Value expressed in the family root unit.

        Returns:
            UnitFloat: New instance holding root_value unchanged.
        """
        return float.__new__(cls, root_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.
        """
        self._check_same_root(unit_type)
        return float(self) * unit_type.PER_ROOT

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        self._check_same_root(unit_type)
        return unit_type.from_root(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_root(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_root(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_root(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Multiply unit by scalar value.

        Raises:
            TypeError: If k is not a numeric type.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_root(float(self) * float(k))
        raise TypeError(f"cannot multiply {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide unit by scalar value.

        Raises:
            TypeError: If k is not a numeric type.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_root(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_root(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_root(abs(float(self)))

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Equality comparison between two units of the same family.

        Non-unit operands fall back to the default comparison, so plain
        floats compare by value and None compares unequal.

        Raises:
            TypeError: If units are not from the same family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return value and symbol in the unit's native scale (e.g., "30.0 ′")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return value in native scale with its root equivalent (e.g., "30 ′ (= 0.5 °)")."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} {self.ROOT.SYMBOL})"
