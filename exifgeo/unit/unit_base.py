"""Base unit foundation for typed angular quantities.

This module provides the Unit class that every angle unit in exifgeo derives
from. It implements the unit family system using automatic ROOT class
assignment, so that degrees, arc-minutes and arc-seconds can be combined
freely while quantities from an unrelated family are rejected at runtime.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO

Classes:
    Unit: Base class for all unit types with family management.

Example:
    >>> class Degree(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for angle units
    >>> class ArcMinute(Degree):
    ...     pass  # Automatically gets ROOT = Degree
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units should inherit from UnitFloat rather than directly from
    this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT is the first ancestor with IS_FAMILY_ROOT=True, or the class
        itself if none is found.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check that another unit type belongs to the same family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different families, or if
                unit_type is not a unit at all.
        """
        root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not root:
            msg = f"incompatible units: {cls.ROOT.__name__} and {getattr(root, '__name__', unit_type.__name__)}"
            raise TypeError(msg)
