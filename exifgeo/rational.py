"""Rational values as stored in EXIF GPS tags.

GPS latitude, longitude and altitude are recorded in image metadata as
unsigned rationals (a numerator over a denominator). exifgeo only needs one
capability from such a value, conversion to ``float``, so every function
that consumes rationals is typed against :class:`typing.SupportsFloat`.
:class:`Rational` is a minimal concrete implementation; ``fractions.Fraction``
and the rational types of image libraries work equally well.

A zero denominator never raises: it evaluates to NaN, which callers treat as
"value unavailable".
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import SupportsFloat

RationalLike = SupportsFloat


@dataclass(frozen=True)
class Rational:
    """A numerator/denominator pair.

    Attributes:
        numerator (int): Value above the fraction bar.
        denominator (int): Value below the fraction bar; zero is allowed.

    Example:
        >>> float(Rational(30, 1))
        30.0
        >>> math.isnan(float(Rational(1, 0)))
        True
    """

    numerator: int
    denominator: int

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> Rational:
        """Create a Rational from a ``(numerator, denominator)`` pair.

        Raises:
            ValueError: If pair does not hold exactly two values.
        """
        if len(pair) != 2:
            raise ValueError(f"expected (numerator, denominator), got {pair!r}")
        return cls(int(pair[0]), int(pair[1]))

    def __float__(self) -> float:
        if self.denominator == 0:
            return math.nan
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def parse_component(text: str) -> RationalLike:
    """Parse ``"n/d"`` into a Rational, or plain decimal text into a float.

    Raises:
        ValueError: If text is neither form.
    """
    numerator, sep, denominator = text.partition("/")
    if sep:
        return Rational(int(numerator), int(denominator))
    return float(text)


def as_rational(value) -> RationalLike:
    """Coerce a raw tag value into something ``float()`` accepts.

    ``(numerator, denominator)`` tuples and lists become :class:`Rational`;
    anything else is returned unchanged.
    """
    if isinstance(value, (tuple, list)):
        return Rational.from_pair(value)
    return value
