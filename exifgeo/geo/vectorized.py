"""Array versions of the DMS conversions.

These helpers apply the same truncation rules as
:func:`exifgeo.geo.decimal_to_dms` and :func:`exifgeo.geo.dms_to_decimal`
element-wise, for converting whole columns of coordinates at once. Arrays
cannot hold an absent value, so a DMS combination that does not form a
number stays NaN in the output.
"""

from __future__ import annotations

import numpy as np

from ..config import BASE_TYPE


def decimal_to_dms_array(values: BASE_TYPE) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split decimal degree angles into degree, minute and second arrays.

    Args:
        values: Scalar or array of angles in decimal degrees.

    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: Integer degrees (signed),
        integer minutes and float seconds, each shaped like ``values``.

    Example:
        >>> d, m, s = decimal_to_dms_array([10.5, -1.25])
        >>> d.tolist(), m.tolist(), s.tolist()
        ([10, -1], [30, 15], [0.0, 0.0])
    """
    values = np.asarray(values, dtype=np.float64)
    degrees = np.trunc(values).astype(np.int64)
    minutes = np.abs(np.fmod(values, 1.0)) * 60.0
    seconds = np.fmod(minutes, 1.0) * 60.0
    return degrees, np.trunc(minutes).astype(np.int64), seconds


def dms_to_decimal_array(
    degrees: BASE_TYPE,
    minutes: BASE_TYPE,
    seconds: BASE_TYPE,
    is_negative=False,
) -> np.ndarray:
    """Combine degree, minute and second arrays into decimal degrees.

    ``is_negative`` may be a single flag or a boolean array broadcast against
    the components.
    """
    degrees = np.asarray(degrees, dtype=np.float64)
    minutes = np.asarray(minutes, dtype=np.float64)
    seconds = np.asarray(seconds, dtype=np.float64)
    value = np.abs(degrees) + minutes / 60.0 + seconds / 3600.0
    return np.where(np.asarray(is_negative, dtype=bool), -value, value)
