"""Global configuration and type definitions for exifgeo.

This module centralizes the constants shared across the package: the numeric
input type accepted by the array helpers, the precision used when rendering
DMS seconds, and the environment variable controlling log verbosity.

Type Definitions:
    BASE_TYPE: Union type of acceptable numeric inputs. Supports Python
               native types (int, float) and NumPy arrays for batch
               conversion of many coordinates at once.

Example:
    >>> from exifgeo.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 37.5665
    >>> batch: BASE_TYPE = np.array([37.5665, -33.8688])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

# Seconds in "D° M' S\"" text are rounded to this many decimal places.
DMS_SECONDS_DECIMALS = 2

LOG_LEVEL_ENV = "EXIFGEO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
