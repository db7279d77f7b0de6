import math
from typing import Any


# ============================================================================
# Numeric Normalizer
# ============================================================================

DEFAULT_PRECISION = 3

# Floats at or above this magnitude have no fractional part
_EXACT_LIMIT = 2.0**52


def round_number(value: float, precision: int = DEFAULT_PRECISION) -> Any:
    """
    Round a float half-up to ``precision`` decimal places.

    Results without a fractional part are returned as ``int`` so they
    serialize without a trailing ``.0``. Non-finite values, and values too
    large to carry a fraction at this precision, are returned unchanged.
    """
    factor = 10**precision
    scaled = value * factor
    if not math.isfinite(scaled) or abs(scaled) >= _EXACT_LIMIT:
        return value

    rounded = math.floor(scaled + 0.5) / factor
    if rounded.is_integer():
        return int(rounded)
    return rounded


def normalize(value: Any, precision: int = DEFAULT_PRECISION) -> Any:
    """
    Recursively round every float in a document tree.

    Integers are already exact and booleans are not treated as numbers.
    Lists and mappings are rebuilt with the same shape.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return round_number(value, precision)
    if isinstance(value, list):
        return [normalize(item, precision) for item in value]
    if isinstance(value, dict):
        return {key: normalize(item, precision) for key, item in value.items()}
    return value
