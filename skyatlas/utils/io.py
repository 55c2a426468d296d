import logging
import math
from typing import Any, Optional

import numpy as np

log = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if value is None or value is np.ma.masked:
        return True
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    return False


def safe_int(s: Any) -> Optional[int]:
    """
    Safely convert a catalog cell to int, returning None on error.

    Accepts strings as well as the numbers (and NaN) pandas produces.

    Args:
        s: Value to convert

    Returns:
        Integer value or None if conversion fails
    """
    if _is_missing(s):
        return None
    if isinstance(s, (int, np.integer)):
        return int(s)
    if isinstance(s, (float, np.floating)):
        return int(s) if float(s).is_integer() else None
    try:
        return int(s.strip()) if s.strip() else None
    except (ValueError, AttributeError):
        return None


def safe_float(s: Any) -> Optional[float]:
    """
    Safely convert a catalog cell to float, returning None on error.

    NaN and masked values count as missing.

    Args:
        s: Value to convert

    Returns:
        Float value or None if conversion fails
    """
    if _is_missing(s):
        return None
    if isinstance(s, (int, float, np.integer, np.floating)):
        return float(s)
    try:
        value = float(s.strip()) if s.strip() else None
    except (ValueError, AttributeError):
        return None
    return None if value is None or math.isnan(value) else value


def safe_text(s: Any) -> Optional[str]:
    """Stripped string value, or None for missing and blank cells."""
    if _is_missing(s):
        return None
    text = str(s).strip()
    return text or None


def designation_or_none(s: Any) -> Optional[str]:
    """
    Normalize a catalog designation cell.

    Numeric designations lose any trailing ``.0`` pandas adds; zero, blank
    and missing cells mean "no designation".

    Examples:
        224.0 -> "224"
        "3-22" -> "3-22"
        0 -> None
    """
    number = safe_int(s)
    if number is not None:
        return str(number) if number != 0 else None

    text = safe_text(s)
    if text is None or text in ('0', '-'):
        return None
    return text
