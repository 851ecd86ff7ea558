"""
Typed field reads for snapshot decoding.

Every snapshot field is optional. A missing field quietly takes its
default; a field that is present but has the wrong type or range is
replaced by the default and logged.
"""
import logging
from typing import Any, Mapping, Optional


logger = logging.getLogger(__name__)


def read_bool(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("Snapshot field %r is not a bool (%r), using %r", key, value, default)
    return default


def read_int(
    data: Mapping[str, Any],
    key: str,
    default: int = 0,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """Read an integer field, rejecting bools and out-of-range values."""
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Snapshot field %r is not an int (%r), using %r", key, value, default)
        return default
    if (minimum is not None and value < minimum) or (
        maximum is not None and value > maximum
    ):
        logger.warning("Snapshot field %r is out of range (%r), using %r", key, value, default)
        return default
    return value
