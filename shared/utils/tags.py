"""Tag parsing helpers used by model validators

Unknown raw values are dropped (lists) or treated as absent (scalars)
with a warning, so one bad string never aborts a computation.
"""

import logging
from enum import Enum
from typing import Any, Iterable, List, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def parse_tag(value: Any, enum_cls: Type[E], field: str) -> Optional[E]:
    """Parse a single raw value into ``enum_cls``

    Args:
        value: raw string, enum member or None
        enum_cls: target enum
        field: field name used in the warning

    Returns:
        enum member, or None when the value is missing or unknown
    """
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {field} value '{value}' ignored")
        return None


def parse_tags(values: Optional[Iterable[Any]], enum_cls: Type[E], field: str) -> List[E]:
    """Parse a list of raw values, dropping unknown entries and duplicates

    Input order is preserved.
    """
    if values is None:
        return []
    if isinstance(values, (str, Enum)):
        values = [values]
    elif not isinstance(values, (list, tuple, set, frozenset)):
        logger.warning(f"Malformed {field} list {values!r} ignored")
        return []

    parsed: List[E] = []
    for raw in values:
        tag = parse_tag(raw, enum_cls, field)
        if tag is not None and tag not in parsed:
            parsed.append(tag)
    return parsed
