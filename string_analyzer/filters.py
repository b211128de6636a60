"""
Structured filtering of analyzed strings.

A filter set is a plain dict using the keys below. Filters combine with AND
semantics and absent keys impose no constraint.

    is_palindrome       bool   properties.is_palindrome == value
    min_length          int    properties.length >= value
    max_length          int    properties.length <= value
    word_count          int    properties.word_count == value
    contains_character  str    value occurs in record.value (case-sensitive)
"""
import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from string_analyzer.errors import ValidationError
from string_analyzer.models import StringRecord
from string_analyzer.utils import utf16_length

logger = logging.getLogger(__name__)

FilterSet = Dict[str, Any]

PREDICATES: Dict[str, Callable[[StringRecord, Any], bool]] = {
    "is_palindrome": lambda r, v: r.properties.is_palindrome == v,
    "min_length": lambda r, v: r.properties.length >= v,
    "max_length": lambda r, v: r.properties.length <= v,
    "word_count": lambda r, v: r.properties.word_count == v,
    "contains_character": lambda r, v: v in r.value,
}

INTEGER_FILTERS = ("min_length", "max_length", "word_count")

_INTEGER = re.compile(r"[+-]?[0-9]+")

_TRUE = ("true", "1")
_FALSE = ("false", "0")


def _parse_bool(name: str, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValidationError(f"Invalid {name} parameter: must be true or false")


def _parse_int(name: str, raw: str) -> int:
    # ASCII digits only; int() alone also takes "1_000" and full-width digits
    normalized = raw.strip()
    if not _INTEGER.fullmatch(normalized):
        raise ValidationError(f"Invalid {name} parameter: must be a number")
    return int(normalized)


def parse_filter_params(params: Mapping[str, Optional[str]]) -> FilterSet:
    """
    Convert raw query-string values into a typed filter set.

    Unknown keys and keys whose value is None are ignored. Raises
    ValidationError for values that cannot be parsed.
    """
    filters: FilterSet = {}

    raw = params.get("is_palindrome")
    if raw is not None:
        filters["is_palindrome"] = _parse_bool("is_palindrome", raw)

    for name in INTEGER_FILTERS:
        raw = params.get(name)
        if raw is not None:
            filters[name] = _parse_int(name, raw)

    raw = params.get("contains_character")
    if raw is not None:
        if utf16_length(raw) != 1:
            raise ValidationError(
                "Invalid contains_character parameter: must be a single character"
            )
        filters["contains_character"] = raw

    return filters


def apply_filters(
    records: List[StringRecord], filters: Optional[FilterSet] = None
) -> Tuple[List[StringRecord], FilterSet]:
    """
    Keep the records satisfying every recognized filter.

    Returns the surviving records (input order preserved) together with the
    filters that were actually applied.
    """
    applied = {key: value for key, value in (filters or {}).items() if key in PREDICATES}
    if not applied:
        return list(records), applied

    matched = [
        record for record in records
        if all(PREDICATES[key](record, value) for key, value in applied.items())
    ]
    logger.debug(f"Filters {applied} matched {len(matched)} of {len(records)} strings")
    return matched, applied
