"""API helper functions for routes."""

import logging
import math
import re
from typing import Optional, Set

from faculty_api.exceptions import InvalidQueryParameterError
from faculty_api.schemas.teacher import TeacherRelation

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_param(raw: Optional[str], default: int, name: str) -> int:
    """Parse an integer query parameter leniently.

    Reads the leading integer of the value, so ``"3abc"`` is 3. Missing,
    unparseable and zero values fall back to ``default``.

    Args:
        raw: Raw query string value, or None when absent.
        default: Value used when ``raw`` does not carry a usable integer.
        name: Parameter name for error reporting.

    Returns:
        Parsed positive integer or ``default``.

    Raises:
        InvalidQueryParameterError: If the value is negative.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    if value == 0:
        return default
    if value < 0:
        raise InvalidQueryParameterError(name, raw, "must be a positive integer")
    return value


def parse_populate(raw: Optional[str]) -> Set[TeacherRelation]:
    """Parse a comma-separated ``populate`` value into known relations.

    Tokens are matched case-insensitively. Unknown tokens are ignored.

    Args:
        raw: Raw query string value, or None when absent.

    Returns:
        Set of relations to eager-load.
    """
    relations: Set[TeacherRelation] = set()
    if not raw:
        return relations
    for token in raw.lower().split(","):
        token = token.strip()
        try:
            relations.add(TeacherRelation(token))
        except ValueError:
            logger.debug("Ignoring unknown populate token", extra={"token": token})
    return relations


def get_pagination_meta(page: int, limit: int, total: int) -> dict:
    """Calculate pagination metadata.

    Args:
        page: Requested page number (1-indexed), reported back as given.
        limit: Items per page.
        total: Total number of items.

    Returns:
        Dictionary with ``total``, ``page`` and ``total_pages``.
    """
    return {
        "total": total,
        "page": page,
        "total_pages": math.ceil(total / limit),
    }
