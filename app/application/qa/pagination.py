"""
Pagination extraction for the question list.

Input: raw query parameters.
Output: Pagination.
Failure cases: MissingParameters, ParseError.
"""

import re
from collections.abc import Mapping

from app.domain.qa.entities import Pagination
from app.domain.qa.errors import MissingParameters, ParseError

# Largest unsigned 32-bit value.
MAX_PARAMETER = 2**32 - 1

_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_non_negative(raw: str) -> int:
    if not _DIGITS.fullmatch(raw):
        raise ParseError(ValueError(f"invalid digit in {raw!r}"))
    value = int(raw)
    if value > MAX_PARAMETER:
        raise ParseError(ValueError(f"number too large: {raw}"))
    return value


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """Build a Pagination from the `limit` and `offset` query parameters.

    An empty query means no pagination. Otherwise both parameters are
    required and must be unsigned 32-bit integers written in ASCII digits.

    Example:
        >>> extract_pagination({"limit": "1", "offset": "10"})
        Pagination(limit=1, offset=10)

    Raises:
        MissingParameters: If only one of the parameters is present,
            or neither is but other parameters are.
        ParseError: If a value is not an unsigned 32-bit integer.
    """
    if not params:
        return Pagination()
    if "limit" in params and "offset" in params:
        return Pagination(
            limit=_parse_non_negative(params["limit"]),
            offset=_parse_non_negative(params["offset"]),
        )
    raise MissingParameters()
