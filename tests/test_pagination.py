"""
Tests for query-parameter pagination.
"""

import pytest

from app.application.qa.pagination import extract_pagination
from app.domain.qa.entities import Pagination
from app.domain.qa.errors import MissingParameters, ParseError


class TestExtractPagination:
    """Tests for extract_pagination."""

    def test_valid_pagination(self) -> None:
        assert extract_pagination({"limit": "1", "offset": "10"}) == Pagination(limit=1, offset=10)

    def test_empty_query_returns_everything(self) -> None:
        assert extract_pagination({}) == Pagination(limit=None, offset=0)

    def test_missing_offset_parameter(self) -> None:
        with pytest.raises(MissingParameters) as exc_info:
            extract_pagination({"limit": "1"})
        assert str(exc_info.value) == "Missing parameter"

    def test_missing_limit_parameter(self) -> None:
        with pytest.raises(MissingParameters):
            extract_pagination({"offset": "1"})

    def test_unrelated_parameters_only(self) -> None:
        with pytest.raises(MissingParameters):
            extract_pagination({"page": "2"})

    def test_wrong_offset_type(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            extract_pagination({"limit": "1", "offset": "NOT_A_NUMBER"})
        assert isinstance(exc_info.value.source, ValueError)

    def test_negative_limit(self) -> None:
        with pytest.raises(ParseError):
            extract_pagination({"limit": "-1", "offset": "0"})

    def test_explicit_plus_sign(self) -> None:
        assert extract_pagination({"limit": "+5", "offset": "0"}) == Pagination(limit=5, offset=0)

    def test_upper_bound_accepted(self) -> None:
        pagination = extract_pagination({"limit": "4294967295", "offset": "0"})
        assert pagination.limit == 4294967295

    @pytest.mark.parametrize(
        "raw",
        [" 5", "5 ", "1_0", "٥", "", "4294967296", "99999999999999999999999", "5\n"],
    )
    def test_rejected_values(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            extract_pagination({"limit": raw, "offset": "0"})
        assert str(exc_info.value) == "Cannot parse parameter"
