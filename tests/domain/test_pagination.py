"""Tests for the pagination primitives."""

import pytest

from tradersbloc.domain.errors import BadRequest
from tradersbloc.domain.pagination import PageRequest, build_page, count_pages


@pytest.mark.parametrize(
    ("total", "limit", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5)],
)
def test_count_pages_rounds_up(total, limit, expected):
    assert count_pages(total, limit) == expected


def test_page_request_offset():
    assert PageRequest(page=3, limit=20).offset == 40


@pytest.mark.parametrize(
    "kwargs",
    [{"page": 0}, {"limit": 0}, {"sort_order": "sideways"}],
)
def test_page_request_rejects_invalid_values(kwargs):
    with pytest.raises(BadRequest):
        PageRequest(**kwargs)


def test_build_page_reports_metadata():
    page = build_page(["a", "b"], total=12, request=PageRequest(page=2, limit=5))

    assert page.data == ["a", "b"]
    assert page.metadata.total == 12
    assert page.metadata.page == 2
    assert page.metadata.limit == 5
    assert page.metadata.total_pages == 3
