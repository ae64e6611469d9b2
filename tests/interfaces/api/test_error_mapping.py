"""Tests for the mapping between domain errors and HTTP status codes."""

import pytest

from tradersbloc.domain.errors import (
    BadRequest,
    Conflict,
    Forbidden,
    Internal,
    NotFound,
    Unauthenticated,
)
from tradersbloc.interfaces.api.errors import status_code_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (Unauthenticated(), 401),
        (Forbidden(), 403),
        (NotFound(), 404),
        (Conflict(), 409),
        (BadRequest(), 400),
        (Internal(), 500),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_errors_fall_back_to_their_default_message():
    assert NotFound().message == "Record not found"
    assert NotFound("Invoice not found").message == "Invoice not found"
