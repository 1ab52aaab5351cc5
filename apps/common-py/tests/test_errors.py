"""Tests for the user store error hierarchy."""

import pytest
from user_common.errors import DuplicateEmailError, InvalidInputError, UserNotFoundError, UserStoreError


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (InvalidInputError("Invalid payload"), 400, "Invalid payload"),
        (DuplicateEmailError(), 400, "Email already registered"),
        (UserNotFoundError(), 404, "User not found"),
    ],
)
def test_errors_carry_status_and_envelope(error: UserStoreError, status: int, message: str) -> None:
    assert isinstance(error, UserStoreError)
    assert error.http_status == status
    assert error.to_response() == {"message": message, "data": None}
