"""Response Envelope: shape and exclusivity of success/error wrappers.

Invariants tested:
    - success=True never carries error; success=False never carries data
    - unset keys are omitted from the dumped JSON
    - pydantic models inside data are dumped with camelCase aliases
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.schemas.envelope import ApiResponse, fail, ok
from app.schemas.user import UserResponse


def test_ok_with_data_and_message():
    assert ok([1, 2], "Retrieved 2") == {
        "success": True, "data": [1, 2], "message": "Retrieved 2",
    }


def test_ok_keeps_empty_list_data():
    assert ok([]) == {"success": True, "data": []}


def test_ok_without_data_omits_key():
    assert ok(message="done") == {"success": True, "message": "done"}


def test_fail_has_only_success_and_error():
    assert fail("User not found") == {"success": False, "error": "User not found"}


def test_success_envelope_rejects_error():
    with pytest.raises(ValidationError):
        ApiResponse(success=True, error="boom")


def test_failed_envelope_rejects_data():
    with pytest.raises(ValidationError):
        ApiResponse(success=False, error="boom", data={"id": 1})


def test_failed_envelope_requires_error():
    with pytest.raises(ValidationError):
        ApiResponse(success=False)


def test_models_in_data_use_camel_case_and_utc():
    created = datetime(2026, 1, 2, 3, 4, 5)
    user = UserResponse(
        id=1, name="Alice", email="alice@example.com",
        created_at=created, updated_at=created,
    )
    body = ok(user)
    assert body["data"] == {
        "id": 1,
        "name": "Alice",
        "email": "alice@example.com",
        "createdAt": "2026-01-02T03:04:05+00:00",
        "updatedAt": "2026-01-02T03:04:05+00:00",
    }


def test_aware_timestamps_are_converted_to_utc():
    created = datetime(2026, 1, 2, 5, 0, tzinfo=timezone(timedelta(hours=2)))
    user = UserResponse(
        id=1, name="A", email="a@example.com",
        created_at=created, updated_at=created,
    )
    assert ok(user)["data"]["createdAt"] == "2026-01-02T03:00:00+00:00"
