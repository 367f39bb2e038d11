import pytest

from attendance_tracker.core.exceptions import NotFoundError


def test_profile_of_registered_user(user_service, ann):
    user = user_service.get_profile(ann.user.user_id)
    assert user.employee_id == "E100"
    assert user.email == "ann@co.com"


def test_profile_of_unknown_user_is_not_found(user_service):
    with pytest.raises(NotFoundError, match="User not found."):
        user_service.get_profile(42)
