import pytest

from booking_backend.models.availability import Availability
from booking_backend.models.pricing import Pricing
from booking_backend.models.user_profile import UserProfile


@pytest.mark.parametrize('model', [UserProfile, Availability, Pricing])
def test_user_references_are_plain_identifiers(model) -> None:
    assert not model.__table__.foreign_keys


def test_user_profile_can_point_at_missing_records(db) -> None:
    profile = UserProfile(user_id=41, availability_id=999, pricing_id=998)
    db.add(profile)
    db.commit()

    stored = db.query(UserProfile).one()
    assert (stored.user_id, stored.availability_id, stored.pricing_id) == (41, 999, 998)
