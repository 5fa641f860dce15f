from types import SimpleNamespace

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import OperationalError

from app.models.guest import Guest
from app.models.guest_category import GuestCategory
from app.models.user import User
from app.models.wedding import Wedding
from app.schemas.wedding import WeddingCreate, WeddingUpdate
from app.services.wedding_service import (
    WeddingNotFoundError,
    WeddingService,
    StoreError,
    build_rsvp_code,
    response_rate,
)


@pytest.mark.parametrize(
    "confirmed, pending, declined, expected",
    [
        (0, 0, 0, 0),
        (0, 5, 0, 0),
        (3, 5, 2, 50),
        (10, 0, 0, 100),
        (0, 0, 4, 100),
        (1, 2, 0, 33),
        (2, 1, 0, 67),
        (1, 7, 0, 13),  # 12.5 rounds half up
    ],
)
def test_response_rate(confirmed, pending, declined, expected):
    assert response_rate(confirmed, pending, declined) == expected


def test_build_rsvp_code_strips_whitespace_and_case():
    assert build_rsvp_code("Mary Ann", " Jean  Luc", 2026) == "maryann-jeanluc-2026"


def _wedding_data(**overrides):
    data = dict(
        bride_name="Sarah",
        groom_name="Michael",
        wedding_date="2025-06-01T00:00:00",
        venue="Rosewood Gardens",
    )
    data.update(overrides)
    return WeddingCreate(**data)


def test_create_wedding_generates_code_and_seeds_categories(db_session, make_user):
    user = make_user()

    wedding = WeddingService(db_session).create_wedding(_wedding_data(), user.id)

    assert wedding.rsvp_code == "sarah-michael-2025"
    assert wedding.status == "active"
    categories = (
        db_session.query(GuestCategory)
        .filter(GuestCategory.wedding_id == wedding.id)
        .order_by(GuestCategory.id)
        .all()
    )
    assert [(c.name, c.color) for c in categories] == [
        ("Wedding Party", "#9333EA"),
        ("Family", "#DC2626"),
        ("Friends", "#2563EB"),
        ("Colleagues", "#059669"),
    ]


def test_identical_couples_get_distinct_codes(db_session, make_user):
    service = WeddingService(db_session)
    first = service.create_wedding(_wedding_data(), make_user("alice").id)
    second = service.create_wedding(_wedding_data(), make_user("bob").id)
    third = service.create_wedding(_wedding_data(), make_user("carol").id)

    assert first.rsvp_code == "sarah-michael-2025"
    assert second.rsvp_code == "sarah-michael-2025-2"
    assert third.rsvp_code == "sarah-michael-2025-3"


def test_get_wedding_hides_other_users_weddings(db_session, make_user):
    service = WeddingService(db_session)
    wedding = service.create_wedding(_wedding_data(), make_user("alice").id)
    bob = make_user("bob")

    with pytest.raises(WeddingNotFoundError):
        service.get_wedding(wedding.id, bob.id)
    with pytest.raises(WeddingNotFoundError):
        service.get_wedding(wedding.id + 100, bob.id)


def test_update_wedding_keeps_rsvp_code(db_session, make_user):
    user = make_user()
    service = WeddingService(db_session)
    wedding = service.create_wedding(_wedding_data(), user.id)

    updated = service.update_wedding(
        wedding.id, user.id, WeddingUpdate(bride_name="Sara", status="completed")
    )

    assert updated.bride_name == "Sara"
    assert updated.status == "completed"
    assert updated.rsvp_code == "sarah-michael-2025"


def test_wedding_stats_counts_by_status(db_session, make_user):
    user = make_user()
    service = WeddingService(db_session)
    wedding = service.create_wedding(_wedding_data(), user.id)
    for status in ["confirmed", "confirmed", "confirmed", "declined", "declined"] + [
        "pending"
    ] * 5:
        db_session.add(
            Guest(
                wedding_id=wedding.id,
                first_name="G",
                last_name="H",
                phone="1",
                rsvp_status=status,
            )
        )
    db_session.commit()

    stats = service.get_wedding_stats(wedding.id, user.id)

    assert stats == {
        "total_guests": 10,
        "confirmed": 3,
        "pending": 5,
        "declined": 2,
        "response_rate": 50,
    }


def test_failed_commit_rolls_back_wedding_and_categories(
    db_session, make_user, monkeypatch
):
    user = make_user()
    service = WeddingService(db_session)

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(StoreError):
        service.create_wedding(_wedding_data(), user.id)

    assert db_session.query(Wedding).count() == 0
    assert db_session.query(GuestCategory).count() == 0


@pytest.mark.parametrize(
    "field", ["bride_name", "groom_name", "wedding_date", "venue", "status"]
)
def test_wedding_update_rejects_null_required_fields(field):
    with pytest.raises(PydanticValidationError):
        WeddingUpdate(**{field: None})


def test_wedding_update_allows_clearing_optional_fields():
    update = WeddingUpdate(description=None, venue_address=None)

    assert update.model_dump(exclude_unset=True) == {
        "description": None,
        "venue_address": None,
    }


def test_wedding_update_rejects_blank_names():
    with pytest.raises(PydanticValidationError):
        WeddingUpdate(bride_name="   ")


def test_create_from_supabase_returns_row_created_concurrently(db_session, make_user):
    existing = make_user("alice")
    supabase_user = SimpleNamespace(
        id="alice", email="alice@example.com", user_metadata={}
    )

    user = User.create_from_supabase(supabase_user, db_session)

    assert user.id == existing.id
    assert db_session.query(User).count() == 1
