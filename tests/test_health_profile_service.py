"""Tests for health profile upserts, lookups and BMI."""
from datetime import date
import pytest
from database import models
from database.repositories import HealthProfileRepository
from schemas.health_profile_schema import HealthProfileRequest
from services.health_profile_service import health_profile_service
from services.nutrition_calculator import nutrition_calculator


def test_bmi_matches_formula():
    assert nutrition_calculator.calculate_bmi(180, 81) == pytest.approx(81 / (1.8 ** 2))
    assert nutrition_calculator.calculate_bmi(160.5, 55.2) == pytest.approx(55.2 / (1.605 ** 2))


@pytest.mark.parametrize("height, weight", [(0, 70), (-170, 70), (None, 70), (170, None), (None, None)])
def test_bmi_absent_for_missing_or_invalid_inputs(height, weight):
    assert nutrition_calculator.calculate_bmi(height, weight) is None


def test_create_profile_computes_bmi(db):
    req = HealthProfileRequest(user_id="alice", age=31, gender="female", height=165, weight=60)
    res = health_profile_service.create_or_update(db, req)
    assert res.id is not None
    assert res.user_id == "alice"
    assert res.bmi == pytest.approx(60 / (1.65 ** 2))
    assert res.created_at == date.today()
    assert res.updated_at >= res.created_at


def test_upsert_same_user_keeps_single_row_and_id(db):
    first = health_profile_service.create_or_update(
        db, HealthProfileRequest(user_id="bob", age=40, height=180, weight=90, health_goal="weight_loss")
    )
    second = health_profile_service.create_or_update(
        db, HealthProfileRequest(user_id="bob", age=41, weight=85, allergies="peanuts")
    )

    assert second.id == first.id
    assert second.created_at == first.created_at
    assert second.age == 41
    assert second.weight == 85
    assert second.allergies == "peanuts"
    # full replace: fields left out of the second payload are cleared
    assert second.height is None
    assert second.health_goal is None
    assert second.bmi is None

    assert db.query(models.HealthProfile).filter_by(user_id="bob").count() == 1


def test_get_by_user_id(db):
    health_profile_service.create_or_update(db, HealthProfileRequest(user_id="carol", height=170, weight=68))
    res = health_profile_service.get_by_user_id(db, "carol")
    assert res is not None
    assert res.bmi == pytest.approx(68 / (1.7 ** 2))
    assert health_profile_service.get_by_user_id(db, "nobody") is None


def test_list_all_and_delete_by_id(db):
    a = health_profile_service.create_or_update(db, HealthProfileRequest(user_id="u1", height=150, weight=50))
    health_profile_service.create_or_update(db, HealthProfileRequest(user_id="u2"))

    profiles = health_profile_service.list_all(db)
    assert {p.user_id for p in profiles} == {"u1", "u2"}
    assert {p.user_id: p.bmi for p in profiles}["u2"] is None

    health_profile_service.delete_by_id(db, a.id)
    health_profile_service.delete_by_id(db, a.id)
    assert [p.user_id for p in health_profile_service.list_all(db)] == ["u2"]


def test_read_then_write_fallback_upserts(db):
    """The non ON CONFLICT path keeps id and created_at too."""
    repo = HealthProfileRepository(db)
    first = repo._upsert_read_then_write(
        {"user_id": "dave", "age": 20, "created_at": date(2024, 1, 1), "updated_at": date(2024, 1, 1)}
    )
    first_id = first.id
    second = repo._upsert_read_then_write(
        {"user_id": "dave", "age": 21, "created_at": date(2024, 6, 1), "updated_at": date(2024, 6, 1)}
    )
    assert second.id == first_id
    assert second.age == 21
    assert second.created_at == date(2024, 1, 1)
    assert second.updated_at == date(2024, 6, 1)
    assert repo.count() == 1


def test_new_health_record_defaults_dates(db):
    record = models.new_health_record("erin", weight=70.5, heart_rate=62)
    db.add(record)
    db.commit()
    db.refresh(record)
    assert record.id is not None
    assert record.record_date == date.today()
    assert record.created_at == date.today()

    dated = models.new_health_record("erin", record_date=date(2024, 3, 2))
    assert dated.record_date == date(2024, 3, 2)
