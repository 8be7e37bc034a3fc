import pytest

from src.ticketing.ticketing.core.enums import Gender
from src.ticketing.ticketing.users.mapper import UserMapper
from src.ticketing.ticketing.users.model import Role, User, UserPayload, deleted_username


def test_mark_deleted_sets_flag_and_suffixes_id():
    user = User(user_id=12, first_name="A", last_name="B", user_name="ann", password_hash="h", role=Role(2, "Manager"))

    deleted = user.mark_deleted()

    assert deleted.is_deleted is True
    assert deleted.user_name == "ann-12"
    assert deleted.user_id == 12
    assert user.is_deleted is False


def test_mark_deleted_requires_persisted_user():
    user = User(user_id=None, first_name="A", last_name="B", user_name="ann", password_hash="h", role=Role(2, "Manager"))

    with pytest.raises(ValueError):
        user.mark_deleted()


def test_deleted_username_format():
    assert deleted_username("bob@site.com", 3) == "bob@site.com-3"


def test_mapper_never_exposes_hash():
    user = User(
        user_id=1,
        first_name="A",
        last_name="B",
        user_name="ann",
        password_hash="secret-hash",
        role=Role(1, "Admin"),
        phone="555",
        gender=Gender.FEMALE,
        enabled=True,
    )

    payload = UserMapper().to_payload(user)

    assert payload.password is None
    assert payload.phone == "555"
    assert payload.gender is Gender.FEMALE
    assert "secret-hash" not in repr(payload)


def test_mapper_to_entity_uses_given_hash():
    payload = UserPayload(first_name="A", last_name="B", user_name="ann", role=Role(1, "Admin"), password="raw")

    entity = UserMapper().to_entity(payload, password_hash="hashed")

    assert entity.password_hash == "hashed"
    assert entity.is_deleted is False
    assert entity.version == 0
