import pytest
from pydantic import ValidationError

from core.errors import RecordValidationError
from entities import (
    Comment,
    OpaqueEntity,
    Report,
    Team,
    User,
    coerce_entity,
    entity_to_wire,
)


def test_known_collection_gives_typed_variant():
    team = coerce_entity({"id": "t1", "name": "acme", "extra_field": 1}, "Team")

    assert isinstance(team, Team)
    assert team.name == "acme"
    assert entity_to_wire(team) == {"id": "t1", "name": "acme", "extra_field": 1}


def test_missing_fields_are_tolerated():
    report = coerce_entity({"id": "r1"}, "Report")

    assert isinstance(report, Report)
    assert report.team_id is None
    assert entity_to_wire(report) == {"id": "r1"}


def test_badly_typed_fields_do_not_raise():
    user = coerce_entity({"id": "u1", "email_verified": {"nested": True}, "username": "bob"}, "User")

    assert isinstance(user, User)
    assert user.username == "bob"


def test_unknown_collection_is_carried_unchanged():
    record = {"id": "w1", "colour": "red", "created_at": "not a date"}
    widget = coerce_entity(record, "Widget")

    assert isinstance(widget, OpaqueEntity)
    assert entity_to_wire(widget) == record


def test_user_secrets_are_stripped():
    user = coerce_entity(
        {"id": "u1", "username": "bob", "hashed_password": "x", "accessToken": "y", "accounts": []},
        "User",
    )
    assert entity_to_wire(user) == {"id": "u1", "username": "bob"}


def test_mongo_style_id_is_used_when_id_is_absent():
    comment = coerce_entity({"_id": 42, "text": "hi"}, "Comment")

    assert isinstance(comment, Comment)
    assert comment.id == "42"
    assert "_id" not in entity_to_wire(comment)


@pytest.mark.parametrize("record", [None, ["id", "x"], "x", {"name": "no id"}])
def test_malformed_records_are_rejected(record):
    with pytest.raises(RecordValidationError):
        coerce_entity(record, "Team")


def test_entities_are_immutable():
    team = coerce_entity({"id": "t1", "name": "acme"}, "Team")
    with pytest.raises(ValidationError):
        team.name = "other"


def test_timestamps_are_copied_through_unchanged():
    record = {"id": "t1", "name": "acme", "created_at": "2022-01-01T10:00:00.000Z", "updated_at": None}
    team = coerce_entity(record, "Team")

    assert isinstance(team, Team)
    assert entity_to_wire(team) == record


def test_fallback_entities_serialize_without_warnings(recwarn):
    user = coerce_entity({"id": "u1", "email_verified": "sometimes"}, "User")

    assert entity_to_wire(user) == {"id": "u1", "email_verified": "sometimes"}
    assert not [w for w in recwarn if "serializ" in str(w.message).lower()]
