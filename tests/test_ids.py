import uuid

import pytest
from pydantic import ValidationError

from app.core.errors import NotFoundError
from app.core.ids import parse_uuid
from app.modules.favorites.schemas import FavoriteCreate

SAMPLE = "6b65b1e7-9adb-4e0d-8f8a-60c547070c9c"


def test_parse_uuid_accepts_canonical_form():
    value = uuid.uuid4()
    assert parse_uuid(str(value), "User") == value


def test_parse_uuid_accepts_uppercase_hex():
    assert parse_uuid(SAMPLE.upper(), "User") == uuid.UUID(SAMPLE)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "123",
        "not-a-uuid",
        "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz",
        SAMPLE.replace("-", ""),
        f"urn:uuid:{SAMPLE}",
        f"{{{SAMPLE}}}",
        f" {SAMPLE}",
    ],
)
def test_parse_uuid_rejects_malformed_values_as_not_found(raw):
    with pytest.raises(NotFoundError) as exc_info:
        parse_uuid(raw, "Media")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == f"Media with id {raw} not found"


@pytest.mark.parametrize("raw", [SAMPLE.replace("-", ""), f"urn:uuid:{SAMPLE}", f"{{{SAMPLE}}}"])
def test_body_uuid_requires_dashed_form(raw):
    with pytest.raises(ValidationError):
        FavoriteCreate.model_validate({"mediaId": raw})


def test_body_uuid_accepts_dashed_form():
    assert FavoriteCreate.model_validate({"mediaId": SAMPLE}).media_id == uuid.UUID(SAMPLE)
