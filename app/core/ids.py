import re
import uuid
from typing import Annotated

from pydantic import BeforeValidator

from app.core.errors import NotFoundError

# dashed 8-4-4-4-12 form only; no braces, urn prefix or bare hex
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_uuid(value) -> bool:
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def parse_uuid(value: str, label: str) -> uuid.UUID:
    """
    Parse an identifier taken from the URL path.

    A malformed identifier can never match a row, so it is reported the
    same way as a missing one.
    """
    if not is_uuid(value):
        raise NotFoundError(f"{label} with id {value} not found")
    return uuid.UUID(value)


def _check_uuid_format(value):
    if isinstance(value, uuid.UUID):
        return value
    if not is_uuid(value):
        raise ValueError("must be a UUID in 8-4-4-4-12 form")
    return value


# request body identifiers: malformed values fail validation (400)
BodyUUID = Annotated[uuid.UUID, BeforeValidator(_check_uuid_format)]
