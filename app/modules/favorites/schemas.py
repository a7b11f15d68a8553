import uuid

from app.core.ids import BodyUUID
from app.schemas.base import BaseSchema, UpdateSchema
from app.modules.media.schemas import MediaRead
from app.modules.users.schemas import UserRead

class FavoriteCreate(BaseSchema):
    media_id: BodyUUID

class FavoriteUpdate(UpdateSchema):
    user_id: BodyUUID | None = None
    media_id: BodyUUID | None = None

class FavoriteRead(BaseSchema):
    id: uuid.UUID
    user_id: uuid.UUID
    media_id: uuid.UUID
    user: UserRead | None = None
    media: MediaRead | None = None
