import uuid

from sqlalchemy.orm import Session
from loguru import logger

from app.core.db import translate_db_errors
from app.core.errors import NotFoundError
from app.core.ids import parse_uuid
from app.modules.media.models import Media
from app.modules.users.models import User
from app.schemas.base import apply_update

from .models import Favorite
from .schemas import FavoriteCreate, FavoriteUpdate


# ---------- REFERENCE CHECKS ----------

def _require_user(db: Session, user_id: uuid.UUID) -> None:
    if db.get(User, user_id) is None:
        raise NotFoundError(f"User with id {user_id} not found")


def _require_media(db: Session, media_id: uuid.UUID) -> None:
    if db.get(Media, media_id) is None:
        raise NotFoundError(f"Media with id {media_id} not found")


# ---------- CRUD ----------

def create_favorite(db: Session, user_id: str, payload: FavoriteCreate) -> Favorite:
    uid = parse_uuid(user_id, "User")

    with translate_db_errors(db, "Error creating favorite"):
        _require_user(db, uid)
        _require_media(db, payload.media_id)

        favorite = Favorite(user_id=uid, media_id=payload.media_id)
        db.add(favorite)
        db.commit()
        db.refresh(favorite)

    logger.info(f"Favorite created | id={favorite.id} user={uid} media={payload.media_id}")
    return favorite


def list_favorites(db: Session, user_id: str) -> list[Favorite]:
    uid = parse_uuid(user_id, "User")

    with translate_db_errors(db, "Error fetching favorites for user"):
        _require_user(db, uid)
        return (
            db.query(Favorite)
            .filter(Favorite.user_id == uid)
            .all()
        )


def get_favorite(db: Session, favorite_id: str, user_id: str) -> Favorite:
    fid = parse_uuid(favorite_id, "Favorite")
    uid = parse_uuid(user_id, "User")

    with translate_db_errors(db, "Error fetching favorite"):
        favorite = (
            db.query(Favorite)
            .filter(Favorite.id == fid, Favorite.user_id == uid)
            .first()
        )

    if not favorite:
        logger.debug(f"Favorite {favorite_id} not found for user {user_id}")
        raise NotFoundError(f"Favorite with id {favorite_id} for user {user_id} not found")
    return favorite


def update_favorite(db: Session, favorite_id: str, user_id: str, payload: FavoriteUpdate) -> Favorite:
    favorite = get_favorite(db, favorite_id, user_id)

    with translate_db_errors(db, "Error updating favorite"):
        if payload.user_id is not None and payload.user_id != favorite.user_id:
            _require_user(db, payload.user_id)
        if payload.media_id is not None and payload.media_id != favorite.media_id:
            _require_media(db, payload.media_id)

        apply_update(favorite, payload)
        db.commit()
        # reload user/media in case the references moved
        db.refresh(favorite)

    logger.info(f"Favorite updated | id={favorite.id}")
    return favorite


def delete_favorite(db: Session, favorite_id: str, user_id: str) -> uuid.UUID:
    favorite = get_favorite(db, favorite_id, user_id)

    with translate_db_errors(db, "Error removing favorite"):
        db.delete(favorite)
        db.commit()

    logger.info(f"Favorite removed | id={favorite_id} user={user_id}")
    return favorite.id
