import uuid

from sqlalchemy.orm import Session
from loguru import logger

from app.core.db import translate_db_errors
from app.core.errors import NotFoundError
from app.core.ids import parse_uuid
from app.schemas.base import apply_update

from .models import Media
from .schemas import MediaCreate, MediaUpdate


def create_media(db: Session, payload: MediaCreate) -> Media:
    with translate_db_errors(db, "Error creating media"):
        media = Media(**payload.model_dump())
        db.add(media)
        db.commit()
        db.refresh(media)

    logger.info(f"Media created | id={media.id} title={media.title!r}")
    return media


def list_media(db: Session) -> list[Media]:
    with translate_db_errors(db, "Error fetching media"):
        return db.query(Media).order_by(Media.created_at.asc()).all()


def get_media(db: Session, media_id: str) -> Media:
    mid = parse_uuid(media_id, "Media")
    with translate_db_errors(db, "Error fetching media"):
        media = db.get(Media, mid)
    if not media:
        logger.debug(f"Media {media_id} not found")
        raise NotFoundError(f"Media with id {media_id} not found")
    return media


def update_media(db: Session, media_id: str, payload: MediaUpdate) -> Media:
    media = get_media(db, media_id)

    with translate_db_errors(db, "Error updating media"):
        apply_update(media, payload)
        db.commit()
        db.refresh(media)

    logger.info(f"Media updated | id={media.id}")
    return media


def delete_media(db: Session, media_id: str) -> uuid.UUID:
    media = get_media(db, media_id)

    with translate_db_errors(db, "Error removing media"):
        db.delete(media)
        db.commit()

    logger.info(f"Media removed | id={media_id}")
    return media.id
