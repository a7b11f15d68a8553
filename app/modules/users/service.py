import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from loguru import logger

from app.core.db import translate_db_errors
from app.core.errors import ConflictError, NotFoundError
from app.core.ids import parse_uuid
from app.schemas.base import apply_update

from .models import User
from .schemas import UserCreate, UserUpdate


def _email_taken(db: Session, email: str, exclude_id=None) -> bool:
    query = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _commit_user(db: Session, user: User, email: str, exclude_id=None) -> User:
    # a concurrent request may claim the email between check and commit
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if not _email_taken(db, email, exclude_id=exclude_id):
            # some other constraint; surfaces as InternalError
            raise
        logger.warning(f"Email {email} claimed concurrently")
        raise ConflictError("Email already in use")
    db.refresh(user)
    return user


def create_user(db: Session, payload: UserCreate) -> User:
    with translate_db_errors(db, "Error creating user"):
        if _email_taken(db, payload.email):
            raise ConflictError("Email already in use")

        user = User(
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        db.add(user)
        user = _commit_user(db, user, payload.email)

    logger.info(f"User created | id={user.id}")
    return user


def list_users(db: Session) -> list[User]:
    with translate_db_errors(db, "Error fetching users"):
        return db.query(User).order_by(User.created_at.asc()).all()


def get_user(db: Session, user_id: str) -> User:
    uid = parse_uuid(user_id, "User")
    with translate_db_errors(db, "Error fetching user"):
        user = db.get(User, uid)
    if not user:
        logger.debug(f"User {user_id} not found")
        raise NotFoundError(f"User with id {user_id} not found")
    return user


def update_user(db: Session, user_id: str, payload: UserUpdate) -> User:
    user = get_user(db, user_id)

    with translate_db_errors(db, "Error updating user"):
        if payload.email is not None and payload.email != user.email:
            if _email_taken(db, payload.email, exclude_id=user.id):
                raise ConflictError("Email already in use")

        apply_update(user, payload)
        user = _commit_user(db, user, user.email, exclude_id=user.id)

    logger.info(f"User updated | id={user.id}")
    return user


def delete_user(db: Session, user_id: str) -> uuid.UUID:
    user = get_user(db, user_id)

    with translate_db_errors(db, "Error removing user"):
        db.delete(user)
        db.commit()

    logger.info(f"User removed | id={user_id}")
    return user.id
