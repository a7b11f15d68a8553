import uuid

from sqlalchemy import Column, String, Integer, Enum, DateTime, Uuid
from sqlalchemy.orm import relationship
from app.core.db import Base, utcnow
from app.schemas.enums import MediaType


class Media(Base):
    __tablename__ = "media"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)

    type = Column(
        Enum(MediaType, name="media_type_enum"),
        nullable=False,
        default=MediaType.movie,
    )

    release_year = Column(Integer, nullable=False)
    genre = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    favorites = relationship(
        "Favorite",
        back_populates="media",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
