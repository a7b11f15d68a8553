import uuid

from sqlalchemy import Column, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core.db import Base


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    media_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("media.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # detail is always returned with the favorite
    user = relationship("User", back_populates="favorites", lazy="selectin")
    media = relationship("Media", back_populates="favorites", lazy="selectin")
