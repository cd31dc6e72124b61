# wallpaper_server/models/wallpaper.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from . import Base
from .types import BinaryUUID


def _utcnow():
    return datetime.now(timezone.utc)


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(BinaryUUID, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    wallpapers = relationship("Wallpaper", back_populates="category")


class Wallpaper(Base):
    __tablename__ = "wallpapers"

    wallpaper_id = Column(BinaryUUID, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False, index=True)
    resolution = Column(String(20), nullable=False)
    image_path = Column(String(500), nullable=False)
    downloads = Column(Integer, nullable=False, default=0)
    category_id = Column(BinaryUUID, ForeignKey("categories.category_id"), nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow)

    category = relationship("Category", back_populates="wallpapers")


class Favorite(Base):
    """
    One row per (user, wallpaper) pair; the composite key is the uniqueness guarantee.
    """
    __tablename__ = "favorites"

    user_id = Column(BinaryUUID, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    wallpaper_id = Column(BinaryUUID, ForeignKey("wallpapers.wallpaper_id", ondelete="CASCADE"), primary_key=True)
    saved_at = Column(DateTime, nullable=False, default=_utcnow)
