# wallpaper_server/models/user.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from . import Base
from .types import BinaryUUID


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores email and bcrypt password hash for authentication.
    """
    __tablename__ = "users"

    user_id = Column(BinaryUUID, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
