# wallpaper_server/core/security.py

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import JWT_SECRET_KEY, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS
from ..models.user import User
from .errors import ValidationError, ConflictError, InvalidCredentials, Unauthenticated, InvalidToken


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class TokenIdentity:
    user_id: uuid.UUID
    email: str


# -------------------------------
# Passwords
# -------------------------------

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------
# Tokens
# -------------------------------

def create_access_token(user_id: uuid.UUID, email: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode = {"id": str(user_id), "email": email, "exp": expire}
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_token(token: str | None) -> TokenIdentity:
    """
    Checks signature and expiry and returns the identity the token carries.
    Raises Unauthenticated when no token was sent, InvalidToken otherwise.
    """
    if not token:
        raise Unauthenticated()
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
        user_id = uuid.UUID(str(payload["id"]))
        email = payload["email"]
    except (JWTError, KeyError, ValueError):
        logger.info("Rejected bearer token")
        raise InvalidToken()
    if not email:
        raise InvalidToken()
    return TokenIdentity(user_id=user_id, email=email)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenIdentity:
    token = credentials.credentials if credentials else None
    return verify_token(token)


# -------------------------------
# Accounts
# -------------------------------

def register_user(db: Session, email: str | None, password: str | None) -> User:
    email = (email or "").strip()
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = User(email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email is already registered")
    logger.info("Registered user %s", user.user_id)
    return user


def authenticate_user(db: Session, email: str | None, password: str | None) -> tuple[str, uuid.UUID]:
    """
    Returns ``(token, user_id)``. Unknown email and wrong password fail the same way.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = db.query(User).filter(User.email == email.strip()).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentials()

    return create_access_token(user.user_id, user.email), user.user_id
