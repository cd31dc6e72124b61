# wallpaper_server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.errors import InternalError
from ..core.security import TokenIdentity, get_current_user, register_user, authenticate_user


logger = logging.getLogger(__name__)

router = APIRouter()


class Credentials(BaseModel):
    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    user_id: str


class Me(BaseModel):
    user_id: str
    email: str


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: Credentials, db: Session = Depends(get_db)):
    try:
        register_user(db, body.email, body.password)
    except SQLAlchemyError:
        logger.exception("Error registering user")
        raise InternalError("Error registering user")
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
def login(body: Credentials, db: Session = Depends(get_db)):
    try:
        token, user_id = authenticate_user(db, body.email, body.password)
    except SQLAlchemyError:
        logger.exception("Error during login")
        raise InternalError("Error signing in")
    return {"token": token, "user_id": str(user_id)}


@router.get("/me", response_model=Me)
def read_me(current_user: TokenIdentity = Depends(get_current_user)):
    return {"user_id": str(current_user.user_id), "email": current_user.email}
