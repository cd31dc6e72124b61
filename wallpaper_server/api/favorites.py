# wallpaper_server/api/favorites.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.errors import ConflictError, InternalError, InvalidToken, NotFound
from ..core.security import TokenIdentity, get_current_user
from ..models.user import User
from ..models.wallpaper import Category, Favorite, Wallpaper
from .utils import parse_uuid, serialize_wallpaper


logger = logging.getLogger(__name__)

# current_user must stay ahead of db in every signature: auth runs before a session opens.
router = APIRouter(prefix="/favorites")


class FavoriteRequest(BaseModel):
    wallpaper_id: str | None = None


@router.post("")
def add_favorite(
    req: FavoriteRequest,
    current_user: TokenIdentity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    wallpaper_uuid = parse_uuid(req.wallpaper_id, "wallpaper_id")
    try:
        if db.get(Wallpaper, wallpaper_uuid) is None:
            raise NotFound("Wallpaper not found")
        db.add(Favorite(user_id=current_user.user_id, wallpaper_id=wallpaper_uuid))
        db.commit()
    except IntegrityError:
        db.rollback()
        _raise_for_rejected_insert(db, current_user, wallpaper_uuid)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding favorite")
        raise InternalError("Error adding to favorites")
    return {"message": "Added to favorites successfully"}


def _raise_for_rejected_insert(db: Session, current_user: TokenIdentity, wallpaper_uuid):
    """
    The insert can only fail on the composite key (duplicate) or on the
    user foreign key (the token outlived its user row).
    """
    try:
        if db.get(Favorite, (current_user.user_id, wallpaper_uuid)) is not None:
            raise ConflictError("Wallpaper is already in favorites")
        user_exists = db.get(User, current_user.user_id) is not None
    except SQLAlchemyError:
        logger.exception("Error adding favorite")
        raise InternalError("Error adding to favorites")

    if not user_exists:
        logger.info("Token for unknown user %s", current_user.user_id)
        raise InvalidToken("User no longer exists")
    logger.error("Unexpected constraint failure adding favorite for %s", current_user.user_id)
    raise InternalError("Error adding to favorites")


@router.get("")
def list_favorites(
    current_user: TokenIdentity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        rows = (
            db.query(Wallpaper, Category, Favorite.saved_at)
            .join(Favorite, Favorite.wallpaper_id == Wallpaper.wallpaper_id)
            .join(Category, Wallpaper.category_id == Category.category_id)
            .filter(Favorite.user_id == current_user.user_id)
            .order_by(Favorite.saved_at.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error listing favorites")
        raise InternalError("Error fetching favorites")

    return [
        {**serialize_wallpaper(w, c), "saved_at": saved_at.isoformat() if saved_at else None}
        for w, c, saved_at in rows
    ]


@router.delete("/{wallpaper_id}")
def remove_favorite(
    wallpaper_id: str,
    current_user: TokenIdentity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    wallpaper_uuid = parse_uuid(wallpaper_id, "wallpaper_id")
    try:
        db.query(Favorite).filter_by(user_id=current_user.user_id, wallpaper_id=wallpaper_uuid).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error removing favorite")
        raise InternalError("Error removing from favorites")
    return {"message": "Removed from favorites successfully"}
