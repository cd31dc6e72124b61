# wallpaper_server/api/wallpapers.py

import logging
from fastapi import APIRouter, Depends
from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.errors import InternalError, NotFound
from ..models.wallpaper import Category, Wallpaper
from .utils import parse_uuid, serialize_wallpaper


logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------
# Browsing
# -------------------------------

@router.get("/search")
def search_wallpapers(keyword: str | None = None, category: str | None = None, db: Session = Depends(get_db)):
    """
    Case-insensitive title match and exact category filter, combined with AND.
    Wallpapers in inactive categories are never returned.
    """
    query = (
        db.query(Wallpaper, Category)
        .join(Category, Wallpaper.category_id == Category.category_id)
        .filter(Category.is_active.is_(True))
    )
    if keyword:
        query = query.filter(func.lower(Wallpaper.title).contains(keyword.lower(), autoescape=True))
    if category:
        query = query.filter(Category.name == category)

    try:
        rows = query.order_by(Wallpaper.title.asc()).all()
    except SQLAlchemyError:
        logger.exception("Error searching wallpapers")
        raise InternalError("Error searching wallpapers")
    return [serialize_wallpaper(w, c) for w, c in rows]


@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    try:
        categories = (
            db.query(Category)
            .filter(Category.is_active.is_(True))
            .order_by(Category.name.asc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error listing categories")
        raise InternalError("Error fetching categories")
    return [{"category_id": str(c.category_id), "name": c.name} for c in categories]


# -------------------------------
# Downloads
# -------------------------------

@router.post("/wallpapers/{wallpaper_id}/download")
def record_download(wallpaper_id: str, db: Session = Depends(get_db)):
    wallpaper_uuid = parse_uuid(wallpaper_id, "wallpaper_id")
    try:
        result = db.execute(
            update(Wallpaper)
            .where(Wallpaper.wallpaper_id == wallpaper_uuid)
            .values(downloads=Wallpaper.downloads + 1)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error recording download")
        raise InternalError("Error recording download")

    if result.rowcount == 0:
        logger.warning("Download recorded for unknown wallpaper %s", wallpaper_uuid)
        raise NotFound("Wallpaper not found")
    return {"message": "Download recorded successfully"}
