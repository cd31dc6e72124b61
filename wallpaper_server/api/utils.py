# wallpaper_server/api/utils.py

import uuid
from ..core.errors import ValidationError


def parse_uuid(value, field: str = "id") -> uuid.UUID:
    """
    Converts a canonical UUID string from the request into ``uuid.UUID``.
    """
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")


def serialize_wallpaper(wallpaper, category) -> dict:
    return {
        "wallpaper_id": str(wallpaper.wallpaper_id),
        "title": wallpaper.title,
        "resolution": wallpaper.resolution,
        "downloads": wallpaper.downloads,
        "image_path": wallpaper.image_path,
        "category_id": str(category.category_id),
        "category_name": category.name,
    }
