# wallpaper_server/seed.py

"""
Loads categories and wallpapers into the store from a JSON catalog:

    {"categories": [{"name": "Nature", "is_active": true,
                     "wallpapers": [{"title": "...", "resolution": "1920x1080",
                                     "image_path": "https://..."}]}]}
"""

import json
import logging
from pathlib import Path
import click
from sqlalchemy.orm import Session

from .database import SessionLocal, init_db
from .models.wallpaper import Category, Wallpaper


logger = logging.getLogger(__name__)


def seed_catalog(db: Session, catalog: dict) -> tuple[int, int]:
    """
    Inserts the catalog and returns ``(categories_created, wallpapers_created)``.
    Categories that already exist by name are reused, not duplicated.
    """
    categories_created = 0
    wallpapers_created = 0

    for entry in catalog.get("categories", []):
        category = db.query(Category).filter_by(name=entry["name"]).first()
        if category is None:
            category = Category(name=entry["name"], is_active=entry.get("is_active", True))
            db.add(category)
            db.flush()
            categories_created += 1

        for item in entry.get("wallpapers", []):
            db.add(Wallpaper(
                title=item["title"],
                resolution=item["resolution"],
                image_path=item["image_path"],
                downloads=item.get("downloads", 0),
                category_id=category.category_id,
            ))
            wallpapers_created += 1

    db.commit()
    return categories_created, wallpapers_created


@click.command()
@click.argument("catalog_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(catalog_file: Path) -> None:
    """Seed the wallpaper catalog from CATALOG_FILE (JSON)."""
    try:
        catalog = json.loads(catalog_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid catalog JSON: {e}")

    init_db()
    with SessionLocal() as db:
        categories, wallpapers = seed_catalog(db, catalog)

    logger.info("Seeded %d categories and %d wallpapers", categories, wallpapers)
    click.echo(click.style(f"Seeded {categories} categories and {wallpapers} wallpapers", fg="green"))


if __name__ == "__main__":
    main()
