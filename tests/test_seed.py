"""Catalog seeding."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from wallpaper_server.models import Category, Wallpaper
from wallpaper_server.seed import main, seed_catalog

from .conftest import CATALOG


def test_seed_reuses_existing_categories(session_factory):
    with session_factory() as db:
        assert seed_catalog(db, CATALOG) == (3, 5)
        assert seed_catalog(db, {"categories": [{"name": "Nature", "wallpapers": [
            {"title": "Desert Dunes", "resolution": "1080x1920", "image_path": "https://img.test/dunes.jpg"},
        ]}]}) == (0, 1)

        assert db.query(Category).count() == 3
        nature = db.query(Category).filter_by(name="Nature").one()
        assert db.query(Wallpaper).filter_by(category_id=nature.category_id).count() == 3


def test_cli_seeds_from_file(tmp_path, session_factory):
    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_text(json.dumps(CATALOG), encoding="utf-8")

    with patch("wallpaper_server.seed.SessionLocal", session_factory), \
         patch("wallpaper_server.seed.init_db"):
        result = CliRunner().invoke(main, [str(catalog_file)])

    assert result.exit_code == 0, result.output
    assert "Seeded 3 categories and 5 wallpapers" in result.output


def test_cli_rejects_invalid_json(tmp_path):
    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_text("{not json", encoding="utf-8")

    with patch("wallpaper_server.seed.init_db") as init_db:
        result = CliRunner().invoke(main, [str(catalog_file)])

    assert result.exit_code != 0
    assert "Invalid catalog JSON" in result.output
    init_db.assert_not_called()
