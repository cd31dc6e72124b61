"""Shared fixtures: an in-memory store behind the FastAPI app, a seeded catalog, and a signed-in user."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wallpaper_server.database import configure_sqlite, get_db
from wallpaper_server.main import app
from wallpaper_server.models import Base, Wallpaper
from wallpaper_server.seed import seed_catalog


CATALOG = {
    "categories": [
        {
            "name": "Nature",
            "wallpapers": [
                {"title": "Misty Forest", "resolution": "1080x1920", "image_path": "https://img.test/misty.jpg"},
                {"title": "Alpine Lake", "resolution": "1440x2560", "image_path": "https://img.test/lake.jpg"},
            ],
        },
        {
            "name": "Abstract",
            "wallpapers": [
                {"title": "Forest of Shapes", "resolution": "1080x1920", "image_path": "https://img.test/shapes.jpg"},
                {"title": "Neon Waves", "resolution": "1080x2340", "image_path": "https://img.test/neon.jpg"},
            ],
        },
        {
            "name": "Archived",
            "is_active": False,
            "wallpapers": [
                {"title": "Old Forest Print", "resolution": "720x1280", "image_path": "https://img.test/old.jpg"},
            ],
        },
    ]
}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_opened():
    """Records every time a route opens a database session."""
    return []


@pytest.fixture
def client(session_factory, db_opened):
    def override_get_db():
        db_opened.append(True)
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def wallpapers(session_factory) -> dict[str, str]:
    """Seeds the catalog and returns ``{title: wallpaper_id}``."""
    with session_factory() as db:
        seed_catalog(db, CATALOG)
        return {w.title: str(w.wallpaper_id) for w in db.query(Wallpaper).all()}


@pytest.fixture
def credentials() -> tuple[str, str]:
    return "ana@example.com", "s3cret-pass"


@pytest.fixture
def auth_headers(client, credentials) -> dict[str, str]:
    email, password = credentials
    assert client.post("/register", json={"email": email, "password": password}).status_code == 201
    token = client.post("/login", json={"email": email, "password": password}).json()["token"]
    return {"Authorization": f"Bearer {token}"}
