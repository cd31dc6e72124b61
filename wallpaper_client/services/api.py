# wallpaper_client/services/api.py

import logging
import requests
from ..config import API_URL, REQUEST_TIMEOUT


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Failure of a backend call. ``message`` is the server's error text or a
    generic fallback, ready to show to the user.
    """
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _request(method, path, fallback, **kwargs):
    try:
        res = requests.request(method, f"{API_URL}{path}", timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        logger.warning("%s %s failed: %s", method, path, e)
        raise ApiError(fallback)

    try:
        data = res.json()
    except ValueError:
        data = None

    if not res.ok:
        message = data.get("error") if isinstance(data, dict) else None
        logger.info("%s %s returned %s", method, path, res.status_code)
        raise ApiError(message or fallback, res.status_code)
    return data


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(email, password):
    """
    Creates an account. Returns the server's confirmation message.
    """
    data = _request("POST", "/register", "Could not register user",
                    json={"email": email, "password": password})
    return data["message"]


def login_user(email, password):
    """
    Logs in a user and returns ``{"token": ..., "user_id": ...}``.
    """
    return _request("POST", "/login", "Could not sign in",
                    json={"email": email, "password": password})


def get_user_info(headers):
    return _request("GET", "/me", "Could not load profile", headers=headers)


# -------------------------
# Catalog
# -------------------------

def search_wallpapers(keyword="", category=None):
    params = {}
    if keyword:
        params["keyword"] = keyword
    if category:
        params["category"] = category
    return _request("GET", "/search", "Could not load wallpapers", params=params)


def list_categories():
    return _request("GET", "/categories", "Could not load categories")


def record_download(wallpaper_id):
    return _request("POST", f"/wallpapers/{wallpaper_id}/download", "Could not download wallpaper")


# -------------------------
# Favorites
# -------------------------

def add_favorite(headers, wallpaper_id):
    return _request("POST", "/favorites", "Could not save to favorites",
                    json={"wallpaper_id": wallpaper_id}, headers=headers)


def list_favorites(headers):
    return _request("GET", "/favorites", "Could not load favorites", headers=headers)


def remove_favorite(headers, wallpaper_id):
    return _request("DELETE", f"/favorites/{wallpaper_id}", "Could not remove from favorites",
                    headers=headers)
