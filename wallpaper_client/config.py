# wallpaper_client/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# Base URL of the FastAPI backend
API_URL = os.getenv("WALLPAPER_API_URL", "http://localhost:8000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD") or "dev-cookie-password-change-in-production"
COOKIE_PREFIX = os.getenv("COOKIE_PREFIX", "wallpaper_app/")

# Name of the single persisted slot holding the bearer token
TOKEN_SLOT = "user_token"
