# wallpaper_server/core/errors.py

from fastapi import status


class WallpaperError(Exception):
    """
    Base class for every failure a route turns into an ``{"error": ...}`` body.
    ``message`` is always safe to show to the client.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WallpaperError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidCredentials(WallpaperError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthenticated(WallpaperError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized access"


class InvalidToken(WallpaperError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class NotFound(WallpaperError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(WallpaperError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class InternalError(WallpaperError):
    pass
