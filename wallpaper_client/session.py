# wallpaper_client/session.py

import logging
from contextlib import contextmanager
from enum import Enum
from .config import TOKEN_SLOT
from .services import api


logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    LOADING = "loading"
    SIGNED_OUT = "signedOut"
    SIGNED_IN = "signedIn"


class SessionStateError(RuntimeError):
    pass


class SessionManager:
    """
    Holds the one bearer token of this client and decides which screens are
    reachable.

    ``storage`` is the persistent key-value store (the encrypted cookie
    manager in the app, any mutable mapping in tests). If it has a
    ``save()`` method it is called after every write.

        loading --restore_token--> signedOut | signedIn
        signedOut --sign_in--> signedIn
        signedIn --sign_out--> signedOut
    """

    def __init__(self, storage, slot=TOKEN_SLOT, login=None):
        self.storage = storage
        self.slot = slot
        self._login = login or api.login_user
        self.status = SessionStatus.LOADING
        self.token = None
        self.user_id = None

    @property
    def is_signed_in(self) -> bool:
        return self.status is SessionStatus.SIGNED_IN

    def _require(self, status: SessionStatus, action: str):
        if self.status is not status:
            raise SessionStateError(f"Cannot {action} while {self.status.value}")

    def _persist(self):
        save = getattr(self.storage, "save", None)
        if callable(save):
            save()

    def restore_token(self) -> SessionStatus:
        self._require(SessionStatus.LOADING, "restore token")
        token = None
        try:
            token = self.storage.get(self.slot)
        except Exception:
            logger.exception("Could not read the persisted token")

        self.token = token or None
        self.status = SessionStatus.SIGNED_IN if self.token else SessionStatus.SIGNED_OUT
        return self.status

    def sign_in(self, email: str, password: str) -> SessionStatus:
        """
        Raises ``api.ApiError`` on a failed login and leaves the session signed out.
        """
        self._require(SessionStatus.SIGNED_OUT, "sign in")
        result = self._login(email, password)

        self.token = result["token"]
        self.user_id = result.get("user_id")
        self.storage[self.slot] = self.token
        self._persist()
        self.status = SessionStatus.SIGNED_IN
        return self.status

    def sign_out(self) -> SessionStatus:
        self._require(SessionStatus.SIGNED_IN, "sign out")
        if self.slot in self.storage:
            del self.storage[self.slot]
            self._persist()
        self.token = None
        self.user_id = None
        self.status = SessionStatus.SIGNED_OUT
        return self.status

    def auth_headers(self) -> dict:
        self._require(SessionStatus.SIGNED_IN, "authorize a request")
        return {"Authorization": f"Bearer {self.token}"}


@contextmanager
def pending(state, action: str):
    """
    Per-screen in-flight flag. Yields False when the same action is already
    outstanding, so the caller can skip a duplicate submission.
    """
    flag = f"{action}_loading"
    if state.get(flag):
        yield False
        return
    state[flag] = True
    try:
        yield True
    finally:
        state[flag] = False
