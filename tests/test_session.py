"""Client session manager state machine."""

from unittest.mock import MagicMock

import pytest

from wallpaper_client.services.api import ApiError
from wallpaper_client.session import SessionManager, SessionStateError, SessionStatus, pending


class CookieStore(dict):
    """Dict with the ``save()`` hook the encrypted cookie manager exposes."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saves = 0

    def save(self):
        self.saves += 1


def make_session(storage=None, login=None):
    login = login or MagicMock(return_value={"token": "tok-123", "user_id": "u-1"})
    return SessionManager(storage if storage is not None else CookieStore(), login=login)


class TestRestoreToken:
    def test_starts_loading(self):
        assert make_session().status is SessionStatus.LOADING

    def test_restore_without_token_signs_out(self):
        session = make_session()

        assert session.restore_token() is SessionStatus.SIGNED_OUT
        assert session.token is None

    def test_restore_with_token_signs_in(self):
        session = make_session(CookieStore(user_token="tok-old"))

        assert session.restore_token() is SessionStatus.SIGNED_IN
        assert session.token == "tok-old"

    def test_unreadable_storage_signs_out(self):
        storage = MagicMock()
        storage.get.side_effect = RuntimeError("storage unavailable")
        session = make_session(storage)

        assert session.restore_token() is SessionStatus.SIGNED_OUT

    def test_restore_only_once(self):
        session = make_session()
        session.restore_token()

        with pytest.raises(SessionStateError):
            session.restore_token()


class TestSignIn:
    def test_sign_in_persists_token(self):
        storage = CookieStore()
        login = MagicMock(return_value={"token": "tok-123", "user_id": "u-1"})
        session = make_session(storage, login)
        session.restore_token()

        assert session.sign_in("ana@example.com", "pw") is SessionStatus.SIGNED_IN
        login.assert_called_once_with("ana@example.com", "pw")
        assert session.token == "tok-123"
        assert session.user_id == "u-1"
        assert storage["user_token"] == "tok-123"
        assert storage.saves == 1

    def test_failed_sign_in_stays_signed_out(self):
        storage = CookieStore()
        session = make_session(storage, MagicMock(side_effect=ApiError("Invalid credentials", 401)))
        session.restore_token()

        with pytest.raises(ApiError):
            session.sign_in("ana@example.com", "bad")

        assert session.status is SessionStatus.SIGNED_OUT
        assert "user_token" not in storage

    def test_sign_in_before_restore_is_refused(self):
        with pytest.raises(SessionStateError):
            make_session().sign_in("ana@example.com", "pw")

    def test_auth_headers_carry_bearer_token(self):
        session = make_session()
        session.restore_token()
        session.sign_in("ana@example.com", "pw")

        assert session.auth_headers() == {"Authorization": "Bearer tok-123"}

    def test_auth_headers_require_sign_in(self):
        session = make_session()
        session.restore_token()

        with pytest.raises(SessionStateError):
            session.auth_headers()


class TestSignOut:
    def test_sign_out_discards_both_copies(self):
        storage = CookieStore(user_token="tok-old")
        session = make_session(storage)
        session.restore_token()

        assert session.sign_out() is SessionStatus.SIGNED_OUT
        assert session.token is None
        assert "user_token" not in storage
        assert storage.saves == 1

    def test_sign_out_when_signed_out_is_refused(self):
        session = make_session()
        session.restore_token()

        with pytest.raises(SessionStateError):
            session.sign_out()

    def test_sign_in_again_after_sign_out(self):
        session = make_session(CookieStore(user_token="tok-old"))
        session.restore_token()
        session.sign_out()

        session.sign_in("ana@example.com", "pw")

        assert session.is_signed_in
        assert session.token == "tok-123"


class TestPending:
    def test_blocks_duplicate_submission(self):
        state = {}
        with pending(state, "login") as first:
            with pending(state, "login") as second:
                assert first is True
                assert second is False
        assert state["login_loading"] is False

    def test_other_actions_are_independent(self):
        state = {}
        with pending(state, "login") as first, pending(state, "register") as second:
            assert first and second

    def test_flag_cleared_on_error(self):
        state = {}
        with pytest.raises(ApiError):
            with pending(state, "search"):
                raise ApiError("boom")
        assert state["search_loading"] is False
