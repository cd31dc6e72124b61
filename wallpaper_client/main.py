# wallpaper_client/main.py

import logging
import streamlit as st
from streamlit_cookies_manager import EncryptedCookieManager
from wallpaper_client.config import COOKIE_PASSWORD, COOKIE_PREFIX
from wallpaper_client.session import SessionManager, SessionStatus
from wallpaper_client.ui.login import login_page
from wallpaper_client.ui.search import search_page
from wallpaper_client.ui.favorites import favorites_page
from wallpaper_client.ui.profile import profile_page


logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

st.set_page_config(page_title="Wallpaper App", layout="centered")

cookies = EncryptedCookieManager(prefix=COOKIE_PREFIX, password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def get_session():
    if "session" not in st.session_state:
        st.session_state["session"] = SessionManager(cookies)
    session = st.session_state["session"]
    # the cookie manager component is rebuilt on every rerun
    session.storage = cookies
    if session.status is SessionStatus.LOADING:
        session.restore_token()
    return session


def main_page(session):
    st.sidebar.markdown("## 📋 Menu")

    if st.sidebar.button("🔎 Search"):
        st.session_state["page"] = "search"
    if st.sidebar.button("❤️ Favorites"):
        st.session_state["page"] = "favorites"
        st.session_state.pop("favorites", None)
    if st.sidebar.button("👤 Profile"):
        st.session_state["page"] = "profile"

    page = st.session_state.get("page", "search")
    if page == "favorites":
        favorites_page(session)
    elif page == "profile":
        profile_page(session)
    else:
        search_page(session)


session = get_session()

if session.is_signed_in:
    main_page(session)
else:
    login_page(session)
