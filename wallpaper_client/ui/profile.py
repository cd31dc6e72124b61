# wallpaper_client/ui/profile.py

import streamlit as st
from ..services.api import ApiError, get_user_info


def profile_page(session):
    st.markdown("# 👤 My Profile")

    try:
        me = get_user_info(session.auth_headers())
    except ApiError as e:
        st.error(e.message)
    else:
        st.write(f"Signed in as **{me['email']}**")

    if st.button("🔓 Sign out"):
        session.sign_out()
        for key in ("page", "favorites", "search_category"):
            st.session_state.pop(key, None)
        st.rerun()
