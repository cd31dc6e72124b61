# wallpaper_client/ui/favorites.py

import streamlit as st
from ..services.api import ApiError, list_favorites, remove_favorite
from ..session import pending


def favorites_page(session):
    st.markdown("# ❤️ My Favorites")

    if "favorites" not in st.session_state:
        with st.spinner("Loading favorites..."):
            try:
                st.session_state["favorites"] = list_favorites(session.auth_headers())
            except ApiError as e:
                st.error(e.message)
                return

    favorites = st.session_state["favorites"]
    if not favorites:
        st.info("You have no favorite wallpapers yet.")
        return

    for item in favorites:
        wallpaper_id = item["wallpaper_id"]
        with st.container(border=True):
            st.image(item["image_path"], width="stretch")
            st.markdown(f"**{item['title']}**")
            st.caption(f"{item['category_name']} · {item['resolution']}")
            if st.button("🗑️ Remove", key=f"unfav_{wallpaper_id}"):
                remove_from_favorites(session, wallpaper_id)


def remove_from_favorites(session, wallpaper_id):
    with pending(st.session_state, f"unfavorite_{wallpaper_id}") as ready:
        if not ready:
            return
        try:
            remove_favorite(session.auth_headers(), wallpaper_id)
        except ApiError as e:
            st.error(e.message)
            return

    st.session_state["favorites"] = [
        f for f in st.session_state["favorites"] if f["wallpaper_id"] != wallpaper_id
    ]
    st.success("Removed from favorites")
    st.rerun()
