# wallpaper_client/ui/search.py

import logging
import streamlit as st
from ..services.api import ApiError, add_favorite, list_categories, record_download, search_wallpapers
from ..session import pending


logger = logging.getLogger(__name__)


def load_categories():
    """Category chips are optional; an unreachable list just hides them."""
    try:
        return list_categories()
    except ApiError as e:
        logger.warning("Could not load categories: %s", e.message)
        return []


def search_page(session):
    st.markdown("# 🔎 Search")

    categories = load_categories()

    keyword = st.text_input("Search wallpapers...", key="search_keyword")

    names = [c["name"] for c in categories]
    selected = st.session_state.get("search_category")
    if names:
        cols = st.columns(len(names))
        for col, name in zip(cols, names):
            with col:
                label = f"✅ {name}" if name == selected else name
                if st.button(label, key=f"category_{name}"):
                    st.session_state["search_category"] = None if name == selected else name
                    st.rerun()

    with pending(st.session_state, "search") as ready:
        if not ready:
            return
        with st.spinner("Loading wallpapers..."):
            try:
                wallpapers = search_wallpapers(keyword, selected)
            except ApiError as e:
                st.error(e.message)
                return

    if not wallpapers:
        st.info("No wallpapers found.")
        return

    for item in wallpapers:
        show_wallpaper(session, item)


def show_wallpaper(session, item):
    wallpaper_id = item["wallpaper_id"]
    with st.container(border=True):
        st.image(item["image_path"], width="stretch")
        st.markdown(f"**{item['title']}**")
        st.caption(f"{item['category_name']} · {item['resolution']} · ⬇️ {item['downloads']}")

        cols = st.columns(2)
        with cols[0]:
            if st.button("❤️ Favorite", key=f"fav_{wallpaper_id}"):
                save_to_favorites(session, wallpaper_id)
        with cols[1]:
            if st.button("⬇️ Download", key=f"dl_{wallpaper_id}"):
                download_wallpaper(wallpaper_id)


def save_to_favorites(session, wallpaper_id):
    with pending(st.session_state, f"favorite_{wallpaper_id}") as ready:
        if not ready:
            return
        try:
            add_favorite(session.auth_headers(), wallpaper_id)
        except ApiError as e:
            st.error(e.message)
        else:
            st.success("Added to favorites")


def download_wallpaper(wallpaper_id):
    with pending(st.session_state, f"download_{wallpaper_id}") as ready:
        if not ready:
            return
        try:
            record_download(wallpaper_id)
        except ApiError as e:
            st.error(e.message)
        else:
            st.success("Wallpaper downloaded")
