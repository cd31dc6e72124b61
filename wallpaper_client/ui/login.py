# wallpaper_client/ui/login.py

import streamlit as st
from ..services.api import ApiError, register_user
from ..session import pending


def login_page(session):
    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form(session)


def show_login_form(session):
    st.title("🖼️ Wallpaper App")

    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")

    if submitted:
        if not email or not password:
            st.error("Please enter your email and password.")
        else:
            with pending(st.session_state, "login") as ready:
                if ready:
                    with st.spinner("Signing in..."):
                        try:
                            session.sign_in(email, password)
                        except ApiError as e:
                            st.error(f"❌ {e.message}")
                        else:
                            st.rerun()

    if st.button("No account? Register"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Register")

    email = st.text_input("Email", key="register_email")
    password = st.text_input("Password", type="password", key="register_password")
    confirm = st.text_input("Confirm password", type="password", key="register_confirm")

    if st.button("Create account"):
        if not email or not password or not confirm:
            st.error("All fields are required.")
        elif password != confirm:
            st.error("Passwords do not match.")
        else:
            with pending(st.session_state, "register") as ready:
                if ready:
                    with st.spinner("Creating account..."):
                        try:
                            register_user(email, password)
                        except ApiError as e:
                            st.error(f"❌ {e.message}")
                        else:
                            st.success("🎉 Account created. You can sign in now.")
                            st.session_state["show_register"] = False

    if st.button("← Back to sign in"):
        st.session_state["show_register"] = False
        st.rerun()
