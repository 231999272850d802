# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import login_user, logout_user, new_http_session, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(prefix="chores/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def get_http():
    """
    Returns the requests session for this browser tab, resuming
    a saved server session from the encrypted cookie if there is one.
    """
    if "http" not in st.session_state:
        st.session_state["http"] = new_http_session(cookies.get("session_token"))
    return st.session_state["http"]


def logout():
    logout_user(get_http())
    forget_session()


def forget_session():
    """
    Drops the requests session and the saved token once the server
    no longer recognises them (expiry, logout or a server restart).
    """
    st.session_state.pop("http", None)
    if "session_token" in cookies:
        del cookies["session_token"]
        cookies.save()


def login_page():
    st.title("🔐 Log in")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(get_http(), username, password)
            if result.get("error"):
                st.error(f"❌ Login failed: {result['error']}")
            else:
                cookies["session_token"] = result["session_token"]
                cookies.save()
                st.success("✅ Logged in!")
                st.rerun()

    if st.button("Register"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Register")

    new_user = st.text_input("Username", key="new_user")
    new_pass = st.text_input("Password", type="password", key="new_pass")
    role = st.selectbox("Role", options=["member", "organizer"], key="new_role")

    if st.button("Create account"):
        with st.spinner("Registering..."):
            result = register_user(get_http(), new_user, new_pass, role)
            if result.get("error"):
                st.error(f"❌ Registration failed: {result['error']}")
            else:
                st.success("🎉 Registered! You can log in now.")
                st.session_state["show_register"] = False
                st.rerun()

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
