# app/main.py

import streamlit as st
from dotenv import load_dotenv
from services.api import get_user_info
from ui.login import forget_session, get_http, login_page, logout
from ui.chores import chores_page


load_dotenv()


def main_page(user):
    st.sidebar.markdown(f"Logged in as **{user['username']}** ({user['role']})")

    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    chores_page(get_http(), user)


user = get_user_info(get_http())
if user is None:
    forget_session()
    login_page()
else:
    main_page(user)
