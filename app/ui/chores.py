# app/ui/chores.py

import streamlit as st
from services.api import complete_chore, create_chore, delete_chore, list_chores, LOGIN_REQUIRED
from ui.login import forget_session


def chores_page(http, user):
    st.title("🧹 Chores")

    if user["role"] == "organizer":
        show_create_form(http)

    chores = list_chores(http)
    if isinstance(chores, dict) and chores.get("error"):
        if chores["error"] == LOGIN_REQUIRED:
            forget_session()
            st.rerun()
        st.error(chores["error"])
        return

    if not chores:
        st.info("No chores yet.")
        return

    header = st.columns([3, 2, 2, 2])
    for col, name in zip(header, ["Title", "Assigned To", "Status", "Actions"]):
        col.markdown(f"**{name}**")

    for chore in chores:
        show_chore_row(http, chore)


def show_create_form(http):
    with st.form("create_chore_form", clear_on_submit=True):
        st.subheader("➕ New chore")
        title = st.text_input("Title")
        assigned_to = st.text_input("Assigned to")
        submitted = st.form_submit_button("Create")

    if submitted:
        result = create_chore(http, title, assigned_to)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.toast("Chore created!")
            st.rerun()


def show_chore_row(http, chore):
    title_col, assignee_col, status_col, action_col = st.columns([3, 2, 2, 2])
    title_col.write(chore["title"])
    assignee_col.write(chore["assignedTo"])
    status_col.write("Completed" if chore["completed"] else "Pending")

    if chore["completed"]:
        if action_col.button("Delete", key=f"delete_{chore['id']}"):
            handle_result(delete_chore(http, chore["id"]), "Chore deleted!")
    else:
        if action_col.button("Mark Complete", key=f"complete_{chore['id']}"):
            handle_result(complete_chore(http, chore["id"]), "Chore marked as complete!")


def handle_result(result, success_message):
    # Every mutation re-renders the whole list from the server.
    if result.get("error"):
        st.error(f"❌ {result['error']}")
        return
    st.toast(success_message)
    st.rerun()
