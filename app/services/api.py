# app/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("CHORES_API_URL", "http://localhost:3000")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "chores_session")

LOGIN_REQUIRED = "Login required"


def new_http_session(session_token=None):
    """
    Creates a requests session, optionally resuming a saved server session.
    """
    http = requests.Session()
    if session_token:
        http.cookies.set(SESSION_COOKIE_NAME, session_token)
    return http


def _is_redirect(res):
    return res.status_code in (301, 302, 303, 307, 308)


def _json_or_error(res):
    # Guarded routes answer an anonymous request with a redirect to the login page.
    if _is_redirect(res):
        return {"error": LOGIN_REQUIRED}
    try:
        return res.json()
    except ValueError:
        return {"error": f"Unexpected response: {res.status_code}"}


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(http, username, password, role):
    try:
        res = http.post(
            f"{API_URL}/register",
            data={"username": username, "password": password, "role": role},
            allow_redirects=False,
        )
    except requests.RequestException as e:
        return {"error": str(e)}

    if _is_redirect(res):
        return {"status": "success"}
    return _json_or_error(res)


def login_user(http, username, password):
    """
    Logs in and returns the session token the server set as a cookie.
    Any cookie left over from an earlier, expired session is dropped first.
    """
    http.cookies.clear()
    try:
        res = http.post(
            f"{API_URL}/login",
            data={"username": username, "password": password},
            allow_redirects=False,
        )
    except requests.RequestException as e:
        return {"error": str(e)}

    token = res.cookies.get(SESSION_COOKIE_NAME)
    if _is_redirect(res) and token:
        return {"session_token": token}
    return _json_or_error(res)


def logout_user(http):
    try:
        http.get(f"{API_URL}/logout", allow_redirects=False)
    except requests.RequestException:
        # The local cookie is dropped either way.
        pass
    http.cookies.clear()


def get_user_info(http):
    """
    Returns {"username", "role"} for the current session, or None.
    """
    try:
        res = http.get(f"{API_URL}/api/user")
    except requests.RequestException:
        return None
    if res.status_code != 200:
        return None
    return res.json().get("user")


# -------------------------
# Chores
# -------------------------

def list_chores(http):
    try:
        res = http.get(f"{API_URL}/api/chores", allow_redirects=False)
    except requests.RequestException as e:
        return {"error": str(e)}

    data = _json_or_error(res)
    if "error" in data:
        return data
    return data.get("chores", [])


def create_chore(http, title, assigned_to):
    try:
        res = http.post(
            f"{API_URL}/api/chores",
            data={"title": title, "assignedTo": assigned_to},
            allow_redirects=False,
        )
    except requests.RequestException as e:
        return {"error": str(e)}
    return _json_or_error(res)


def complete_chore(http, chore_id):
    try:
        res = http.post(f"{API_URL}/api/chores/{chore_id}/complete", allow_redirects=False)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _json_or_error(res)


def delete_chore(http, chore_id):
    try:
        res = http.post(f"{API_URL}/api/chores/{chore_id}/delete", allow_redirects=False)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _json_or_error(res)
