# server/api/guards.py

from fastapi import Depends, Request

from core.chores import ChoreStore
from core.credentials import CredentialStore
from core.errors import Forbidden, Unauthenticated
from core.records import Identity
from core.sessions import SessionManager


# -------------------------------
# Store accessors (set up by create_app)
# -------------------------------

def get_credentials(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_chores(request: Request) -> ChoreStore:
    return request.app.state.chores


def get_sessions(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(request.app.state.settings.session_cookie_name)


# -------------------------------
# Guards
# -------------------------------

def get_current_user(
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
) -> Identity | None:
    return sessions.current_user(token)


def require_authenticated(user: Identity | None = Depends(get_current_user)) -> Identity:
    """
    Passes the session identity through, or sends the browser to the login page.
    """
    if user is None:
        raise Unauthenticated()
    return user


def require_organizer(user: Identity = Depends(require_authenticated)) -> Identity:
    """
    Runs after require_authenticated, so the role is always known here.
    """
    if not user.is_organizer:
        raise Forbidden()
    return user
