# server/api/auth.py

import logging
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from api.guards import get_credentials, get_current_user, get_session_token, get_sessions
from core.credentials import CredentialStore
from core.records import Identity
from core.sessions import SessionManager


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register")
def register(
    username: str = Form(""),
    password: str = Form(""),
    role: str = Form(""),
    credentials: CredentialStore = Depends(get_credentials),
):
    credentials.register(username, password, role)
    return RedirectResponse("/login.html", status_code=status.HTTP_302_FOUND)


@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    credentials: CredentialStore = Depends(get_credentials),
    sessions: SessionManager = Depends(get_sessions),
):
    user = credentials.verify(username, password)
    token = sessions.login(user.identity())

    settings = request.app.state.settings
    response = RedirectResponse("/chores.html", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/logout")
def logout(
    request: Request,
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
):
    sessions.logout(token)
    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(request.app.state.settings.session_cookie_name)
    return response


@router.get("/api/user")
def read_current_user(user: Identity | None = Depends(get_current_user)):
    """
    Returns the logged-in user, or null when there is no session.
    """
    return {"user": user.model_dump() if user else None}
