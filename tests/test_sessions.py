"""Tests for core.sessions — the server-side session table."""

from jose import jwt

from core.records import Identity
from core.sessions import ALGORITHM, SessionManager


BOB = Identity(username="bob", role="organizer")


def test_login_then_current_user():
    sessions = SessionManager("secret")
    token = sessions.login(BOB)
    assert sessions.current_user(token) == BOB


def test_current_user_without_token():
    sessions = SessionManager("secret")
    assert sessions.current_user(None) is None
    assert sessions.current_user("") is None


def test_garbage_token_is_anonymous():
    sessions = SessionManager("secret")
    assert sessions.current_user("not-a-token") is None


def test_token_signed_with_other_secret_is_rejected():
    sessions = SessionManager("secret")
    token = sessions.login(BOB)
    sid = jwt.decode(token, "secret", algorithms=[ALGORITHM])["sid"]
    forged = jwt.encode({"sid": sid}, "other-secret", algorithm=ALGORITHM)
    assert sessions.current_user(forged) is None


def test_logout_ends_session_and_is_idempotent():
    sessions = SessionManager("secret")
    token = sessions.login(BOB)
    sessions.logout(token)
    assert sessions.current_user(token) is None
    sessions.logout(token)
    sessions.logout(None)
    sessions.logout("not-a-token")


def test_sessions_are_independent():
    sessions = SessionManager("secret")
    alice = Identity(username="alice", role="member")
    bob_token = sessions.login(BOB)
    alice_token = sessions.login(alice)

    sessions.logout(bob_token)
    assert sessions.current_user(bob_token) is None
    assert sessions.current_user(alice_token) == alice


def test_expired_session_is_anonymous():
    sessions = SessionManager("secret", expire_minutes=-1)
    token = sessions.login(BOB)
    assert sessions.current_user(token) is None


def test_logout_of_expired_session_drops_it():
    sessions = SessionManager("secret", expire_minutes=-1)
    token = sessions.login(BOB)
    sessions.logout(token)
    assert sessions._sessions == {}


def test_login_sweeps_expired_sessions():
    sessions = SessionManager("secret", expire_minutes=-1)
    for _ in range(1000):
        sessions.login(BOB)

    sessions.expire_minutes = 60
    token = sessions.login(BOB)

    assert len(sessions._sessions) == 1
    assert sessions.current_user(token) == BOB


def test_login_keeps_live_sessions():
    sessions = SessionManager("secret")
    first = sessions.login(BOB)
    second = sessions.login(Identity(username="alice", role="member"))
    assert len(sessions._sessions) == 2
    assert sessions.current_user(first) == BOB
    assert sessions.current_user(second).username == "alice"
