# server/main.py

import sys
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from api import auth, chores
from config import Settings
from core.chores import ChoreStore, MemoryChoreStore, SqlChoreStore
from core.credentials import (
    CredentialStore,
    MemoryCredentialStore,
    SqlCredentialStore,
    make_password_context,
)
from core.errors import ChoreTrackerError, Unauthenticated
from core.sessions import SessionManager
from database import create_db_engine, create_session_factory, init_db


PUBLIC_DIR = Path(__file__).resolve().parent / "public"

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def build_stores(settings: Settings) -> tuple[CredentialStore, ChoreStore]:
    pwd_context = make_password_context(settings.bcrypt_rounds)

    if settings.store_backend == "memory":
        return MemoryCredentialStore(pwd_context), MemoryChoreStore()

    if settings.store_backend == "sql":
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        session_factory = create_session_factory(engine)
        return SqlCredentialStore(session_factory, pwd_context), SqlChoreStore(session_factory)

    raise ValueError(f"Unknown STORE_BACKEND: {settings.store_backend!r}")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Chore Tracker")
    app.state.settings = settings
    app.state.credentials, app.state.chores = build_stores(settings)
    app.state.sessions = SessionManager(settings.session_secret, settings.session_expire_minutes)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # -------------------------------
    # Error translation
    # -------------------------------

    @app.exception_handler(Unauthenticated)
    async def redirect_to_login(request: Request, exc: Unauthenticated):
        return RedirectResponse("/login.html", status_code=status.HTTP_302_FOUND)

    @app.exception_handler(ChoreTrackerError)
    async def chore_tracker_error(request: Request, exc: ChoreTrackerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})

    app.include_router(auth.router)
    app.include_router(chores.router)

    # Mounted last so the API routes above win.
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")

    logger.info("Chore tracker ready (%s store)", settings.store_backend)
    return app


app = create_app()


if __name__ == "__main__":
    settings = app.state.settings
    logger.info("Server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
