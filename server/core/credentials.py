# server/core/credentials.py

import logging
from abc import ABC, abstractmethod
from threading import Lock
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from core.errors import DuplicateUser, InvalidCredentials, MissingField
from core.records import UserRecord
from models.user import User as UserModel


logger = logging.getLogger(__name__)


def make_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


class CredentialStore(ABC):
    """
    Registered users and password verification.

    Backends only implement lookup and insert; hashing and the
    validation rules live here so every backend behaves the same.
    """

    def __init__(self, pwd_context: CryptContext | None = None):
        self.pwd_context = pwd_context or make_password_context()

    def register(self, username: str, password: str, role: str) -> UserRecord:
        if not username or not password or not role:
            raise MissingField("Missing fields: username/password/role")

        if self._find(username) is not None:
            raise DuplicateUser()

        user = UserRecord(
            username=username,
            password_hash=self.pwd_context.hash(password),
            role=role,
        )
        self._add(user)
        logger.info("Registered user %s (%s)", username, role)
        return user

    def verify(self, username: str, password: str) -> UserRecord:
        # Same error whether the user is missing or the password is wrong.
        user = self._find(username) if username else None
        if not user or not password or not self.pwd_context.verify(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise InvalidCredentials()
        return user

    @abstractmethod
    def _find(self, username: str) -> UserRecord | None:
        ...

    @abstractmethod
    def _add(self, user: UserRecord) -> None:
        """Insert a new user, raising DuplicateUser if the name is taken."""


class MemoryCredentialStore(CredentialStore):

    def __init__(self, pwd_context: CryptContext | None = None):
        super().__init__(pwd_context)
        self._users: dict[str, UserRecord] = {}
        self._lock = Lock()

    def _find(self, username: str) -> UserRecord | None:
        with self._lock:
            return self._users.get(username)

    def _add(self, user: UserRecord) -> None:
        # Re-checked under the lock: hashing happens outside it, so two
        # registrations for one name can both pass the first check.
        with self._lock:
            if user.username in self._users:
                raise DuplicateUser()
            self._users[user.username] = user


class SqlCredentialStore(CredentialStore):

    def __init__(self, session_factory, pwd_context: CryptContext | None = None):
        super().__init__(pwd_context)
        self.session_factory = session_factory

    def _find(self, username: str) -> UserRecord | None:
        with self.session_factory() as db:
            row = db.query(UserModel).filter(UserModel.username == username).first()
            return row.to_record() if row else None

    def _add(self, user: UserRecord) -> None:
        with self.session_factory() as db:
            db.add(UserModel.from_record(user))
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise DuplicateUser()
