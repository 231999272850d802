# server/models/user.py

from sqlalchemy import Column, Integer, String
from core.records import UserRecord
from . import Base


class User(Base):
    """
    A registered account. Only the bcrypt hash is kept; the role
    decides whether the user may create chores ("organizer").
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="member")

    @classmethod
    def from_record(cls, user: UserRecord) -> "User":
        return cls(username=user.username, hashed_password=user.password_hash, role=user.role)

    def to_record(self) -> UserRecord:
        return UserRecord(username=self.username, password_hash=self.hashed_password, role=self.role)
