# server/models/chore.py

from sqlalchemy import Boolean, Column, Integer, String
from core.records import Chore as ChoreRecord
from . import Base


class Chore(Base):
    __tablename__ = "chores"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    assigned_to = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_by = Column(String, index=True, nullable=False)

    def to_record(self) -> ChoreRecord:
        return ChoreRecord(
            id=self.id,
            title=self.title,
            assigned_to=self.assigned_to,
            completed=self.completed,
            created_by=self.created_by,
        )
