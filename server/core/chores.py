# server/core/chores.py

import logging
from abc import ABC, abstractmethod
from itertools import count
from threading import Lock

from core.errors import MissingField, NotCompleted, NotFound
from core.records import Chore
from models.chore import Chore as ChoreModel


logger = logging.getLogger(__name__)


class ChoreStore(ABC):
    """
    Chore records: create, list, complete, delete.
    Ids are never reused, even after a chore is deleted.
    """

    def create(self, title: str, assigned_to: str, created_by: str) -> Chore:
        if not title or not assigned_to:
            raise MissingField("title and assignedTo required")
        chore = self._insert(title, assigned_to, created_by)
        logger.info("Chore %d created by %s", chore.id, created_by)
        return chore

    @abstractmethod
    def _insert(self, title: str, assigned_to: str, created_by: str) -> Chore:
        ...

    @abstractmethod
    def list(self) -> list[Chore]:
        ...

    @abstractmethod
    def complete(self, chore_id: int) -> Chore:
        ...

    @abstractmethod
    def delete(self, chore_id: int) -> None:
        ...


class MemoryChoreStore(ChoreStore):

    def __init__(self):
        self._chores: list[Chore] = []
        self._ids = count(1)
        self._lock = Lock()

    def _index(self, chore_id: int) -> int:
        for i, chore in enumerate(self._chores):
            if chore.id == chore_id:
                return i
        raise NotFound()

    def _insert(self, title: str, assigned_to: str, created_by: str) -> Chore:
        with self._lock:
            chore = Chore(
                id=next(self._ids),
                title=title,
                assigned_to=assigned_to,
                created_by=created_by,
            )
            self._chores.append(chore)
            return chore.model_copy()

    def list(self) -> list[Chore]:
        with self._lock:
            return [c.model_copy() for c in self._chores]

    def complete(self, chore_id: int) -> Chore:
        with self._lock:
            chore = self._chores[self._index(chore_id)]
            chore.completed = True
            result = chore.model_copy()
        logger.info("Chore %d completed", chore_id)
        return result

    def delete(self, chore_id: int) -> None:
        with self._lock:
            i = self._index(chore_id)
            if not self._chores[i].completed:
                raise NotCompleted()
            del self._chores[i]
        logger.info("Chore %d deleted", chore_id)


class SqlChoreStore(ChoreStore):

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def _get(self, db, chore_id: int) -> ChoreModel:
        row = db.get(ChoreModel, chore_id)
        if row is None:
            raise NotFound()
        return row

    def _insert(self, title: str, assigned_to: str, created_by: str) -> Chore:
        with self.session_factory() as db:
            row = ChoreModel(title=title, assigned_to=assigned_to, completed=False, created_by=created_by)
            db.add(row)
            db.commit()
            return row.to_record()

    def list(self) -> list[Chore]:
        with self.session_factory() as db:
            return [row.to_record() for row in db.query(ChoreModel).order_by(ChoreModel.id).all()]

    def complete(self, chore_id: int) -> Chore:
        with self.session_factory() as db:
            row = self._get(db, chore_id)
            row.completed = True
            db.commit()
            result = row.to_record()
        logger.info("Chore %d completed", chore_id)
        return result

    def delete(self, chore_id: int) -> None:
        with self.session_factory() as db:
            row = self._get(db, chore_id)
            if not row.completed:
                raise NotCompleted()
            db.delete(row)
            db.commit()
        logger.info("Chore %d deleted", chore_id)
