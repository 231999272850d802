# server/core/records.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


ORGANIZER = "organizer"


class Identity(BaseModel):
    """
    The authenticated identity bound to a session.
    This is the only view of a user that leaves the server.
    """
    username: str
    role: str

    @property
    def is_organizer(self) -> bool:
        return self.role == ORGANIZER


class UserRecord(BaseModel):
    username: str
    password_hash: str
    role: str

    def identity(self) -> Identity:
        return Identity(username=self.username, role=self.role)


class Chore(BaseModel):
    """
    A household chore. Serialized with camelCase keys
    (assignedTo, createdBy) for the browser client.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    assigned_to: str
    completed: bool = False
    created_by: str

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
