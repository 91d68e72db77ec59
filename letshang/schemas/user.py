from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserOut(BaseModel):
    """Public projection of a user; credential columns have no field here."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    location: str | None
    created_at: datetime | None


class UserListOut(BaseModel):
    users: list[UserOut]


class UsersStubOut(BaseModel):
    message: str
    users: list[UserOut]
    count: int
