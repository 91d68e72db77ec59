from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OrganizerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str | None
    location: str | None
    start_time: datetime
    end_time: datetime | None
    max_participants: int | None
    status: str
    organizer_id: int
    created_at: datetime | None
    organizer: OrganizerOut


class ActivityListOut(BaseModel):
    activities: list[ActivityOut]
