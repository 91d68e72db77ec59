import enum
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from letshang.models.base import Base, UtcDateTime


class ActivityStatus(str, enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Activity(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    start_time: Mapped[datetime] = mapped_column(UtcDateTime(), index=True)
    end_time: Mapped[datetime | None] = mapped_column(UtcDateTime(), nullable=True)
    max_participants: Mapped[int | None] = mapped_column(Integer, nullable=True)

    status: Mapped[str] = mapped_column(
        String(20),
        default=ActivityStatus.ACTIVE.value,
        server_default=ActivityStatus.ACTIVE.value,
        index=True,
    )

    organizer_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    organizer: Mapped["User"] = relationship("User")

    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime(), server_default=func.now()
    )
