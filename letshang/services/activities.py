from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager

from letshang.core.errors import StoreError
from letshang.models.activity import Activity, ActivityStatus
from letshang.models.user import User

UPCOMING_ACTIVITIES_LIMIT = 20


def list_upcoming_active_activities(
    db: Session,
    now: datetime | None = None,
    limit: int = UPCOMING_ACTIVITIES_LIMIT,
) -> list[Activity]:
    """
    Active activities starting at or after ``now``, soonest first.

    Only the organizer's id and name are loaded.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    q = (
        db.query(Activity)
        .join(Activity.organizer)
        .options(contains_eager(Activity.organizer).load_only(User.id, User.name))
        .filter(Activity.status == ActivityStatus.ACTIVE.value)
        .filter(Activity.start_time >= now)
        .order_by(Activity.start_time.asc(), Activity.id.asc())
        .limit(limit)
    )
    try:
        return q.all()
    except SQLAlchemyError as exc:
        raise StoreError("Get activities error") from exc
