from __future__ import annotations

from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from letshang.core.errors import StoreError
from letshang.models.user import User

USER_LIST_LIMIT = 10

USER_PUBLIC_COLUMNS = (
    User.id,
    User.name,
    User.email,
    User.location,
    User.created_at,
)


def list_users(db: Session, limit: int = USER_LIST_LIMIT) -> list[Row]:
    # No ORDER BY: rows come back in whatever order the database chooses.
    try:
        return db.query(*USER_PUBLIC_COLUMNS).limit(limit).all()
    except SQLAlchemyError as exc:
        raise StoreError("Get users error") from exc
