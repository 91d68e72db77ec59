from letshang.models.base import Base
from letshang.models.user import User
from letshang.models.activity import Activity, ActivityStatus

__all__ = [
    "Base",
    "User",
    "Activity",
    "ActivityStatus",
]
