from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from letshang.core.db import get_db
from letshang.schemas.activity import ActivityListOut, ActivityOut
from letshang.services.activities import list_upcoming_active_activities

router = APIRouter(prefix="/api/v1/activities", tags=["activities"])


@router.api_route("", methods=["GET", "HEAD"], response_model=ActivityListOut)
def list_activities(db: Session = Depends(get_db)):
    """
    Upcoming active activities, soonest first, at most 20.
    """
    activities = list_upcoming_active_activities(db)
    return ActivityListOut(activities=[ActivityOut.model_validate(a) for a in activities])
