from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from letshang.core.db import get_db
from letshang.schemas.user import UserListOut, UserOut
from letshang.services.users import list_users

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.api_route("", methods=["GET", "HEAD"], response_model=UserListOut)
def get_users(db: Session = Depends(get_db)):
    users = list_users(db)
    return UserListOut(users=[UserOut.model_validate(u) for u in users])
