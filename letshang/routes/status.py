from fastapi import APIRouter, Depends, Request

from letshang.core.config import Settings
from letshang.schemas.status import EchoOut, HealthOut, RootOut
from letshang.schemas.user import UsersStubOut
from letshang.services.status import build_echo, build_health, build_root

router = APIRouter(tags=["status"])

READ_METHODS = ["GET", "HEAD"]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.api_route("/", methods=READ_METHODS, response_model=RootOut)
def root(app_settings: Settings = Depends(get_app_settings)):
    return build_root(app_settings.APP_VERSION)


@router.api_route("/health", methods=READ_METHODS, response_model=HealthOut)
def health(app_settings: Settings = Depends(get_app_settings)):
    return build_health(app_settings.APP_VERSION)


@router.api_route("/api/test", methods=READ_METHODS, response_model=EchoOut)
def api_test():
    return build_echo()


@router.api_route("/api/users", methods=READ_METHODS, response_model=UsersStubOut)
def users_placeholder():
    """
    Placeholder kept for clients of the first deployment.

    Does not touch the database; the live listing is served at /api/v1/users.
    """
    return UsersStubOut(message="Users endpoint working!", users=[], count=0)
