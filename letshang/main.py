from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from letshang.core.config import Settings, settings
from letshang.core.errors import register_error_handlers
from letshang.core.logging_setup import configure_logging
from letshang.core.observability import setup_observability
from letshang.routes.activities import router as activities_router
from letshang.routes.status import router as status_router
from letshang.routes.users import router as users_router


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(title="Let's hang API", version=app_settings.APP_VERSION)
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_observability(app, app_settings)
    register_error_handlers(app)

    app.include_router(status_router)
    if app_settings.ENABLE_DATA_ROUTES:
        app.include_router(activities_router)
        app.include_router(users_router)

    return app


configure_logging(settings.LOG_LEVEL)

app = create_app()
