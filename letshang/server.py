import logging

import uvicorn

from letshang.core.config import settings

logger = logging.getLogger("letshang.server")


def main() -> None:
    # Importing the app configures logging.
    from letshang.main import app

    base_url = f"http://localhost:{settings.PORT}"
    logger.info(
        "Let's hang server starting",
        extra={
            "port": settings.PORT,
            "health_url": f"{base_url}/health",
            "home_url": f"{base_url}/",
            "test_url": f"{base_url}/api/test",
        },
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
