"""ASGI entry point: ``uvicorn faculty_api.main:app``."""

import uvicorn

from faculty_api.application import create_app
from faculty_api.config import get_settings
from faculty_api.utils.logging import setup_logging

setup_logging()
app = create_app()


def run() -> None:
    """Serve the app with the host, port and reload flag from settings."""
    settings = get_settings()
    uvicorn.run(
        "faculty_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
