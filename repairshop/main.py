"""
Main application entry point.
"""

import uvicorn

from repairshop.api.app import create_app
from repairshop.config.settings import settings

app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "repairshop.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
