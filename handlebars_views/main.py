"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from handlebars_views.config import get_settings
from handlebars_views.core.app_factory import create_app
from handlebars_views.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "handlebars_views.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
