"""
Entry point for the Recipe Box API.

Loads .env, configures logging (and logfire when enabled), then serves the
FastAPI app with uvicorn.
"""

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

if __name__ == "__main__":
    import uvicorn

    from api import app
    from config.settings import settings
    from services.telemetry import configure_logging

    configure_logging(settings)

    # Run FastAPI server with a single worker
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower()
    )
