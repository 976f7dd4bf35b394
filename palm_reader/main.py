"""Main application entry point.

Runs FastAPI with the NiceGUI reading page mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from palm_reader.api.app import create_app
    from palm_reader.ui.palm_page import APP_TITLE, palm_page  # noqa: F401 - Registers the page

    if not os.getenv("GEMINI_API_KEY", "").strip():
        logger.warning("GEMINI_API_KEY is not set - readings will fail until it is configured")

    app = create_app()

    ui.run_with(
        app,
        title=APP_TITLE,
        favicon="✋",
        dark=True,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "palm-reader-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting Palm Reader on http://{host}:{port}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
