"""Main application entry point.

Runs the NiceGUI chat client, optionally mounted on the local workflow
webhook (FastAPI) so both are served from one port.
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


def run_integrated() -> None:
    """Run the local webhook with the chat UI mounted on the same server.

    The webhook answers at /webhook/chat, the UI is served at /.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="n8n AI Chatbot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "n8n-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Local webhook available at http://localhost:{port}/webhook/chat")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_ui() -> None:
    """Run only the chat UI on port 8080, talking to a real n8n webhook."""
    from nicegui import ui

    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    logger.info("Starting chat UI on http://localhost:8080")
    ui.run(
        title="n8n AI Chatbot",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "n8n-chat-secret"),
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=integrated to serve the local webhook alongside the UI.
    Default is UI-only mode.
    """
    mode = os.getenv("RUN_MODE", "ui").lower()

    logger.info(f"Starting n8n chat client in {mode} mode")

    if mode == "integrated":
        run_integrated()
    else:
        run_ui()


if __name__ in {"__main__", "__mp_main__"}:
    main()
