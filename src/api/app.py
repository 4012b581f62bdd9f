"""FastAPI application factory for the local workflow stand-in.

Serves the fake Chat Trigger webhook and, in integrated mode, hosts the
NiceGUI chat page.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.webhook import router as webhook_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="n8n Chat Webhook (local)",
        description=(
            "Local stand-in for an n8n Chat Trigger webhook. Replies as a "
            "data: stream, a single JSON object, or a workflow error, and "
            "issues a chat id for multi-turn conversations."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Browsers only expose the chat id header to scripts if it is listed.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(webhook_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "n8n-chat-webhook"}

    return application


app = create_app()
