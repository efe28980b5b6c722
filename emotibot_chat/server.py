"""
FastAPI server for the EmotiBot Chat service.

This module exposes the chat session over HTTP: posting messages, reading
the conversation log and current mood, and following mood changes through
Server-Sent Events.
"""

import asyncio
import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from . import __version__
from .config import get_settings
from .log import get_logger, setup_logging
from .models import ConversationTurn, MoodSnapshot, TurnReply
from .session import ChatSession, build_session

log = get_logger(__name__)


# API Request/Response Schemas
class MessageIn(BaseModel):
    """Payload for posting a user message."""

    text: str = Field(..., min_length=1, pattern=r"\S", description="Message text")


class ConversationResponse(BaseModel):
    """Response model for the conversation log."""

    turns: list[ConversationTurn] = Field(..., description="All turns, oldest first")


def create_app(session: ChatSession) -> FastAPI:
    """
    Create a FastAPI application around the given chat session.

    Args:
        session: The ChatSession instance to serve

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        yield
        await session.aclose()

    app = FastAPI(
        title="EmotiBot Chat",
        description="Emotion-aware supportive chat with mood trend tracking",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root() -> dict[str, str | bool]:
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "emotibot-chat",
            "remote": session.remote_enabled,
        }

    @app.post("/messages")
    async def post_message(message: MessageIn) -> TurnReply:
        """
        Classify a user message and return the supportive reply.

        Args:
            message: The user message payload

        Returns:
            The classification and the reply text
        """
        try:
            return await session.process_user_message(message.text)
        except Exception as e:
            log.exception("turn_failed")
            raise HTTPException(
                status_code=500, detail=f"Failed to process message: {str(e)}"
            )

    @app.get("/messages")
    async def get_messages() -> ConversationResponse:
        """Get the whole conversation, including the greeting."""
        return ConversationResponse(turns=await session.turns())

    @app.get("/trend")
    async def get_trend() -> MoodSnapshot:
        """Get the current mood trend and the history it was computed from."""
        return await session.store.snapshot()

    @app.get("/trend/stream")
    async def stream_trend() -> StreamingResponse:
        """
        Stream mood snapshots via Server-Sent Events.

        The current snapshot is sent immediately upon connection, then one
        more after every user message.

        Returns:
            StreamingResponse with text/event-stream content type
        """

        async def event_generator() -> AsyncGenerator[str, None]:
            try:
                async with session.store.stream() as snapshots:
                    async for snapshot in snapshots:
                        yield f"data: {snapshot.model_dump_json()}\n\n"
            except asyncio.CancelledError:
                pass
            except Exception as e:
                error_data = json.dumps({"error": str(e)})
                yield f"event: error\ndata: {error_data}\n\n"

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Headers": "*",
            },
        )

    return app


def main(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Main entry point for the server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, json_mode=settings.is_prod)
    uvicorn.run(
        create_app(build_session(settings)),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
