"""
Command-line interface tools for the EmotiBot Chat service.
"""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any

import httpx
import typer
from httpx_sse import ServerSentEvent, aconnect_sse

from .config import get_settings
from .log import setup_logging
from .models import ClassificationResult, MoodSnapshot, MoodTrend, TurnReply
from .session import build_session
from .taxonomy import metadata_for

DEFAULT_BASE_URL = "http://localhost:8000"

TREND_MARKERS = {
    MoodTrend.IMPROVING: "↗ improving",
    MoodTrend.WORSENING: "↘ worsening",
    MoodTrend.STABLE: "→ stable",
    MoodTrend.NEUTRAL: "· not enough history",
}

app = typer.Typer(help="EmotiBot Chat CLI tools")


# MARK: - CLI Entry Points


def cli_chat() -> None:
    """Entry point for the interactive chat command."""
    typer.run(chat)


def cli_send() -> None:
    """Entry point for the send command."""
    typer.run(send)


def cli_stream() -> None:
    """Entry point for the trend stream command."""
    typer.run(stream)


# MARK: - Commands


@app.command()
def chat() -> None:
    """Chat locally, without a server. Empty line or Ctrl+D quits."""
    settings = get_settings()
    setup_logging(settings.log_level, json_mode=settings.is_prod)

    async def _chat() -> None:
        session = build_session(settings)
        mode = "remote model" if session.remote_enabled else "keyword matching"
        try:
            turns = await session.turns()
            print(f"bot > {turns[0].text}")
            print(f"(classifying with {mode})")

            while True:
                try:
                    text = await asyncio.to_thread(input, "you > ")
                except EOFError:
                    break
                if not text.strip():
                    break

                result = await session.process_user_message(text)
                trend = await session.current_trend()
                print(f"      {_format_badge(result.classification)}")
                print(f"bot > {result.reply}")
                print(f"mood: {TREND_MARKERS[trend]}")
        finally:
            await session.aclose()

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        print("\nBye")


@app.command()
def send(
    text: str = typer.Argument(..., help="The message to send"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EmotiBot service"
    ),
) -> None:
    """Send a message to the EmotiBot service and print the reply."""

    async def _send() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.post(f"{base_url}/messages", json={"text": text})
            response.raise_for_status()
            result = TurnReply.model_validate(response.json())
            print(_format_badge(result.classification))
            print(result.reply)

    _run_with_error_handling(_send(), base_url)


@app.command()
def trend(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EmotiBot service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Get the current mood trend from the EmotiBot service."""

    async def _trend() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/trend")
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            print(_format_snapshot(MoodSnapshot.model_validate(result)))

    _run_with_error_handling(_trend(), base_url)


@app.command()
def stream(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the EmotiBot service"
    ),
) -> None:
    """Stream mood trend updates in real-time."""

    async def _stream() -> None:
        print(f"Streaming from {base_url}/trend/stream... (Ctrl+C to stop)")

        async with httpx.AsyncClient(timeout=None) as client:
            async with aconnect_sse(
                client, "GET", f"{base_url}/trend/stream"
            ) as event_source:
                async for sse in event_source.aiter_sse():
                    _handle_sse_event(sse)

    _run_with_error_handling(_stream(), base_url)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the EmotiBot HTTP server."""
    from .server import main

    main(host=host, port=port)


# MARK: - Private Helpers


def _format_badge(classification: ClassificationResult) -> str:
    meta = metadata_for(classification.category)
    return f"{meta.icon} {meta.label} ({classification.intensity}%)"


def _format_snapshot(snapshot: MoodSnapshot) -> str:
    """Format the trend with the latest emotion, if any."""
    line = TREND_MARKERS[snapshot.trend]
    if snapshot.current is None:
        return line
    return f"{line} | now: {_format_badge(snapshot.current)}"


def _handle_sse_event(sse: ServerSentEvent) -> None:
    """Handle a single SSE event."""
    try:
        if sse.event == "error":
            error_data = json.loads(sse.data)
            print(f"Server error: {error_data.get('error', 'Unknown error')}")
            return

        snapshot = MoodSnapshot.model_validate_json(sse.data)
        print(_format_snapshot(snapshot))

    except ValueError as e:
        print(f"Warning: Could not parse SSE data: {sse.data} - {e}")


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
