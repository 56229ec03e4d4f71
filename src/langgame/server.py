"""
Web server for the language guessing game.

Serves the static client page and stateless JSON endpoints backed by the
read-only language catalog. The catalog must be fully built before a
GameServer is created.

Routes:
- GET / - Serve the game UI (static HTML)
- GET /game/new - Start a round with words from a random language
- GET /game/hint?language=xx - More words from the same language
- GET /game/languages - Display names of all playable languages
- GET /status - Server health
"""

import logging
from datetime import datetime
from pathlib import Path

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import (
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    Response,
)
from starlette.routing import Route

from .catalog import Catalog, EmptyCatalogError
from .models import GamePayload, ServerStatus
from .sampler import sample

logger = logging.getLogger("langgame")

STATIC_DIR = Path(__file__).parent / "static"


class GameServer:
    """
    Starlette app and Uvicorn runner for the game.

    Attributes:
        catalog: Shared, read-only language catalog
        host: Server bind address
        port: Server port
        start_time: Server start timestamp
    """

    def __init__(
        self,
        catalog: Catalog,
        host: str = "0.0.0.0",
        port: int = 8000,
    ) -> None:
        """
        Initialize the game server.

        Args:
            catalog: Fully built language catalog
            host: Server bind address (default: 0.0.0.0)
            port: Server port (default: 8000)
        """
        self.catalog = catalog
        self.host = host
        self.port = port
        self.start_time = datetime.now()
        self.app = self._build_app()

        logger.info(f"GameServer initialized on {host}:{port} with {len(catalog)} languages")

    def _build_app(self) -> Starlette:
        routes = [
            Route("/", self.get_index, methods=["GET"]),
            Route("/game/new", self.get_new_game, methods=["GET"]),
            Route("/game/hint", self.get_hint, methods=["GET"]),
            Route("/game/languages", self.get_languages, methods=["GET"]),
            Route("/status", self.get_status, methods=["GET"]),
        ]
        return Starlette(debug=False, routes=routes)

    async def get_index(self, request: Request) -> Response:
        """Serve the game page."""
        static_file = STATIC_DIR / "index.html"
        if not static_file.exists():
            return PlainTextResponse("UI not available", status_code=503)
        return HTMLResponse(static_file.read_text(encoding="utf-8"))

    async def get_new_game(self, request: Request) -> Response:
        """
        Start a round.

        Returns:
            JSON GamePayload, or 503 if no language is loaded
        """
        try:
            entry = self.catalog.choose()
        except EmptyCatalogError:
            logger.error("New game requested but the language catalog is empty")
            return PlainTextResponse("No languages available", status_code=503)

        payload = GamePayload.for_entry(entry, sample(entry.words))
        return JSONResponse(payload.model_dump())

    async def get_hint(self, request: Request) -> Response:
        """
        Return another batch of words from the requested language.

        Returns:
            JSON list of words, or 400 if the language is missing or unknown
        """
        language = request.query_params.get("language")
        if language is None:
            return PlainTextResponse("Missing language parameter", status_code=400)

        entry = self.catalog.find(language)
        if entry is None:
            logger.info(f"Hint requested for unknown language '{language}'")
            return PlainTextResponse("Unknown language", status_code=400)

        return JSONResponse(sample(entry.words))

    async def get_languages(self, request: Request) -> Response:
        """List display names for the guess autocomplete."""
        return JSONResponse(self.catalog.display_names())

    async def get_status(self, request: Request) -> Response:
        """Get server health and status information."""
        status = ServerStatus(
            uptime_seconds=(datetime.now() - self.start_time).total_seconds(),
            languages=len(self.catalog),
        )
        return JSONResponse(status.model_dump())

    def run(self, log_level: str = "info") -> None:
        """Serve requests until interrupted. Blocks the calling thread."""
        logger.info(f"Serving on http://{self.host}:{self.port}")
        uvicorn.run(self.app, host=self.host, port=self.port, log_level=log_level)


__all__ = ["GameServer", "STATIC_DIR"]
