"""
HTTP API adapter for the profession analyzer.

Architectural role:
- Serve the single-page frontend.
- Accept submissions and start pipeline runs in the background.
- Expose the orchestrator's state as a JSON snapshot and as an SSE stream.

Endpoint responsibilities:
- `GET /`: HTML page.
- `POST /api/analyze`: validate body, ignore blank text, start a run.
- `GET /api/state`: current `ViewState` JSON.
- `GET /api/events`: `text/event-stream` of `ViewState` frames.

Lifecycle:
- One `GeminiClient` and one `Orchestrator` are created when the app starts and
  stored on `app.state`. A client passed to `create_app` is used instead (tests).
- In-flight runs are awaited on shutdown so no task is destroyed mid-request.

Error handling strategy:
- Malformed bodies are rejected by pydantic validation (HTTP 422).
- Pipeline failures never reach this layer; they are part of `ViewState`.
- Streaming cancels/disconnects are handled inside the SSE generator.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, StreamingResponse
from pydantic import BaseModel

from ai_vs_professions.api.frontend import render_page
from ai_vs_professions.core.engine import Orchestrator
from ai_vs_professions.core.result_types import ViewState
from ai_vs_professions.llm.client import GeminiClient
from ai_vs_professions.logging_utils import setup_logging


logger = logging.getLogger(__name__)

KEEPALIVE_SECONDS = 15.0


# ============================================================
# Request Schema
# ============================================================

class AnalyzeRequest(BaseModel):
    """Body of `POST /api/analyze`."""
    profession: str


def format_sse(state: ViewState) -> str:
    """Encode one snapshot as an SSE `data:` frame."""
    return f"data: {json.dumps(state.to_dict(), ensure_ascii=False)}\n\n"


async def event_stream(orchestrator: Orchestrator, request, keepalive: float = KEEPALIVE_SECONDS):
    """
    Yield SSE frames: the current snapshot first, then one frame per state change.

    Side effects:
    - Subscribes a queue-backed listener on first iteration; it is removed when the
      stream ends for any reason (close, cancel or client disconnect).
    - Sends a keep-alive comment every `keepalive` seconds without a state change,
      after checking `request.is_disconnected()`.
    """
    queue: asyncio.Queue = asyncio.Queue()
    unsubscribe = orchestrator.subscribe(queue.put_nowait)

    try:
        yield format_sse(orchestrator.state)
        while True:
            try:
                state = await asyncio.wait_for(queue.get(), timeout=keepalive)
            except asyncio.TimeoutError:
                if await request.is_disconnected():
                    logger.debug("Event stream client disconnected")
                    return
                yield ": keep-alive\n\n"
                continue
            yield format_sse(state)
    except (asyncio.CancelledError, BrokenPipeError, ConnectionResetError):
        logger.debug("Event stream closed by client")
        return
    finally:
        unsubscribe()


# ============================================================
# App Factory
# ============================================================

def create_app(client=None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        client: Transport client to use. When `None`, a `GeminiClient` is built
            from the environment at startup and closed at shutdown.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = client is None
        active_client = GeminiClient.from_env() if owned else client

        app.state.orchestrator = Orchestrator(active_client)
        app.state.tasks = set()
        logger.info("Profession analyzer started")

        try:
            yield
        finally:
            pending = list(app.state.tasks)
            if pending:
                logger.info("Waiting for %d in-flight runs", len(pending))
                await asyncio.gather(*pending, return_exceptions=True)
            if owned:
                active_client.close()

    app = FastAPI(title="AI vs Professions", lifespan=lifespan)

    @app.get("/", response_class=HTMLResponse)
    def index():
        return HTMLResponse(render_page())

    @app.get("/api/state")
    def get_state(request: Request):
        """Current snapshot. There is one orchestrator per process, so every
        connected browser reads and drives the same state."""
        return request.app.state.orchestrator.state.to_dict()

    @app.post("/api/analyze")
    async def analyze(body: AnalyzeRequest, request: Request):
        """
        Start a pipeline run for `body.profession`.

        - Blank text -> `200 {"accepted": false}`; no run, state unchanged.
        - Otherwise the run is opened synchronously (state is already `loading`
          when the response is sent) and executed as a background task.
        """
        orchestrator: Orchestrator = request.app.state.orchestrator

        sequence = orchestrator.begin(body.profession)
        if sequence is None:
            return {"accepted": False}

        tasks: set = request.app.state.tasks
        task = asyncio.create_task(orchestrator.run(sequence, body.profession))
        tasks.add(task)
        task.add_done_callback(tasks.discard)

        return JSONResponse(status_code=202, content={"accepted": True, "sequence": sequence})

    @app.get("/api/events")
    async def events(request: Request):
        """
        Stream every `ViewState` as an SSE frame, starting with the current one.

        See `event_stream` for framing, keep-alive and disconnect handling.
        """
        orchestrator: Orchestrator = request.app.state.orchestrator
        return StreamingResponse(event_stream(orchestrator, request), media_type="text/event-stream")

    return app
