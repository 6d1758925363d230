import logging
import time
from pathlib import Path
from typing import Any, Dict

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from food_assist.app.errors import InvalidTransitionError, SubmissionInFlightError
from food_assist.app.logging import configure_logging
from food_assist.app.render import format_history, notification_for, render_session
from food_assist.app.schemas import AdviceRequest, ChatRequest, ChatResponse, SessionView, VideoSuggestion
from food_assist.app.settings import settings
from food_assist.observability.langsmith import configure_tracing, tracing_config
from food_assist.observability.metrics import build_meta
from food_assist.orchestration.graph import build_workflow
from food_assist.session.state import AdviceReceived, SubmissionFailed, Submitted
from food_assist.session.store import SessionStore

configure_logging(settings.log_level)
configure_tracing()

app = FastAPI(title="Food Assist")
logger = logging.getLogger(__name__)


@app.on_event("startup")
def check_credentials():
    if not settings.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; video suggestions will fall back to search links")
    if not settings.openai_api_key:
        logger.info("OPENAI_API_KEY not in settings; langchain-openai will read it from the environment")


# Serve static files (chat UI)
static_dir = Path(__file__).parent.parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
workflow = build_workflow()
sessions = SessionStore()


def get_workflow():
    return workflow


def get_store() -> SessionStore:
    return sessions


def get_configurable() -> Dict[str, Any]:
    """Per-run graph config; tests swap in fake models and HTTP clients here."""
    return {}


def _run_workflow(
    wf, session_id: str, request: AdviceRequest, configurable: Dict[str, Any], start: int
) -> Dict[str, Any]:
    state = {
        "request": request,
        "meta": {"start_time_ms": start},
        "tool_calls": [],
    }
    return wf.invoke(state, config={**tracing_config(session_id, request), "configurable": configurable})


@app.post("/chat", response_model=ChatResponse)
def chat(
    payload: ChatRequest,
    wf=Depends(get_workflow),
    store: SessionStore = Depends(get_store),
    configurable: Dict[str, Any] = Depends(get_configurable),
):
    start = int(time.time() * 1000)
    try:
        started = store.begin(payload.session_id, Submitted(food_item=payload.food_item, question=payload.question))
        pending_id = started.pending_id
    except SubmissionInFlightError as exc:
        raise HTTPException(status_code=409, detail=str(exc))

    request = AdviceRequest(food_item=payload.food_item, question=payload.question)
    result: Dict[str, Any] = {}
    try:
        result = _run_workflow(wf, payload.session_id, request, configurable, start)
        advice = result.get("advice")
        if advice is None:
            event = SubmissionFailed(detail=result.get("advice_error") or "An unknown error occurred.")
        else:
            event = AdviceReceived(advice=advice, video=result.get("video") or VideoSuggestion())
    except Exception as exc:  # noqa: BLE001
        logger.exception("submission workflow failed")
        event = SubmissionFailed(detail=str(exc) or "An unknown error occurred.")

    try:
        state = store.apply(payload.session_id, event, pending_id=pending_id)
    except InvalidTransitionError as exc:
        logger.warning("Dropping submission result: %s", exc)
        raise HTTPException(status_code=409, detail=str(exc))

    if result.get("advice_error"):
        logger.warning("Advice error (%s): %s", result.get("advice_error_kind"), result["advice_error"])

    try:
        view = render_session(state)
        return ChatResponse(
            **view.model_dump(),
            notification=notification_for(state),
            meta=build_meta(result.get("meta"), start),
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("chat handler failed")
        raise HTTPException(status_code=500, detail=str(exc))


@app.get("/sessions/{session_id}", response_model=SessionView)
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    return render_session(store.get(session_id))


@app.delete("/sessions/{session_id}")
def reset_session(session_id: str, store: SessionStore = Depends(get_store)):
    return {"session_id": session_id, "reset": store.reset(session_id)}


@app.get("/sessions/{session_id}/transcript", response_class=PlainTextResponse)
def transcript(session_id: str, store: SessionStore = Depends(get_store)):
    if session_id not in store:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return format_history(store.get(session_id).messages)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    """Serve the chat UI."""
    ui_path = static_dir / "index.html"
    if ui_path.exists():
        return FileResponse(ui_path)
    return {"message": "Chat UI not found. Use POST /chat endpoint."}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
