"""
main.py — FastAPI application entry point.

Routes:
  GET    /health                         — profile source, sessions, LLM status
  GET    /profile                        — the loaded profile document
  POST   /chat                           — ask the avatar a question
  GET    /sessions/{session_id}/history  — recent transcript for a session
  DELETE /sessions/{session_id}          — reset a session's context and cache

Run locally:
  uvicorn app.main:app --reload --port 8000

Design decisions:
- Routes are thin; all logic lives in assistant.py and the responder package
- /chat always answers with text, the pipeline degrades instead of erroring
- Sync routes: the pipeline is CPU-only and finishes in milliseconds
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.assistant import answer_question
from app.config import get_settings
from app.conversation.session import clear_session, find_session, get_session_count
from app.llm.client import check_llm_reachable
from app.models import (
    ChatRequest, ChatResponse, HealthResponse, HistoryMessage, HistoryResponse,
    ProfileDocument,
)
from app.observability.logger import get_logger, Timer
from app.profile.loader import get_profile, is_default_profile

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Loads the profile once up front."""
    settings = get_settings()
    profile = get_profile()
    logger.info("app_startup", extra={
        "version": "1.0.0",
        "profile_path": settings.profile_path,
        "profile_default": is_default_profile(profile),
        "llm_enabled": settings.llm_enabled,
    })
    yield
    logger.info("app_shutdown", extra={"sessions": get_session_count()})


app = FastAPI(
    title="Portfolio Avatar Chat",
    description="Rule-based persona chat over a personal profile document.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)


# ── Health ─────────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse, tags=["system"])
def health_check():
    """
    Service health. "degraded" means the built-in default profile is in use
    or the LLM is enabled but unreachable; chat still works in both cases.
    """
    settings = get_settings()
    profile_default = is_default_profile(get_profile())
    llm_reachable = check_llm_reachable() if settings.llm_enabled else None

    status = "ok"
    if profile_default or llm_reachable is False:
        status = "degraded"

    return HealthResponse(
        status=status,
        profile_source="default" if profile_default else "file",
        active_sessions=get_session_count(),
        llm_enabled=settings.llm_enabled,
        llm_reachable=llm_reachable,
    )


@app.get("/profile", response_model=ProfileDocument, tags=["system"])
def profile():
    return get_profile()


# ── Chat ──────────────────────────────────────────────────────────────────────

@app.post("/chat", response_model=ChatResponse, tags=["chat"])
def chat(request: ChatRequest):
    """Answer one question within a conversation session."""
    with Timer() as t:
        reply = answer_question(request.question, request.session_id)

    logger.info(
        "chat_complete",
        extra={
            "session_id": request.session_id,
            "rule": reply.rule,
            "cached": reply.cached,
            "latency_ms": t.elapsed_ms,
        },
    )

    return ChatResponse(
        answer=reply.text,
        rule=reply.rule,
        intents=reply.intents,
        pattern=reply.pattern,
        sources=reply.sources,
        cached=reply.cached,
        session_id=request.session_id,
    )


# ── Sessions ──────────────────────────────────────────────────────────────────

@app.get("/sessions/{session_id}/history", response_model=HistoryResponse, tags=["sessions"])
def session_history(session_id: str):
    session = find_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    messages = [
        HistoryMessage(role=m.role, content=m.content, timestamp=m.timestamp)
        for m in session.history.messages()
    ]
    return HistoryResponse(session_id=session_id, messages=messages)


@app.delete("/sessions/{session_id}", tags=["sessions"])
def reset_session(session_id: str):
    """Forget a session's topics, cached answers and transcript."""
    if not clear_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return {"status": "ok", "message": f"Session '{session_id}' cleared."}
