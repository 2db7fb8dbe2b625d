"""
responder/pipeline.py — Rule-based question answering.

    raw question
      -> session cache (hit: return immediately)
      -> normalize -> detect intents -> update context -> match template
      -> response rules
      -> cache and return

Every stage is guarded on its own: a stage that raises is logged and replaced
by a neutral value (the lower-cased question, no intents, no pattern) so one
bad regex can't take the whole answer down. Anything that still escapes turns
into a friendly apology. generate_reply() always returns text.
"""
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TypeVar

from app.config import get_settings
from app.conversation.session import ChatSession
from app.models import ProfileDocument
from app.nlp.intents import detect_intents
from app.nlp.normalizer import normalize_query
from app.nlp.templates import match_template
from app.observability.logger import get_logger, Timer
from app.responder.answers import APOLOGY
from app.responder.rules import Turn, select_response

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Reply:
    text: str
    rule: str
    intents: list[str] = field(default_factory=list)
    pattern: str | None = None
    sources: list[str] = field(default_factory=list)
    cached: bool = False


def _guarded(stage: str, fallback: T, func: Callable[..., T], *args) -> T:
    try:
        return func(*args)
    except Exception as e:
        logger.warning("stage_failed", extra={"stage": stage, "error": str(e)})
        return fallback


def generate_reply(question: str, session: ChatSession, profile: ProfileDocument) -> Reply:
    """
    Answer one question within a session.

    Identical questions (case/whitespace-insensitive) inside the cache TTL
    return the cached reply without re-running classification.
    """
    with session.lock, Timer() as t:
        cached = session.cache.get(question)
        if cached is not None:
            logger.info("cache_hit", extra={"session_id": session.session_id, "rule": cached.rule})
            return replace(cached, cached=True)

        try:
            reply = _run_pipeline(question, session, profile)
        except Exception:
            logger.exception("pipeline_failed", extra={"session_id": session.session_id})
            return Reply(text=APOLOGY, rule="apology")

        session.cache.put(question, reply)

    logger.info(
        "reply_generated",
        extra={
            "session_id": session.session_id,
            "rule": reply.rule,
            "pattern": reply.pattern,
            "intents": reply.intents[:3],
            "latency_ms": t.elapsed_ms,
        },
    )
    return reply


def _run_pipeline(question: str, session: ChatSession, profile: ProfileDocument) -> Reply:
    normalized = _guarded("normalize", question.lower().strip(), normalize_query, question)
    intents = _guarded("detect_intents", [], detect_intents, normalized)
    _guarded("update_context", None, session.context.update, question, intents)
    pattern = _guarded("match_template", None, match_template, question)

    turn = Turn(
        question=question,
        normalized=normalized,
        intents=intents,
        pattern=pattern,
        profile=profile,
        context=session.context,
        max_fragments=get_settings().max_fragments,
    )
    rule, text = select_response(turn)
    return Reply(
        text=text,
        rule=rule,
        intents=intents,
        pattern=pattern if rule == "template" else None,
        sources=turn.sources,
    )
