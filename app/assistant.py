"""
assistant.py — The single "question in, answer out" entry point.

Pipeline:
  1. Guardrail the raw question
  2. Rule-based reply for the session (cached per session)
  3. Optionally let the hosted LLM rephrase retrieval-style answers
  4. Record the exchange in the session transcript
  5. Drive the avatar's talk/idle hooks

The LLM step never decides whether there is an answer: if it is disabled,
unreachable or returns junk, the rule-based reply stands.
"""
from dataclasses import replace

import httpx

from app.config import get_settings
from app.conversation.session import ChatSession, get_session
from app.llm.client import chat_completion
from app.llm.guardrails import check_llm_reply, validate_question
from app.llm.prompt_builder import build_messages
from app.models import ProfileDocument
from app.observability.logger import get_logger
from app.profile.loader import get_profile
from app.responder.avatar import AvatarHooks, deliver
from app.responder.pipeline import Reply, generate_reply

logger = get_logger(__name__)

# Hand-written answers are returned verbatim; only assembled answers get rephrased
REPHRASABLE_RULES = frozenset({"follow_up", "sections", "fallback"})


def answer_question(
    question: str,
    session_id: str,
    hooks: AvatarHooks | None = None,
    profile: ProfileDocument | None = None,
) -> Reply:
    """Answer a visitor question. Always returns a Reply with text."""
    guard = validate_question(question)
    if not guard.passed:
        reply = Reply(text=guard.reason, rule="guardrail")
        deliver(reply.text, hooks)
        return reply

    session = get_session(session_id)
    profile = profile if profile is not None else get_profile()

    prior_history = session.history.as_prompt_messages()
    session.history.add("user", question)

    reply = generate_reply(question, session, profile)
    if get_settings().llm_enabled and not reply.cached and reply.rule in REPHRASABLE_RULES:
        reply = _rephrase(question, session, profile, reply, prior_history)

    session.history.add("assistant", reply.text)
    deliver(reply.text, hooks)
    return reply


def _rephrase(
    question: str,
    session: ChatSession,
    profile: ProfileDocument,
    reply: Reply,
    history: list[dict],
) -> Reply:
    messages = build_messages(question, profile, reply.text, history)
    try:
        text = chat_completion(messages)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("llm_fallback", extra={"session_id": session.session_id, "error": str(e)})
        return reply

    guard = check_llm_reply(text)
    if not guard.passed:
        logger.warning("llm_reply_rejected", extra={"session_id": session.session_id, "reason": guard.reason})
        return reply

    rephrased = replace(reply, text=text.strip(), rule="llm")
    session.cache.put(question, rephrased)
    return rephrased
