"""
llm/guardrails.py — Input and output checks around answering.

Layer 1 (pre-answer): reject empty or oversized questions with a friendly
                      reply instead of running the pipeline at all
Layer 2 (post-LLM):   reject LLM output that is empty or runs away, so the
                      rule-based answer is used instead

Both layers return a GuardResult rather than raising: a portfolio chat
should always answer with *something* polite.
"""
from dataclasses import dataclass
from app.config import get_settings

MIN_QUESTION_CHARS = 1
MAX_REPLY_CHARS = 2500


@dataclass
class GuardResult:
    passed: bool
    reason: str  # Visitor-facing explanation if the check fails


def validate_question(question: str) -> GuardResult:
    """Check a raw question before it reaches the responder."""
    stripped = question.strip()
    if len(stripped) < MIN_QUESTION_CHARS:
        return GuardResult(
            passed=False,
            reason="Ask me anything! My experience, projects, skills, or education are good places to start.",
        )

    limit = get_settings().max_question_chars
    if len(stripped) > limit:
        return GuardResult(
            passed=False,
            reason=f"That's a lot to take in! Could you ask in under {limit} characters?",
        )

    return GuardResult(passed=True, reason="OK")


def check_llm_reply(reply: str) -> GuardResult:
    """Decide whether an LLM reply is usable or the rule-based answer should stand."""
    stripped = reply.strip()
    if not stripped:
        return GuardResult(passed=False, reason="LLM returned an empty reply")
    if len(stripped) > MAX_REPLY_CHARS:
        return GuardResult(passed=False, reason=f"LLM reply exceeded {MAX_REPLY_CHARS} characters")
    return GuardResult(passed=True, reason="OK")
