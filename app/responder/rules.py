"""
responder/rules.py — Ordered response rules.

Selecting an answer is a prioritised rule list, evaluated top to bottom:

  greeting   hello / who are you          -> greeting line + identity block
  template   named question template hit  -> hand-written answer, verbatim
  follow_up  "tell me more" after a topic -> that topic's profile sections
  ai_news    news/trend phrasing + AI/tech -> redirect (never the AI answer)
  sections   any triggered profile section -> top-ranked fragments
             (declines when the main section asked about is empty)
  fallback   always                       -> name, summary and key skills

A rule whose respond() returns None falls through to the next one.
"""
import re
from dataclasses import dataclass, field
from typing import Callable

from app.conversation.context import ConversationContext, Depth, Sentiment
from app.models import ProfileDocument
from app.responder.answers import AI_NEWS_REDIRECT, canned_answer
from app.responder.extractor import compose_fragments, extract_sections, top_categories

GREETING_RE = re.compile(
    r"^(hi|hey|hello|howdy|yo|sup|good (morning|afternoon|evening)|who are you"
    r"|tell me about yourself|about you)\b"
)
FOLLOW_UP_RE = re.compile(r"tell me more|what else|anything else|\bcontinue\b|go on|elaborate")
NEWS_RE = re.compile(r"what'?s (new|latest|trending|happening)|\bnews\b|\brecent\b|\btoday\b|\bcurrent\b")
TECH_RE = re.compile(r"\b(ai|technology|tech)\b")

# Intents that map onto an extractable profile section
INTENT_SECTIONS = {
    "projects": "projects",
    "skills": "skills",
    "ai": "skills",
    "cloud": "skills",
    "experience": "experience",
    "education": "education",
    "leadership": "leadership",
    "achievements": "leadership",
}


@dataclass
class Turn:
    """Everything the rules may look at for one question."""
    question: str
    normalized: str
    intents: list[str]
    pattern: str | None
    profile: ProfileDocument
    context: ConversationContext
    max_fragments: int = 5
    sources: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[Turn], bool]
    respond: Callable[[Turn], str | None]


# ── Identity ──────────────────────────────────────────────────────────────────

def identity_block(profile: ProfileDocument) -> str:
    contact = " | ".join(p for p in (profile.contact.email, profile.contact.phone) if p)
    fields = (
        ("Name", profile.name),
        ("Location", profile.location),
        ("Contact", contact),
        ("Bio", profile.bio),
        ("Professional Summary", profile.professional_summary),
    )
    return "\n".join(f"{label}: {value}" for label, value in fields if value)


def greeting_line(profile: ProfileDocument, context: ConversationContext) -> str:
    name = profile.name or "the owner of this portfolio"
    first = name.split()[0]
    if context.asked_about - {"intro"}:
        return f"Good to continue our chat! I'm {first}."
    if context.sentiment is Sentiment.CASUAL:
        return f"Hey there! I'm {first}, great to meet you!"
    if context.sentiment is Sentiment.PROFESSIONAL:
        return f"Hello, and thanks for stopping by. I'm {name}."
    if context.depth is Depth.OVERVIEW:
        return f"Hi! I'm {name}. Quick intro:"
    return f"Hi! I'm {name}. Let me tell you a bit about myself:"


def _greet(turn: Turn) -> str:
    line = greeting_line(turn.profile, turn.context)
    turn.context.mark_discussed("intro")
    turn.sources.append("identity")
    return f"{line}\n\n{identity_block(turn.profile)}"


# ── Profile sections ──────────────────────────────────────────────────────────

def _profile_has(profile: ProfileDocument, section: str) -> bool:
    if section == "leadership":
        return bool(profile.leadership or profile.honors)
    return bool(getattr(profile, section, None))


def primary_section_missing(turn: Turn) -> bool:
    """
    True when the highest-ranked section intent names a section the profile
    doesn't have. Sections reached only through appended synonyms ("project"
    appends "work") never answer for it.
    """
    for intent in turn.intents:
        section = INTENT_SECTIONS.get(intent)
        if section is not None:
            return not _profile_has(turn.profile, section)
    return False


def _answer_from_sections(turn: Turn, only: str | None = None) -> str | None:
    if only is None and primary_section_missing(turn):
        return None
    fragments = extract_sections(turn.profile, turn.normalized, turn.intents, turn.context, only=only)
    if not fragments:
        return None
    turn.sources.extend(top_categories(fragments, turn.max_fragments))
    return compose_fragments(fragments, turn.max_fragments)


def _follow_up(turn: Turn) -> str | None:
    topic = turn.context.last_topic(INTENT_SECTIONS)
    if topic is None:
        return None
    return _answer_from_sections(turn, only=INTENT_SECTIONS[topic])


def fallback_summary(profile: ProfileDocument) -> str:
    headline = " - ".join(p for p in (profile.name, profile.professional_summary) if p)
    skills = ", ".join(profile.skills[:10]) or "Various"
    return (
        f"{headline or profile.tagline}\n\nKey Skills: {skills}\n\n"
        "You can ask me about my experience, projects, skills, or education."
    )


def _fallback(turn: Turn) -> str:
    turn.sources.append("summary")
    return fallback_summary(turn.profile)


RESPONSE_RULES: tuple[Rule, ...] = (
    Rule("greeting", lambda t: bool(GREETING_RE.search(t.normalized)), _greet),
    Rule("template", lambda t: t.pattern is not None, lambda t: canned_answer(t.pattern)),
    Rule("follow_up", lambda t: bool(FOLLOW_UP_RE.search(t.normalized)), _follow_up),
    Rule(
        "ai_news",
        lambda t: bool(NEWS_RE.search(t.normalized) and TECH_RE.search(t.normalized)),
        lambda t: AI_NEWS_REDIRECT,
    ),
    Rule("sections", lambda t: True, _answer_from_sections),
    Rule("fallback", lambda t: True, _fallback),
)


def select_response(turn: Turn, rules: tuple[Rule, ...] = RESPONSE_RULES) -> tuple[str, str]:
    """Run the rule table; returns (rule name, response text)."""
    for rule in rules:
        if not rule.applies(turn):
            continue
        text = rule.respond(turn)
        if text is not None:
            return rule.name, text
    # The fallback rule always answers; reaching here means a custom table without one
    return "fallback", _fallback(turn)
