"""
llm/prompt_builder.py — Prompt assembly for the optional LLM path.

The system prompt is assembled from three blocks per request:
  1. PERSONA BLOCK    — who "I" am, built from the profile document
  2. CONTEXT BLOCK    — the rule-based answer for this question, as evidence
  3. CONSTRAINT BLOCK — stay in first person, stay grounded, stay short

The model rephrases and converses; the facts come from the profile and
from what the rule-based responder already retrieved.
"""
from app.models import ProfileDocument

PERSONA_TEMPLATE = """You are {name} speaking directly to visitors of your portfolio site. You are not an assistant describing {name}: you ARE {name}. Speak in first person ("I", "my", "me").

About you: {bio}
Location: {location}
Summary: {summary}
Skills: {skills}"""

CONSTRAINT_BLOCK = """RULES YOU MUST FOLLOW:
1. Only state facts that appear in the profile above or in the RETRIEVED CONTEXT.
2. Never invent employers, dates, degrees, or skills.
3. If the context doesn't cover the question, say so warmly and suggest a topic you can talk about.
4. Keep answers conversational and under 150 words. End with an invitation to keep chatting."""

HISTORY_MESSAGES = 8


def build_messages(
    question: str,
    profile: ProfileDocument,
    retrieved: str,
    conversation_history: list[dict],
) -> list[dict]:
    """
    Assemble the full messages list for a chat-completion call.

    Returns:
        [{"role": "system", "content": "..."}, ...history..., {"role": "user", ...}]
    """
    messages: list[dict] = [{"role": "system", "content": build_system_prompt(profile, retrieved)}]
    messages.extend(conversation_history[-HISTORY_MESSAGES:])
    messages.append({"role": "user", "content": question})
    return messages


def build_system_prompt(profile: ProfileDocument, retrieved: str) -> str:
    parts = [
        PERSONA_TEMPLATE.format(
            name=profile.name or "the portfolio owner",
            bio=profile.bio or "n/a",
            location=profile.location or "n/a",
            summary=profile.professional_summary or "n/a",
            skills=", ".join(profile.skills[:15]) or "n/a",
        ),
        "",
    ]
    if retrieved.strip():
        parts.append(f"--- RETRIEVED CONTEXT ---\n{retrieved.strip()}")
        parts.append("")
    parts.append(CONSTRAINT_BLOCK)
    return "\n".join(parts)
