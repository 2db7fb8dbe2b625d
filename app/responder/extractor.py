"""
responder/extractor.py — Pull the relevant parts of the profile for a question.

Each profile section (projects, skills, experience, education, certifications,
leadership/honors) has a trigger: a detected intent or a mention in the
normalized question. Triggered sections contribute scored fragments:

  projects     — each project ranked by similarity (boost 1.5); kept if > 0.3
                 or named outright. None kept -> first 3 projects at 0.5
  skills       — the skill group the question names (2.0), otherwise a
                 key-skills summary across groups (1.5)
  experience   — each role ranked by similarity (boost 1.3) plus 2.0 when the
                 company is named; kept if > 0.4. None kept -> first 3 at 0.5
  education    — all degrees (1.5)
  certifications, leadership, honors — full lists (1.5 / 1.3 / 1.3)

Fragments from all sections are then sorted by score and the top few joined.
Missing or empty sections are skipped; a failing section is logged and
skipped, never raised.
"""
import re
from dataclasses import dataclass
from typing import Callable, Iterable

from app.conversation.context import ConversationContext, Depth
from app.models import ProfileDocument
from app.observability.logger import get_logger
from app.responder.similarity import advanced_similarity

logger = get_logger(__name__)

SECTION_TOPICS = ("projects", "skills", "experience", "education", "certifications", "leadership")

PROJECT_BOOST = 1.5
PROJECT_MIN_SCORE = 0.3
EXPERIENCE_BOOST = 1.3
EXPERIENCE_MIN_SCORE = 0.4
COMPANY_BOOST = 2.0
FALLBACK_SCORE = 0.5
FALLBACK_ITEMS = 3


@dataclass(frozen=True)
class Fragment:
    content: str
    score: float
    category: str


# (label, pattern over skill names, pattern over the question)
SKILL_GROUPS = (
    ("ai", re.compile(r"\b(ai|ml|llms?|rag|transformers?|langchain|hugging|tensorflow)\b", re.I),
     re.compile(r"\b(ai|ml|machine learning)\b")),
    ("languages", re.compile(r"\b(python|sql|javascript|typescript|r|php)\b", re.I),
     re.compile(r"\b(languages?|programming)\b")),
    ("cloud", re.compile(r"\b(aws|azure|gcp|cloud)\b", re.I),
     re.compile(r"\bcloud\b")),
    ("data", re.compile(r"\b(tableau|power bi|snowflake|alteryx|data)", re.I),
     re.compile(r"\b(data|analytics)\b")),
    ("frameworks", re.compile(r"\b(pyside\d*|react|pega|uipath|pyinstaller)\b", re.I),
     re.compile(r"\b(frameworks?|tools?)\b")),
)


def _mentions(query: str, *stems: str) -> bool:
    return any(re.search(rf"\b{re.escape(stem)}", query) for stem in stems)


def _projects(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    fragments = []
    for project in profile.projects:
        score = advanced_similarity(query, f"{project.name} {project.description}", PROJECT_BOOST)
        named = bool(project.name) and project.name.lower() in query
        if score > PROJECT_MIN_SCORE or named:
            lines = [f"PROJECT: {project.name}", project.description, project.technologies or "", project.link or ""]
            fragments.append(Fragment("\n".join(l for l in lines if l), score, "projects"))

    if not fragments:
        detailed = context.depth is not Depth.OVERVIEW
        for project in profile.projects[:FALLBACK_ITEMS]:
            lines = [f"PROJECT: {project.name}", project.description]
            if detailed and project.technologies:
                lines.append(project.technologies)
            fragments.append(Fragment("\n".join(lines), FALLBACK_SCORE, "projects"))
    return fragments


def group_skills(skills: Iterable[str]) -> dict[str, list[str]]:
    skills = list(skills)
    return {
        label: [s for s in skills if pattern.search(s)]
        for label, pattern, _ in SKILL_GROUPS
    }


def _skills(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    if not profile.skills:
        return []
    groups = group_skills(profile.skills)

    for label, _, asked in SKILL_GROUPS:
        if groups[label] and asked.search(query):
            return [Fragment(f"{label.upper()} SKILLS: {', '.join(groups[label])}", 2.0, "skills")]

    summary = [
        ("AI/ML", groups["ai"][:5]),
        ("Languages", groups["languages"]),
        ("Cloud", groups["cloud"]),
        ("Data", groups["data"][:3]),
    ]
    lines = [f"- {name}: {', '.join(items)}" for name, items in summary if items]
    if not lines:
        lines = [f"- {', '.join(profile.skills[:10])}"]
    return [Fragment("KEY SKILLS:\n" + "\n".join(lines), 1.5, "skills")]


def _experience(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    fragments = []
    for exp in profile.experience:
        score = advanced_similarity(query, f"{exp.title} {exp.company} {exp.description}", EXPERIENCE_BOOST)
        if exp.company and exp.company.lower() in query:
            score += COMPANY_BOOST
        if score > EXPERIENCE_MIN_SCORE:
            meta = " | ".join(p for p in (exp.location, exp.duration) if p)
            lines = [f"EXPERIENCE: {exp.title} at {exp.company}", exp.description, meta]
            fragments.append(Fragment("\n".join(l for l in lines if l), score, "experience"))

    if not fragments:
        for exp in profile.experience[:FALLBACK_ITEMS]:
            fragments.append(Fragment(
                f"EXPERIENCE: {exp.title} at {exp.company}\n{exp.description}",
                FALLBACK_SCORE,
                "experience",
            ))
    return fragments


def _education(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    if not profile.education:
        return []
    lines = []
    for edu in profile.education:
        extra = " ".join(p for p in (edu.location, edu.duration) if p)
        lines.append(f"- {edu.degree} from {edu.school} {extra}".rstrip())
    return [Fragment("EDUCATION:\n" + "\n".join(lines), 1.5, "education")]


def _certifications(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    if not profile.certifications:
        return []
    body = "\n".join(f"- {cert}" for cert in profile.certifications)
    return [Fragment(f"CERTIFICATIONS:\n{body}", 1.5, "certifications")]


def _leadership(profile: ProfileDocument, query: str, context: ConversationContext) -> list[Fragment]:
    fragments = []
    if profile.leadership:
        fragments.append(Fragment(f"LEADERSHIP: {' | '.join(profile.leadership)}", 1.3, "leadership"))
    if profile.honors:
        fragments.append(Fragment(f"HONORS: {' | '.join(profile.honors)}", 1.3, "honors"))
    return fragments


Extractor = Callable[[ProfileDocument, str, ConversationContext], list[Fragment]]

# (section, trigger, extractor) in evaluation order
SECTIONS: tuple[tuple[str, Callable[[str, list[str]], bool], Extractor], ...] = (
    ("projects",
     lambda q, intents: "projects" in intents or _mentions(q, "project", "built"),
     _projects),
    ("skills",
     lambda q, intents: bool({"skills", "ai", "cloud"} & set(intents)) or _mentions(q, "skill", "expertise"),
     _skills),
    ("experience",
     lambda q, intents: "experience" in intents or _mentions(q, "experience", "work", "job"),
     _experience),
    ("education",
     lambda q, intents: "education" in intents
     or _mentions(q, "education", "degree", "university", "master", "bachelor"),
     _education),
    ("certifications",
     lambda q, intents: _mentions(q, "certification", "certified", "cert"),
     _certifications),
    ("leadership",
     lambda q, intents: _mentions(q, "leadership", "leader", "honor", "award"),
     _leadership),
)


def extract_sections(
    profile: ProfileDocument,
    query: str,
    intents: list[str],
    context: ConversationContext,
    only: str | None = None,
) -> list[Fragment]:
    """
    Collect scored fragments from every triggered profile section.

    Args:
        query: normalized question
        only: restrict to one section and skip its trigger (used for follow-ups)
    """
    query = query.lower()
    fragments: list[Fragment] = []

    for section, triggered, extractor in SECTIONS:
        if only is not None:
            if section != only:
                continue
        elif not triggered(query, intents):
            continue

        context.mark_discussed(section)
        try:
            fragments.extend(extractor(profile, query, context))
        except Exception as e:
            logger.warning("section_failed", extra={"section": section, "error": str(e)})

    return fragments


def compose_fragments(fragments: list[Fragment], limit: int = 5) -> str:
    """Join the highest-scoring fragments, separated by blank lines."""
    ranked = sorted(fragments, key=lambda f: -f.score)
    return "\n\n".join(f.content for f in ranked[:limit])


def top_categories(fragments: list[Fragment], limit: int = 5) -> list[str]:
    """Distinct categories of the fragments compose_fragments would keep."""
    ranked = sorted(fragments, key=lambda f: -f.score)[:limit]
    return list(dict.fromkeys(f.category for f in ranked))
