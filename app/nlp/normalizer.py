"""
nlp/normalizer.py — Query normalization.

Visitors type fast and misspell the words we key on ("experiance",
"skilz"). Before any classification the question is:
  1. lower-cased and trimmed
  2. typo-corrected, whole words only
  3. augmented with synonyms of any root word it contains
  4. stripped of sentence punctuation

Synonyms are only appended when not already present, so running the
normalizer over its own output changes nothing.
"""
import re
from types import MappingProxyType

TYPO_CORRECTIONS = MappingProxyType({
    "experiance": "experience",
    "expirience": "experience",
    "experince": "experience",
    "projct": "project",
    "proyect": "project",
    "skilz": "skills",
    "skils": "skills",
    "contct": "contact",
    "contat": "contact",
    "edcuation": "education",
    "educaton": "education",
    "resumee": "resume",
    "resum": "resume",
})

SYNONYMS = MappingProxyType({
    "job": ("work", "employment", "position", "role", "career"),
    "project": ("app", "application", "build", "creation", "work"),
    "skill": ("ability", "expertise", "knowledge", "capability", "proficiency"),
    "contact": ("reach", "connect", "get in touch", "email", "call"),
    "education": ("degree", "school", "university", "study", "learning"),
    "achievement": ("accomplishment", "success", "award", "honor", "recognition"),
})

_TYPO_RE = re.compile(
    r"\b(" + "|".join(re.escape(t) for t in TYPO_CORRECTIONS) + r")\b"
)
_PUNCTUATION_RE = re.compile(r"[?!.,;:()\"]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_query(question: str) -> str:
    """Return the normalized form of a raw visitor question."""
    normalized = question.lower().strip()
    normalized = _TYPO_RE.sub(lambda m: TYPO_CORRECTIONS[m.group(1)], normalized)
    normalized = _expand_synonyms(normalized)
    normalized = _PUNCTUATION_RE.sub(" ", normalized)
    return _WHITESPACE_RE.sub(" ", normalized).strip()


def _expand_synonyms(text: str) -> str:
    for root, synonyms in SYNONYMS.items():
        if root not in text:
            continue
        missing = [s for s in synonyms if not _contains_word(text, s)]
        if missing:
            text = f"{text} {' '.join(missing)}"
    return text


def _contains_word(text: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text) is not None
