"""
nlp/intents.py — Keyword and regex intent scoring.

Each intent in SEMANTIC_KEYWORDS collects points for every trigger it finds
in the normalized question:
  - +2 for a keyword longer than 4 characters (more specific), +1 otherwise
  - +0.5 for each repeat occurrence of the same keyword

Short keywords ("ai", "ml", "cv") only match as whole words so they don't fire
inside "email" or "html". Longer keywords match at the start of a word, so
"skill" still catches "skills".

A second battery of question-shape regexes injects fixed-score intents
(capabilities, motivation, timeline, ...) that no keyword table captures.
"""
import re
from types import MappingProxyType

SEMANTIC_KEYWORDS = MappingProxyType({
    "experience": ("work", "job", "career", "role", "position", "internship", "employed", "worked at"),
    "projects": ("built", "created", "developed", "project", "portfolio", "made", "app", "application"),
    "skills": ("skill", "technology", "tech", "expertise", "proficient", "good at", "know", "can you"),
    "education": ("study", "studied", "degree", "university", "college", "school", "education", "graduated"),
    "ai": ("ai", "artificial intelligence", "machine learning", "ml", "llm", "rag", "chatbot", "neural"),
    "contact": ("contact", "reach", "email", "phone", "linkedin", "github", "connect", "get in touch"),
    "achievements": ("achievement", "accomplish", "proud", "award", "honor", "recognition", "success"),
    "personal": ("hobby", "interest", "personal", "passion", "love", "enjoy", "background", "story"),
    "leadership": ("leadership", "leader", "manage", "team", "coordinate", "organize", "motivate"),
    "motivation": ("why", "motivated", "inspire", "passion", "drive", "what sparked"),
    "challenges": ("challenge", "difficult", "problem", "obstacle", "struggle", "overcome"),
    "future": ("future", "vision", "goal", "plan", "career path", "long-term", "aspiration"),
    "resume": ("resume", "cv", "walk me through", "background", "tell me about yourself"),
    "cloud": ("cloud", "aws", "azure", "gcp", "serverless", "container", "kubernetes"),
    "consulting": ("consult", "business architect", "strategy", "enterprise", "client"),
    "teaching": ("teach", "graduate assistant", "student", "education", "mentor"),
    "retail": ("retail", "assistant manager", "store", "customer"),
    "technical": ("technical", "code", "debug", "implement", "design", "architecture"),
})

# (pattern, intent, fixed score)
QUESTION_SHAPES = (
    (re.compile(r"what (do|can|are) you", re.IGNORECASE), "capabilities", 2.0),
    (re.compile(r"tell me (about|more)", re.IGNORECASE), "detailed", 1.5),
    (re.compile(r"how (did|do|can)", re.IGNORECASE), "process", 1.5),
    (re.compile(r"\bwhy\b", re.IGNORECASE), "motivation", 2.0),
    (re.compile(r"\bwhen\b", re.IGNORECASE), "timeline", 1.0),
    (re.compile(r"\bwhere\b", re.IGNORECASE), "location", 1.0),
)

WHOLE_WORD_MAX_LEN = 3


def _keyword_pattern(keyword: str) -> re.Pattern:
    escaped = re.escape(keyword)
    if len(keyword) <= WHOLE_WORD_MAX_LEN:
        return re.compile(rf"\b{escaped}\b")
    return re.compile(rf"\b{escaped}")


_KEYWORD_PATTERNS = MappingProxyType({
    intent: tuple((kw, _keyword_pattern(kw)) for kw in keywords)
    for intent, keywords in SEMANTIC_KEYWORDS.items()
})


def score_intents(normalized: str) -> dict[str, float]:
    """
    Score every intent against a normalized question.

    Returns only intents with a non-zero score, in first-seen order
    (keyword table order, then question-shape order).
    """
    text = normalized.lower()
    scores: dict[str, float] = {}

    for intent, patterns in _KEYWORD_PATTERNS.items():
        score = 0.0
        for keyword, pattern in patterns:
            occurrences = len(pattern.findall(text))
            if not occurrences:
                continue
            score += 2.0 if len(keyword) > 4 else 1.0
            score += (occurrences - 1) * 0.5
        if score > 0:
            scores[intent] = score

    for pattern, intent, fixed in QUESTION_SHAPES:
        if pattern.search(text):
            scores[intent] = max(scores.get(intent, 0.0), fixed)

    return scores


def detect_intents(normalized: str) -> list[str]:
    """Intent labels, highest score first; ties keep first-seen order."""
    scores = score_intents(normalized)
    # sorted() is stable, so equal scores stay in insertion order
    return [intent for intent, _ in sorted(scores.items(), key=lambda kv: -kv[1])]
