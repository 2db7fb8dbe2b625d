"""
conversation/context.py — Per-session conversational state.

Tracks what the visitor has been asking about and how they're asking it:
  topics      — last N detected intents, oldest dropped first
  sentiment   — curious (default), casual or professional
  depth       — overview (default), detailed or deep-dive
  asked_about — profile sections already shown to this visitor

Context shapes phrasing (greeting variant, fallback wording, follow-ups).
It never feeds back into intent scoring.
"""
import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class Sentiment(str, Enum):
    CURIOUS = "curious"
    PROFESSIONAL = "professional"
    CASUAL = "casual"


class Depth(str, Enum):
    OVERVIEW = "overview"
    DETAILED = "detailed"
    DEEP_DIVE = "deep-dive"


DEFAULT_MAX_TOPICS = 10

# Evaluated in order; every matching rule overwrites, so the last match wins
SENTIMENT_RULES = (
    (re.compile(r"\b(cool|awesome|interesting|great|amazing)\b", re.IGNORECASE), Sentiment.CASUAL),
    (re.compile(r"\b(experience|professional|qualifications?|expertise)\b", re.IGNORECASE), Sentiment.PROFESSIONAL),
)

DEPTH_RULES = (
    (re.compile(r"\b(more|detail|details|detailed|specific|elaborate|deep)\b", re.IGNORECASE), Depth.DETAILED),
    (re.compile(r"\b(quickly|brief|briefly|summary|overview)\b", re.IGNORECASE), Depth.OVERVIEW),
    (re.compile(r"\b(deep[- ]dive|in[- ]depth|everything|thoroughly)\b", re.IGNORECASE), Depth.DEEP_DIVE),
)


@dataclass
class ConversationContext:
    max_topics: int = DEFAULT_MAX_TOPICS
    topics: deque = field(init=False)
    sentiment: Sentiment = Sentiment.CURIOUS
    depth: Depth = Depth.OVERVIEW
    asked_about: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.topics = deque(maxlen=self.max_topics)

    def update(self, query: str, intents: Iterable[str]) -> None:
        """Record detected intents and re-read sentiment/depth from the raw query."""
        self.topics.extend(intents)

        for pattern, sentiment in SENTIMENT_RULES:
            if pattern.search(query):
                self.sentiment = sentiment

        for pattern, depth in DEPTH_RULES:
            if pattern.search(query):
                self.depth = depth

    def mark_discussed(self, section: str) -> None:
        self.asked_about.add(section)

    def last_topic(self, among: Iterable[str]) -> str | None:
        """Most recent topic that is one of `among`, or None."""
        wanted = set(among)
        for topic in reversed(self.topics):
            if topic in wanted:
                return topic
        return None

    def clear(self) -> None:
        self.topics.clear()
        self.sentiment = Sentiment.CURIOUS
        self.depth = Depth.OVERVIEW
        self.asked_about.clear()
