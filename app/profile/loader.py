"""
profile/loader.py — Profile document loading.

Reads the portfolio owner's me.json once and validates it against
ProfileDocument. A missing or broken file never takes the chat down:
the loader logs the failure and hands back DEFAULT_PROFILE so every
downstream stage still has a name, a summary and some skills to talk about.
"""
import json
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from app.config import get_settings
from app.models import ProfileDocument
from app.observability.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PROFILE = ProfileDocument(
    name="Jordan Ellis",
    location="Tulsa, OK",
    bio="AI/ML Engineer and Business Analyst",
    tagline="Building AI solutions",
    professional_summary="Passionate about AI, automation, and digital transformation",
    skills=["Python", "SQL", "AI/ML", "React", "TypeScript"],
)


def load_profile(filepath: str | Path) -> ProfileDocument:
    """
    Load and validate a profile document.

    Returns DEFAULT_PROFILE (and logs why) if the file is missing,
    is not valid JSON, or does not match the schema.
    """
    path = Path(filepath)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        profile = ProfileDocument.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(
            "profile_load_failed",
            extra={"path": str(path), "error": str(e)},
        )
        return DEFAULT_PROFILE

    logger.info(
        "profile_loaded",
        extra={
            "path": str(path),
            "skills": len(profile.skills),
            "projects": len(profile.projects),
            "experience": len(profile.experience),
        },
    )
    return profile


@lru_cache(maxsize=4)
def _load_cached(filepath: str) -> ProfileDocument:
    return load_profile(filepath)


def get_profile() -> ProfileDocument:
    """Profile for the configured path, read from disk only on first use."""
    return _load_cached(get_settings().profile_path)


def is_default_profile(profile: ProfileDocument) -> bool:
    return profile is DEFAULT_PROFILE
