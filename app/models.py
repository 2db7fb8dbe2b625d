"""
models.py — Profile document schema and API request/response shapes.

Keeping models in one file means:
- The profile loader and the HTTP layer validate against the same schema
- Swagger docs auto-generated from these definitions are always accurate
- Every profile field is optional, so a sparse me.json still loads
"""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


# ── Profile document ──────────────────────────────────────────────────────────

class ExperienceItem(BaseModel):
    title: str = ""
    company: str = ""
    description: str = ""
    location: str | None = None
    duration: str | None = None


class ProjectItem(BaseModel):
    name: str = ""
    description: str = ""
    technologies: str | None = None
    link: str | None = None


class EducationItem(BaseModel):
    degree: str = ""
    school: str = ""
    location: str | None = None
    duration: str | None = None


class ContactInfo(BaseModel):
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ProfileDocument(BaseModel):
    """The portfolio owner's resume data. Read-only once loaded."""
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = ""
    location: str = ""
    bio: str = ""
    tagline: str = ""
    professional_summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceItem] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    leadership: list[str] = Field(default_factory=list)
    honors: list[str] = Field(default_factory=list)


# ── Chat ──────────────────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    question: str = Field(
        description="The visitor's question",
        examples=["Can you walk me through your resume?"],
    )
    session_id: str = Field(
        min_length=1,
        description="Conversation identifier; context and cache are scoped to it",
        examples=["visitor-abc-123"],
    )


class ChatResponse(BaseModel):
    answer: str
    rule: str = Field(description="Which response rule produced the answer")
    intents: list[str]
    pattern: str | None = None
    sources: list[str] = Field(description="Profile sections the answer drew from")
    cached: bool = False
    session_id: str


class HistoryMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime


class HistoryResponse(BaseModel):
    session_id: str
    messages: list[HistoryMessage]


# ── Health ────────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    profile_source: Literal["file", "default"]
    active_sessions: int
    llm_enabled: bool
    llm_reachable: bool | None = None
    version: str = "1.0.0"
