"""
tests/test_extractor.py — Unit tests for profile section extraction.

Uses the bundled profile plus small hand-built ProfileDocuments for the
edge cases (empty sections, no similarity hits).
"""
from unittest.mock import patch

from app.conversation.context import ConversationContext
from app.models import ProfileDocument, ProjectItem
from app.nlp.intents import detect_intents
from app.nlp.normalizer import normalize_query
from app.responder.extractor import (
    Fragment, compose_fragments, extract_sections, group_skills, top_categories,
)


def extract(profile, question, context=None, only=None):
    normalized = normalize_query(question)
    return extract_sections(
        profile, normalized, detect_intents(normalized), context or ConversationContext(), only=only,
    )


# ── Projects ──────────────────────────────────────────────────────────────────

class TestProjects:

    def test_named_project_is_included(self, profile):
        fragments = extract(profile, "Tell me about the PomoPal project")
        assert "PROJECT: PomoPal" in compose_fragments(fragments)

    def test_no_similarity_hits_falls_back_to_first_three(self):
        profile = ProfileDocument(projects=[
            ProjectItem(name=name, description="zzz")
            for name in ("Alpha", "Beta", "Gamma", "Delta")
        ])
        fragments = extract(profile, "Show me your projects")
        projects = [f for f in fragments if f.category == "projects"]
        assert [f.content.splitlines()[0] for f in projects] == [
            "PROJECT: Alpha", "PROJECT: Beta", "PROJECT: Gamma",
        ]
        assert all(f.score == 0.5 for f in projects)

    def test_missing_projects_section_is_skipped(self):
        profile = ProfileDocument(name="Sam Rivera", skills=["Python"])
        assert extract(profile, "Tell me about your projects") == []


# ── Skills ────────────────────────────────────────────────────────────────────

class TestSkills:

    def test_named_skill_group(self, profile):
        fragments = extract(profile, "What are your skills in AI")
        assert len(fragments) == 1
        assert fragments[0].content.startswith("AI SKILLS:")
        assert "LangChain" in fragments[0].content
        assert fragments[0].score == 2.0

    def test_key_skills_summary_when_no_group_named(self, profile):
        fragments = extract(profile, "What skills do you have")
        content = fragments[0].content
        assert content.startswith("KEY SKILLS:")
        assert "- AI/ML:" in content
        assert "- Languages: Python, SQL" in content
        assert fragments[0].score == 1.5

    def test_group_skills(self):
        groups = group_skills(["Python", "AWS", "RAG", "Tableau", "React"])
        assert groups["languages"] == ["Python"]
        assert groups["cloud"] == ["AWS"]
        assert groups["ai"] == ["RAG"]
        assert groups["data"] == ["Tableau"]
        assert groups["frameworks"] == ["React"]


# ── Experience ────────────────────────────────────────────────────────────────

class TestExperience:

    def test_named_company_ranks_first(self, profile):
        fragments = extract(profile, "Tell me about your work at Prairie Fuel Co")
        top = compose_fragments(fragments).split("\n\n")[0]
        assert top.startswith("EXPERIENCE: Business Analyst Intern at Prairie Fuel Co")
        prairie = next(f for f in fragments if "Prairie Fuel Co" in f.content)
        assert prairie.score > 2.0


# ── Other sections ────────────────────────────────────────────────────────────

class TestOtherSections:

    def test_certifications(self, profile):
        fragments = extract(profile, "What certifications do you have")
        assert [f.category for f in fragments] == ["certifications"]
        assert "- Pega Certified System Architect" in fragments[0].content

    def test_leadership_and_honors(self, profile):
        categories = {f.category for f in extract(profile, "Any awards or leadership roles?")}
        assert {"leadership", "honors"} <= categories

    def test_education_lists_every_degree(self, profile):
        fragments = extract(profile, "Where did you go to university?")
        education = next(f for f in fragments if f.category == "education")
        assert education.content.count("Red River State University") == 2

    def test_only_restricts_and_skips_trigger(self, profile):
        fragments = extract(profile, "hello", only="projects")
        assert {f.category for f in fragments} == {"projects"}
        assert len(fragments) == 3

    def test_triggered_sections_marked_discussed(self, profile):
        context = ConversationContext()
        extract(profile, "What certifications do you have", context=context)
        assert context.asked_about == {"certifications"}


# ── Failure isolation ─────────────────────────────────────────────────────────

class TestSectionFailure:

    def test_failing_section_is_skipped(self, profile):
        with patch("app.responder.extractor.advanced_similarity", side_effect=RuntimeError("boom")):
            fragments = extract(profile, "Tell me about your projects and education")
        assert [f.category for f in fragments] == ["education"]


# ── Composition ───────────────────────────────────────────────────────────────

class TestCompose:

    def test_top_five_by_score_ties_keep_order(self):
        fragments = [
            Fragment("low", 0.5, "a"),
            Fragment("second", 2.0, "b"),
            Fragment("tie-1", 1.5, "c"),
            Fragment("tie-2", 1.5, "d"),
            Fragment("dropped", 0.1, "e"),
            Fragment("first", 3.0, "f"),
        ]
        assert compose_fragments(fragments) == "first\n\nsecond\n\ntie-1\n\ntie-2\n\nlow"
        assert top_categories(fragments) == ["f", "b", "c", "d", "a"]

    def test_limit(self):
        fragments = [Fragment(str(i), float(i), "x") for i in range(4)]
        assert compose_fragments(fragments, limit=2) == "3\n\n2"

    def test_empty(self):
        assert compose_fragments([]) == ""
