"""
tests/test_pipeline.py — Tests for the guarded question-answering pipeline.

Stages are patched on app.responder.pipeline to simulate failures and to
count calls; the profile is always passed in explicitly.
"""
from unittest.mock import patch

from app.conversation.session import ChatSession
from app.models import ProfileDocument
from app.nlp.intents import detect_intents
from app.responder.answers import APOLOGY, CANNED_ANSWERS
from app.responder.pipeline import generate_reply


class TestTemplateReplies:

    def test_resume_walkthrough_is_verbatim(self, session, profile):
        reply = generate_reply("Can you walk me through your resume?", session, profile)
        assert reply.rule == "template"
        assert reply.pattern == "resume_overview"
        assert reply.text == CANNED_ANSWERS["resume_overview"]

    def test_pattern_only_reported_for_template_rule(self, session, profile):
        reply = generate_reply("Tell me about yourself", session, profile)
        assert reply.rule == "greeting"
        assert reply.pattern is None


class TestCaching:

    def test_repeat_question_skips_classification(self, session, profile):
        with patch("app.responder.pipeline.detect_intents", wraps=detect_intents) as spy:
            first = generate_reply("What are your skills in AI?", session, profile)
            second = generate_reply("  what are your skills in ai?  ", session, profile)

        assert spy.call_count == 1
        assert first.cached is False
        assert second.cached is True
        assert second.text == first.text
        assert second.rule == first.rule

    def test_cache_is_per_session(self, profile):
        a = ChatSession.create("pipeline-a")
        b = ChatSession.create("pipeline-b")
        generate_reply("What are your skills in AI?", a, profile)
        reply = generate_reply("What are your skills in AI?", b, profile)
        assert reply.cached is False
        assert b.cache.get("What are your skills in AI?") is not None
        assert a.context is not b.context


class TestProfileGaps:

    def test_missing_projects_falls_back_to_summary(self, session):
        profile = ProfileDocument(
            name="Sam Rivera",
            professional_summary="Data person",
            skills=["Python", "SQL"],
        )
        reply = generate_reply("Tell me about your projects", session, profile)
        assert reply.rule == "fallback"
        assert reply.text.startswith("Sam Rivera - Data person")
        assert "Key Skills: Python, SQL" in reply.text

    def test_missing_projects_not_answered_by_experience(self, session, profile):
        # "project" expands to "... work", which alone would trigger experience
        without_projects = profile.model_copy(update={"projects": []})
        reply = generate_reply("Tell me about your projects", session, without_projects)
        assert reply.rule == "fallback"
        assert reply.sources == ["summary"]
        assert "Key Skills: Python, SQL" in reply.text
        assert "EXPERIENCE:" not in reply.text

    def test_projects_present_answers_from_projects(self, session, profile):
        reply = generate_reply("Tell me about your projects", session, profile)
        assert reply.rule == "sections"
        assert "projects" in reply.sources


class TestContextBounds:

    def test_topics_stay_bounded(self, session, profile):
        for i in range(30):
            generate_reply(f"What are your skills in AI, take {i}?", session, profile)
        assert len(session.context.topics) <= 10


class TestDegradation:

    def test_failing_stage_is_replaced(self, session, profile):
        with patch("app.responder.pipeline.detect_intents", side_effect=RuntimeError("boom")):
            reply = generate_reply("What are your skills in AI?", session, profile)
        assert reply.intents == []
        assert reply.rule == "sections"
        assert reply.text

    def test_failing_normalizer_uses_lowercased_question(self, session, profile):
        with patch("app.responder.pipeline.normalize_query", side_effect=RuntimeError("boom")):
            reply = generate_reply("What SKILLS do you have?", session, profile)
        assert reply.rule == "sections"
        assert reply.text.startswith("KEY SKILLS:")

    def test_total_failure_apologises_and_is_not_cached(self, session, profile):
        question = "What are your skills in AI?"
        with patch("app.responder.pipeline.select_response", side_effect=RuntimeError("boom")):
            reply = generate_reply(question, session, profile)
        assert reply.text == APOLOGY
        assert reply.rule == "apology"
        assert session.cache.get(question) is None

        # The next attempt runs the pipeline again
        assert generate_reply(question, session, profile).rule == "sections"
