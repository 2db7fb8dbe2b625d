"""
tests/test_context.py — Unit tests for conversation context tracking.
"""
from app.conversation.context import ConversationContext, Depth, Sentiment


class TestTopics:

    def test_topics_never_exceed_ten(self):
        ctx = ConversationContext()
        for _ in range(50):
            ctx.update("anything", ["skills", "projects", "ai"])
            assert len(ctx.topics) <= 10

    def test_oldest_topics_evicted_first(self):
        ctx = ConversationContext()
        ctx.update("q", [f"t{i}" for i in range(12)])
        assert list(ctx.topics) == [f"t{i}" for i in range(2, 12)]

    def test_custom_cap(self):
        ctx = ConversationContext(max_topics=3)
        ctx.update("q", ["a", "b", "c", "d"])
        assert list(ctx.topics) == ["b", "c", "d"]

    def test_last_topic_among(self):
        ctx = ConversationContext()
        ctx.update("q", ["projects", "detailed", "skills", "motivation"])
        assert ctx.last_topic(["projects", "skills"]) == "skills"
        assert ctx.last_topic(["education"]) is None


class TestSentimentAndDepth:

    def test_defaults(self):
        ctx = ConversationContext()
        assert ctx.sentiment is Sentiment.CURIOUS
        assert ctx.depth is Depth.OVERVIEW

    def test_casual(self):
        ctx = ConversationContext()
        ctx.update("that's awesome", [])
        assert ctx.sentiment is Sentiment.CASUAL

    def test_last_matching_rule_wins(self):
        ctx = ConversationContext()
        ctx.update("awesome, what professional experience do you have?", [])
        assert ctx.sentiment is Sentiment.PROFESSIONAL

    def test_no_match_keeps_previous(self):
        ctx = ConversationContext()
        ctx.update("cool", [])
        ctx.update("hello", [])
        assert ctx.sentiment is Sentiment.CASUAL

    def test_detailed(self):
        ctx = ConversationContext()
        ctx.update("tell me more", [])
        assert ctx.depth is Depth.DETAILED

    def test_overview(self):
        ctx = ConversationContext()
        ctx.update("tell me more", [])
        ctx.update("just a brief summary please", [])
        assert ctx.depth is Depth.OVERVIEW

    def test_deep_dive_beats_detailed(self):
        ctx = ConversationContext()
        ctx.update("can we do a deep dive", [])
        assert ctx.depth is Depth.DEEP_DIVE

    def test_intents_do_not_change_sentiment(self):
        ctx = ConversationContext()
        ctx.update("hello", ["experience"])
        assert ctx.sentiment is Sentiment.CURIOUS


class TestClear:

    def test_clear_resets_everything(self):
        ctx = ConversationContext()
        ctx.update("awesome, tell me more", ["projects"])
        ctx.mark_discussed("projects")
        ctx.clear()
        assert list(ctx.topics) == []
        assert ctx.asked_about == set()
        assert ctx.sentiment is Sentiment.CURIOUS
        assert ctx.depth is Depth.OVERVIEW
