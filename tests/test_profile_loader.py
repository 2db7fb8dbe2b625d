"""
tests/test_profile_loader.py — Tests for profile document loading.

Uses pytest's tmp_path for throwaway profile files.
"""
import json

import pytest
from pydantic import ValidationError

from app.profile.loader import DEFAULT_PROFILE, is_default_profile, load_profile


def write_profile(tmp_path, payload) -> str:
    path = tmp_path / "me.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(path)


class TestLoadProfile:

    def test_bundled_profile(self, profile):
        assert profile.name == "Jordan Ellis"
        assert len(profile.projects) == 4
        assert profile.contact.email == "jordan.ellis@example.com"
        assert not is_default_profile(profile)

    def test_sparse_profile_fills_defaults(self, tmp_path):
        profile = load_profile(write_profile(tmp_path, {"name": "Sam Rivera"}))
        assert profile.name == "Sam Rivera"
        assert profile.projects == []
        assert profile.contact.email is None

    def test_unknown_keys_are_kept(self, tmp_path):
        profile = load_profile(write_profile(tmp_path, {"name": "Sam", "fun_facts": ["juggles"]}))
        assert profile.model_extra == {"fun_facts": ["juggles"]}

    def test_missing_file_returns_default(self, tmp_path):
        profile = load_profile(tmp_path / "nope.json")
        assert profile is DEFAULT_PROFILE
        assert is_default_profile(profile)

    def test_invalid_json_returns_default(self, tmp_path):
        assert load_profile(write_profile(tmp_path, "{not json")) is DEFAULT_PROFILE

    def test_schema_violation_returns_default(self, tmp_path):
        path = write_profile(tmp_path, {"name": "Sam", "skills": "Python"})
        assert load_profile(path) is DEFAULT_PROFILE

    def test_profile_is_read_only(self, profile):
        with pytest.raises(ValidationError):
            profile.name = "Someone Else"


class TestDefaultProfile:

    def test_has_enough_to_talk_about(self):
        assert DEFAULT_PROFILE.name
        assert DEFAULT_PROFILE.professional_summary
        assert DEFAULT_PROFILE.skills
