"""Tests for environment-driven configuration.

WHY: A typo in a deployment's .env (e.g. CLIPLINE_PAUSE_CAP=1,5) must fail
loudly with the variable's name, not silently fall back to a default.
"""

import pytest

from clipline import config
from clipline.clips.intervals import ClipRules
from clipline.segmenters.adaptive import PhraseRules


class TestEnvParsing:
    def test_int_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("CLIPLINE_TEST_INT", raising=False)
        assert config._env_int("CLIPLINE_TEST_INT", 7) == 7

    def test_int_from_env(self, monkeypatch):
        monkeypatch.setenv("CLIPLINE_TEST_INT", " 12 ")
        assert config._env_int("CLIPLINE_TEST_INT", 7) == 12

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("CLIPLINE_TEST_FLOAT", "  ")
        assert config._env_float("CLIPLINE_TEST_FLOAT", 0.7) == 0.7

    def test_float_from_env(self, monkeypatch):
        monkeypatch.setenv("CLIPLINE_TEST_FLOAT", "1.25")
        assert config._env_float("CLIPLINE_TEST_FLOAT", 0.7) == 1.25

    def test_malformed_int_names_variable(self, monkeypatch):
        monkeypatch.setenv("CLIPLINE_TEST_INT", "ten")
        with pytest.raises(ValueError, match="CLIPLINE_TEST_INT"):
            config._env_int("CLIPLINE_TEST_INT", 7)

    def test_malformed_float_names_variable(self, monkeypatch):
        monkeypatch.setenv("CLIPLINE_TEST_FLOAT", "1,5")
        with pytest.raises(ValueError, match="CLIPLINE_TEST_FLOAT"):
            config._env_float("CLIPLINE_TEST_FLOAT", 0.7)


class TestRuleDefaults:
    def test_phrase_rules_follow_config(self):
        rules = PhraseRules()
        assert rules.max_words == config.PHRASE_MAX_WORDS
        assert rules.target_words == config.PHRASE_TARGET_WORDS
        assert rules.silence_threshold_s == config.PHRASE_SILENCE_THRESHOLD_S

    def test_clip_rules_follow_config(self):
        rules = ClipRules()
        assert rules.max_duration_s == config.MAX_CLIP_DURATION_S
        assert rules.pause_cap_s == config.PAUSE_CAP_S
