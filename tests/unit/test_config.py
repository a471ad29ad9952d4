"""Tests for monkey.config."""

import logging

import pytest

from monkey import config as monkey_config
from monkey.config import DEFAULT_MAX_DEPTH, EvaluatorConfig, parse_flags


class TestDefaults:
    def test_defaults(self):
        cfg = EvaluatorConfig()
        assert cfg.debug_level == "none"
        assert cfg.max_depth == DEFAULT_MAX_DEPTH
        assert cfg.scoped_blocks is False
        assert cfg.strict_nodes is False

    def test_frozen(self):
        with pytest.raises(Exception):
            EvaluatorConfig().max_depth = 5

    @pytest.mark.parametrize("bad", [0, -3, "deep"])
    def test_rejects_bad_depth(self, bad):
        with pytest.raises(ValueError):
            EvaluatorConfig(max_depth=bad)

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError, match="debug level"):
            EvaluatorConfig(debug_level="chatty")


class TestShouldLog:
    def test_silent_by_default(self):
        assert not EvaluatorConfig().should_log("error")

    @pytest.mark.parametrize("level, allowed", [
        ("error", True),
        ("warning", True),
        ("info", True),
        ("debug", False),
    ])
    def test_threshold(self, level, allowed):
        assert EvaluatorConfig(debug_level="info").should_log(level) is allowed

    @pytest.mark.parametrize("alias", ["full", "verbose", "on", True])
    def test_aliases_mean_debug(self, alias):
        assert EvaluatorConfig(debug_level=alias).debug_level == "debug"


class TestSources:
    def test_from_env(self):
        cfg = EvaluatorConfig.from_env({
            "MONKEY_DEBUG": "full",
            "MONKEY_MAX_DEPTH": "50",
            "MONKEY_SCOPED_BLOCKS": "yes",
            "MONKEY_STRICT_NODES": "off",
        })
        assert cfg == EvaluatorConfig(debug_level="debug", max_depth=50, scoped_blocks=True)

    def test_from_env_ignores_unset(self):
        assert EvaluatorConfig.from_env({}) == EvaluatorConfig()

    def test_from_env_skips_malformed_values(self, caplog):
        with caplog.at_level(logging.WARNING, logger="monkey.config"):
            cfg = EvaluatorConfig.from_env({
                "MONKEY_MAX_DEPTH": "lots",
                "MONKEY_DEBUG": "chatty",
                "MONKEY_SCOPED_BLOCKS": "on",
            })
        assert cfg == EvaluatorConfig(scoped_blocks=True)
        messages = " ".join(r.getMessage() for r in caplog.records)
        assert "MONKEY_MAX_DEPTH" in messages
        assert "MONKEY_DEBUG" in messages

    def test_parse_flags(self):
        assert parse_flags("max_depth=10; debug=info, scoped_blocks=true; junk") == {
            "max_depth": 10,
            "debug": "info",
            "scoped_blocks": True,
        }

    def test_from_flags_over_base(self):
        base = EvaluatorConfig(strict_nodes=True)
        cfg = EvaluatorConfig.from_flags("max_depth=40", base=base)
        assert cfg.max_depth == 40
        assert cfg.strict_nodes is True

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="bogus"):
            EvaluatorConfig.from_flags("bogus=1")

    def test_with_overrides_skips_none(self):
        cfg = EvaluatorConfig(max_depth=9).with_overrides(max_depth=None, scoped_blocks=True)
        assert cfg.max_depth == 9
        assert cfg.scoped_blocks is True


def test_set_config_swaps_process_default():
    replacement = EvaluatorConfig(max_depth=77)
    previous = monkey_config.set_config(replacement)
    try:
        assert monkey_config.get_config() is replacement
    finally:
        monkey_config.set_config(previous)
    assert monkey_config.get_config() is previous
