import logging

from stacktail import config


def test_is_env_true(monkeypatch):
    monkeypatch.setenv("TAIL_TEST_FLAG", "1")
    assert config.is_env_true("TAIL_TEST_FLAG")
    monkeypatch.setenv("TAIL_TEST_FLAG", "true")
    assert config.is_env_true("TAIL_TEST_FLAG")
    monkeypatch.setenv("TAIL_TEST_FLAG", "0")
    assert not config.is_env_true("TAIL_TEST_FLAG")
    monkeypatch.delenv("TAIL_TEST_FLAG")
    assert not config.is_env_true("TAIL_TEST_FLAG")


def test_is_env_not_false(monkeypatch):
    monkeypatch.delenv("TAIL_TEST_FLAG", raising=False)
    assert config.is_env_not_false("TAIL_TEST_FLAG")
    monkeypatch.setenv("TAIL_TEST_FLAG", "false")
    assert not config.is_env_not_false("TAIL_TEST_FLAG")


def test_eval_log_type(monkeypatch):
    monkeypatch.setenv("TAIL_LOG", " WARN ")
    assert config.eval_log_type("TAIL_LOG") == "warn"
    monkeypatch.setenv("TAIL_LOG", "verbose")
    assert config.eval_log_type("TAIL_LOG") is False


class TestParseFloatEnv:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("TAIL_POLL_INTERVAL", raising=False)
        assert config.parse_float_env("TAIL_POLL_INTERVAL", 3.0) == 3.0

    def test_value(self, monkeypatch):
        monkeypatch.setenv("TAIL_POLL_INTERVAL", "1.5")
        assert config.parse_float_env("TAIL_POLL_INTERVAL", 3.0) == 1.5

    def test_invalid_value(self, monkeypatch, caplog):
        monkeypatch.setenv("TAIL_POLL_INTERVAL", "soon")
        with caplog.at_level(logging.WARNING, logger="stacktail.config"):
            assert config.parse_float_env("TAIL_POLL_INTERVAL", 3.0) == 3.0
        assert "not a number" in caplog.text

    def test_negative_value(self, monkeypatch, caplog):
        monkeypatch.setenv("TAIL_MIN_DELAY", "-1")
        with caplog.at_level(logging.WARNING, logger="stacktail.config"):
            assert config.parse_float_env("TAIL_MIN_DELAY", 0.1) == 0.1
        assert "must be positive" in caplog.text
