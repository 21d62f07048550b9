import logging
import os

import pytest

from quizbot import config
from quizbot.config import DEFAULT_QUESTION_DELAY, load_env, parse_delay


@pytest.mark.parametrize("raw", ["abc", "inf", "-inf", "nan", "-1"])
def test_bad_delay_falls_back_with_warning(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="quizbot"):
        assert parse_delay(raw, 1.5) == 1.5
    assert raw in caplog.text


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_delay_uses_default_silently(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="quizbot"):
        assert parse_delay(raw, 1.5) == 1.5
    assert caplog.text == ""


@pytest.mark.parametrize("raw, expected", [("0", 0.0), ("2.5", 2.5), (" 3 ", 3.0)])
def test_valid_delay(raw, expected):
    assert parse_delay(raw) == expected


def test_default_delay():
    assert parse_delay(None) == DEFAULT_QUESTION_DELAY


def test_load_env_does_not_override(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "QUIZBOT_TEST_A=\"one\"\n"
        "export QUIZBOT_TEST_B='two'\n"
        "broken line\n"
        "QUIZBOT_TEST_C=three\n",
        encoding="utf-8",
    )
    for key in ("QUIZBOT_TEST_A", "QUIZBOT_TEST_B"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("QUIZBOT_TEST_C", "kept")

    assert load_env(str(env_file)) == 2
    assert os.environ["QUIZBOT_TEST_A"] == "one"
    assert os.environ["QUIZBOT_TEST_B"] == "two"
    assert os.environ["QUIZBOT_TEST_C"] == "kept"


def test_load_env_missing_file(tmp_path):
    assert load_env(str(tmp_path / "nope.env")) == 0


def test_validate_settings_requires_token(monkeypatch):
    monkeypatch.setattr(config, "TELEGRAM_BOT_TOKEN", "")
    with pytest.raises(RuntimeError):
        config.validate_settings()
