from __future__ import annotations

import logging

import colorlog

from oxygen.logging_config import LoggerConfigurator
from oxygen.logs import EVENT_TEMPLATES, reload_event_templates
from oxygen.logs.logger import BotLogger


def test_event_templates_loaded():
    reload_event_templates()
    assert ("irc", "parse_error") in EVENT_TEMPLATES
    assert ("factoids", "defined") in EVENT_TEMPLATES


def test_log_event_uses_template(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = BotLogger("oxygen.test")
    with caplog.at_level(logging.INFO, logger="oxygen.test"):
        bot_logger.log_event("factoids", "defined", name="joke", count=3)
    assert "Defined joke (3 total)" in caplog.text
    assert "[system" in caplog.text


def test_log_event_prefix_has_nick_and_channel(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = BotLogger("oxygen.test")
    with caplog.at_level(logging.INFO, logger="oxygen.test"):
        bot_logger.log_event("irc", "join", nick="oxygen", channel="#room")
    assert "[oxygen@#room" in caplog.text


def test_log_event_unknown_event_derives_text(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = BotLogger("oxygen.test")
    with caplog.at_level(logging.INFO, logger="oxygen.test"):
        bot_logger.log_event("some_domain", "odd_thing")
    assert "some domain: odd thing" in caplog.text


def test_log_event_template_missing_key_falls_back(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = BotLogger("oxygen.test")
    with caplog.at_level(logging.INFO, logger="oxygen.test"):
        bot_logger.log_event("factoids", "defined")
    assert "Defined {name}" in caplog.text


def test_debug_mode_includes_context(caplog, monkeypatch):
    monkeypatch.setenv("DEBUG", "1")
    bot_logger = BotLogger("oxygen.test")
    with caplog.at_level(logging.DEBUG, logger="oxygen.test"):
        bot_logger.log_event("irc", "ignored", level=logging.DEBUG, command="NOTICE")
    assert "irc_ignored" in caplog.text
    assert "command=NOTICE" in caplog.text


def test_configurator_installs_colorlog(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        handler = LoggerConfigurator({"error_summary": False}).configure()
        assert isinstance(handler.formatter, colorlog.ColoredFormatter)
        assert root.level == logging.DEBUG
        assert handler in root.handlers
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
