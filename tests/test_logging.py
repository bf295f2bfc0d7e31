"""
Tests for the dual-sink logging setup.
"""
import json
import logging

import pytest

from votebot.utils.logging import (
    JsonlFormatter,
    LevelIconFilter,
    SensitiveDataFilter,
    init_logging,
    register_secret,
)


def _record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("votebot.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_jsonl_formatter_keeps_known_keys_only():
    record = _record(subsys="router", event="command.execute", msg_id=111, unrelated="x")

    payload = json.loads(JsonlFormatter().format(record))

    assert list(payload) == ["ts", "level", "name", "subsys", "msg_id", "event", "detail"]
    assert payload["level"] == "INFO"
    assert payload["detail"] == "hello"
    assert payload["msg_id"] == 111


def test_jsonl_formatter_keeps_unicode():
    line = JsonlFormatter().format(_record("vote ✅ 🇫"))

    assert "✅ 🇫" in line


@pytest.mark.parametrize("level,icon", [
    (logging.DEBUG, "ℹ"),
    (logging.INFO, "✔"),
    (logging.WARNING, "⚠"),
    (logging.ERROR, "✖"),
    (logging.CRITICAL, "✖"),
])
def test_level_icons(level, icon):
    record = _record(level=level)

    assert LevelIconFilter().filter(record)
    assert record.level_icon == icon


def test_sensitive_data_filter_scrubs_nested_tokens():
    detail = {"DISCORD_TOKEN": "secret", "nested": {"token": "also-secret"}, "prefix": "./"}
    record = _record(detail=detail)

    assert SensitiveDataFilter().filter(record)
    assert detail == {"DISCORD_TOKEN": "[REDACTED]", "nested": {"token": "[REDACTED]"}, "prefix": "./"}


def test_sensitive_data_filter_redacts_registered_secret_in_messages():
    register_secret("tok.en-value")
    record = logging.LogRecord("discord.http", logging.DEBUG, __file__, 1, "Authorization: Bot %s (%d)", ("tok.en-value", 7), None)

    assert SensitiveDataFilter().filter(record)
    assert record.getMessage() == "Authorization: Bot [REDACTED] (7)"


def test_sensitive_data_filter_leaves_other_messages_alone():
    register_secret("tok.en-value")
    record = _record("vote %s")
    record.args = ("posted",)

    assert SensitiveDataFilter().filter(record)
    assert record.msg == "vote %s"
    assert record.getMessage() == "vote posted"


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    discord_level = logging.getLogger("discord").level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("discord").setLevel(discord_level)


def test_init_logging_writes_jsonl(tmp_path, restore_logging):
    path = tmp_path / "logs" / "bot.jsonl"

    init_logging(level="debug", jsonl_path=path)
    logging.getLogger("votebot.test").info("routed", extra={"subsys": "router"})
    for handler in logging.getLogger().handlers:
        handler.flush()

    names = sorted(h.get_name() for h in logging.getLogger().handlers)
    assert names == ["jsonl_handler", "pretty_handler"]
    assert logging.getLogger("discord").level == logging.WARNING
    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert {"name": "votebot.test", "subsys": "router", "detail": "routed"}.items() <= lines[-1].items()
