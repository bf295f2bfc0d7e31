"""
Tests for the bootstrap connect loop: retries, backoff and exit codes.
"""
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

import votebot.main as main_module


def _http_error(status: int = 502) -> discord.HTTPException:
    return discord.HTTPException(MagicMock(status=status, reason="Bad Gateway"), "bad gateway")


class FakeBot:
    """Stands in for VoteBot; each instance consumes one scripted start() outcome."""

    outcomes: list = []
    attempts: int = 0

    def __init__(self, *args, **kwargs):
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def start(self, token):
        type(self).attempts += 1
        outcome = type(self).outcomes.pop(0)
        if outcome is not None:
            raise outcome


@pytest.fixture
def bootstrap(monkeypatch):
    """Patches everything main() touches outside the connect loop."""
    monkeypatch.setenv("DISCORD_TOKEN", "test-token")
    monkeypatch.setattr(main_module, "init_logging", MagicMock())
    monkeypatch.setattr(main_module, "VoteBot", FakeBot)
    FakeBot.attempts = 0
    sleep = AsyncMock()
    monkeypatch.setattr(main_module.asyncio, "sleep", sleep)

    def _exit(code):
        raise SystemExit(code)

    monkeypatch.setattr(main_module, "shutdown_logging_and_exit", _exit)
    return sleep


@pytest.mark.asyncio
async def test_retries_with_backoff_then_connects(bootstrap):
    FakeBot.outcomes = [_http_error(), _http_error(), None]

    with pytest.raises(SystemExit) as excinfo:
        await main_module.main([])

    assert excinfo.value.code == 0
    assert FakeBot.attempts == 3
    assert [c.args[0] for c in bootstrap.await_args_list] == [5, 10]


@pytest.mark.asyncio
async def test_gives_up_after_three_failures(bootstrap):
    FakeBot.outcomes = [_http_error(), _http_error(), _http_error()]

    with pytest.raises(SystemExit) as excinfo:
        await main_module.main([])

    assert excinfo.value.code == 1
    assert FakeBot.attempts == main_module.MAX_LOGIN_ATTEMPTS == 3
    assert [c.args[0] for c in bootstrap.await_args_list] == [5, 10]


@pytest.mark.asyncio
async def test_rejected_token_exits_without_retry(bootstrap):
    FakeBot.outcomes = [discord.LoginFailure("Improper token has been passed.")]

    with pytest.raises(SystemExit) as excinfo:
        await main_module.main([])

    assert excinfo.value.code == 1
    assert FakeBot.attempts == 1
    bootstrap.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_token_exits_before_connecting(bootstrap, monkeypatch):
    monkeypatch.delenv("DISCORD_TOKEN")
    FakeBot.outcomes = []

    with pytest.raises(SystemExit) as excinfo:
        await main_module.main([])

    assert excinfo.value.code == 1
    assert FakeBot.attempts == 0
