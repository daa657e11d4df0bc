"""Tests for the bot shell."""

import asyncio
import logging
import time

from pagedembed import bot as client
from pagedembed import pagination


def _bot(**sections):
    return client.Bot({"auth": {"token": "secret"}, "bot": {"command_prefix": "!"}, **sections})


class TestConfig:
    def test_default_pagination_timeout(self):
        assert _bot().pagination_timeout == pagination.DEFAULT_TIMEOUT

    def test_pagination_timeout_from_config(self):
        assert _bot(pagination={"timeout": 60}).pagination_timeout == 60


class TestUpTime:
    def test_zero_before_setup(self):
        assert _bot().up_time == 0

    def test_counts_from_setup(self):
        bot = _bot()
        bot.start_time = time.time() - 5
        assert bot.up_time >= 5

    def test_logged_when_ready(self, monkeypatch, caplog):
        bot = _bot()
        bot.start_time = time.time() - 5

        async def change_presence(**kwargs):
            pass

        monkeypatch.setattr(bot, "change_presence", change_presence)

        with caplog.at_level(logging.INFO, logger="Bot"):
            asyncio.run(bot.on_ready())

        assert "after startup" in caplog.text
