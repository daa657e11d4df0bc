#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# pagedembed is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pagedembed is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with pagedembed.  If not, see <https://www.gnu.org/licenses/>.

"""
Holds the bot implementation.
"""
import asyncio
import contextlib
import time

import async_timeout
import discord
from discord.ext import commands

from pagedembed import logging_utils
from pagedembed import module_detection
from pagedembed import pagination

__all__ = ("BotInterrupt", "Bot")

# Sue me.
BotInterrupt = KeyboardInterrupt

MAX_MESSAGES = 300

# How long to give running navigators to remove their reactions on shutdown.
SHUTDOWN_GRACE = 10


###############################################################################
# Bot class definition.                                                       #
###############################################################################
class Bot(commands.Bot, logging_utils.Loggable):
    """
    My implementation of the Discord.py bot. This implements a few extra things
    on top of the existing Discord.py and discord.ext.commands implementations.

    Events
    ------
    These are executed after the task they represent has been executed.
    - on_add_cog(cog)
    - on_remove_cog(cog)

    :param bot_config:
        This accepts a dict with these sub-dictionaries:
        - ``auth`` - this must contain a ``token`` member.
        - ``bot`` - this contains a group of kwargs to pass to the Discord.py
            Bot constructor.
        - ``pagination`` - optional. May contain a ``timeout`` in seconds for
            navigators started by commands.
    """

    def __init__(self, bot_config: dict):
        intents = discord.Intents.default()
        intents.message_content = True

        commands.Bot.__init__(self, **bot_config.get("bot", {}), intents=intents, max_messages=MAX_MESSAGES)

        self.token = bot_config["auth"]["token"]
        self.debug = bot_config.get("debug", False)
        self.pagination_timeout = bot_config.get("pagination", {}).get("timeout", pagination.DEFAULT_TIMEOUT)
        self.start_time = None

        self.logger.info(f"Using command prefix: {self.command_prefix}")
        self.logger.info(f"Navigators will time out after {self.pagination_timeout}s")

    @property
    def up_time(self) -> float:
        """Returns how many seconds the bot has been up for."""
        curr = time.time()
        return curr - (self.start_time or curr)

    async def setup_hook(self):
        if self.debug:
            asyncio.get_running_loop().set_debug(True)
        self.start_time = time.time()
        await module_detection.ModuleDetectionService().auto_load_modules(self)

    async def close(self):
        """
        Stops every running navigator and gives them a chance to remove
        their reactions before logging out.
        """
        self.logger.warning("Requested logout, first cleaning up any navigators that are running")

        sessions = list(pagination.PagABC.active_sessions)
        for session in sessions:
            session.stop()

        with contextlib.suppress(asyncio.TimeoutError):
            async with async_timeout.timeout(SHUTDOWN_GRACE):
                self.logger.info(
                    "Waiting up to %ss for %s navigators to terminate cleanly", SHUTDOWN_GRACE, len(sessions)
                )
                await asyncio.gather(*(s.wait_closed() for s in sessions), return_exceptions=True)
                self.logger.info("Navigators finished")

        await super().close()

    async def add_cog(self, cog, /, **kwargs):
        self.logger.debug(f"Loading cog {type(cog).__name__!r}")
        await super().add_cog(cog, **kwargs)
        self.dispatch("add_cog", cog)

    async def remove_cog(self, name, /, **kwargs):
        self.logger.debug(f"Removing cog {name!r}")
        cog = await super().remove_cog(name, **kwargs)
        self.dispatch("remove_cog", cog)
        return cog

    async def on_ready(self):
        self.logger.info("Logged in as %s in %s guilds, %.1fs after startup", self.user, len(self.guilds), self.up_time)
        await self.change_presence(status=discord.Status.online)

    async def on_command(self, ctx):
        if ctx.guild:
            self.logger.debug(
                "A user invoked %s in %s#%s (%s#%s) (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.guild,
                ctx.channel,
                ctx.guild.id,
                ctx.channel.id,
                ctx.message.id,
            )
        else:
            self.logger.debug(
                "A user invoked %s in private messages (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.message.id,
            )
