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
Surface implementation backed by a discord.py message.
"""

__all__ = ("DiscordSurface", "resolve_caller")

import asyncio
import contextlib
import typing

import discord

from pagedembed import errors
from pagedembed import logging_utils
from pagedembed.pagination import surface


def resolve_caller(channel, caller) -> int:
    """
    Normalises whoever invoked a command into a user ID. Accepts members,
    users, integer IDs and numeric strings.

    :raises MissingCaller: if the caller is None.
    :raises ConstructionError: if the caller cannot be turned into an ID, or
        is not a member of the channel's guild.
    """
    if caller is None:
        raise errors.MissingCaller()

    if isinstance(caller, (discord.Member, discord.User)):
        return caller.id

    if isinstance(caller, str):
        if not caller.strip().isdigit():
            raise errors.ConstructionError(f"{caller!r} is not a user ID")
        caller = int(caller)

    if isinstance(caller, int) and not isinstance(caller, bool):
        guild = getattr(channel, "guild", None)
        if guild is not None and guild.get_member(caller) is None:
            raise errors.ConstructionError(f"No member with ID {caller} is in {guild}")
        return caller

    raise errors.ConstructionError(f"Option 'caller' must be the member or user who invoked the command, not {caller!r}")


@contextlib.contextmanager
def _translate_errors(operation):
    try:
        yield
    except discord.HTTPException as ex:
        raise errors.PlatformIOError(operation, ex) from ex


class DiscordSurface(surface.Surface, logging_utils.Loggable):
    """
    One message in one channel.

    :param bot: the client, used to wait for reactions and replies.
    :param channel: where the message gets sent.
    :param message: an existing message to take over, if any.
    """

    def __init__(self, bot, channel: discord.abc.Messageable, message: typing.Optional[discord.Message] = None):
        self.bot = bot
        self.channel = channel
        self.message = message

    async def send(self, page) -> None:
        with _translate_errors("send the message"):
            self.message = await self.channel.send(embed=page)

    async def edit(self, page) -> None:
        with _translate_errors("edit the message"):
            await self.message.edit(embed=page)

    async def attach(self, glyph: str) -> None:
        with _translate_errors(f"add reaction {glyph}"):
            await self.message.add_reaction(glyph)

    async def detach_actor(self, glyph: str, actor_id: int) -> None:
        with _translate_errors(f"remove reaction {glyph}"):
            await self.message.remove_reaction(glyph, discord.Object(id=actor_id))

    async def detach_own(self, glyph: str) -> None:
        with _translate_errors(f"remove reaction {glyph}"):
            await self.message.remove_reaction(glyph, self.bot.user)

    async def clear(self) -> None:
        with _translate_errors("clear reactions"):
            await self.message.clear_reactions()

    async def say(self, text: str) -> None:
        with _translate_errors("send a message"):
            await self.channel.send(text)

    def can_manage_tokens(self) -> bool:
        # Removing reactions belonging to other users needs Manage Messages,
        # which is only a thing in guilds.
        guild = getattr(self.channel, "guild", None)
        if guild is None:
            return False
        return self.channel.permissions_for(guild.me).manage_messages

    async def collect(self, predicate):
        """
        Yields reactions added to the message that pass the predicate.

        The listener stays registered for as long as the generator is open,
        so presses made while an earlier one is still being handled are
        queued rather than lost. Raw events are used because ``reaction_add``
        is only dispatched for messages still in the client's cache.
        """
        queue: "asyncio.Queue[surface.TokenEvent]" = asyncio.Queue()

        async def on_raw_reaction_add(payload: discord.RawReactionActionEvent):
            if self.message is None or payload.message_id != self.message.id:
                return
            event = surface.TokenEvent(str(payload.emoji), payload.user_id)
            if predicate(event):
                queue.put_nowait(event)

        self.bot.add_listener(on_raw_reaction_add, "on_raw_reaction_add")
        try:
            while True:
                yield await queue.get()
        finally:
            self.bot.remove_listener(on_raw_reaction_add, "on_raw_reaction_add")

    async def ask(self, prompt: str, predicate) -> str:
        def check(message: discord.Message) -> bool:
            if message.channel.id != self.channel.id:
                return False
            return predicate(surface.Reply(message.content, message.author.id))

        with _translate_errors("send the prompt"):
            await self.channel.send(prompt)

        reply = await self.bot.wait_for("message", check=check)
        return reply.content
