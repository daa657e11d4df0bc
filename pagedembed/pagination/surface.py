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
What a navigator needs from the chat platform.

A surface is one message (once it has been sent) in one channel. The
navigator is the only thing writing to it while a session is running.
Implementations raise :class:`pagedembed.errors.PlatformIOError` when a call
to the platform fails.
"""

__all__ = ("TokenEvent", "Reply", "Surface")

import dataclasses
import typing
from abc import ABC
from abc import abstractmethod


@dataclasses.dataclass(frozen=True)
class TokenEvent:
    """Someone added a reaction to the surface's message."""

    glyph: str
    actor_id: int


@dataclasses.dataclass(frozen=True)
class Reply:
    """Someone sent a message in the surface's channel."""

    content: str
    actor_id: int


class Surface(ABC):
    message: typing.Any = None

    @abstractmethod
    async def send(self, page) -> None:
        """Sends a new message showing the page, and remembers it."""

    @abstractmethod
    async def edit(self, page) -> None:
        """Replaces the content of the message with the page."""

    @abstractmethod
    async def attach(self, glyph: str) -> None:
        """Adds the bot's reaction to the message."""

    @abstractmethod
    async def detach_actor(self, glyph: str, actor_id: int) -> None:
        """Removes someone else's reaction. Needs the manage capability."""

    @abstractmethod
    async def detach_own(self, glyph: str) -> None:
        """Removes the bot's own reaction."""

    @abstractmethod
    async def clear(self) -> None:
        """Removes every reaction in one go. Needs the manage capability."""

    @abstractmethod
    async def say(self, text: str) -> None:
        """Sends a plain text message to the channel."""

    @abstractmethod
    def can_manage_tokens(self) -> bool:
        """True if the bot may remove other people's reactions."""

    @abstractmethod
    def collect(self, predicate: typing.Callable[[TokenEvent], bool]) -> typing.AsyncIterator[TokenEvent]:
        """
        Yields reaction events on the message that pass the predicate, forever.
        Events arriving while the consumer is still busy are queued, not dropped.
        """

    @abstractmethod
    async def ask(self, prompt: str, predicate: typing.Callable[[Reply], bool]) -> str:
        """Sends the prompt and waits for the first reply passing the predicate."""
