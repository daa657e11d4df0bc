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
The navigator: a state machine that shows one page of a paginator at a time
in a single message, and moves between pages when the member that invoked the
command presses one of the reaction buttons on it.

Example usage::

    nav = EmbedNavigator.from_context(ctx)
    nav.add_pages(embeds).use_default_reactions()
    await nav.run()

A session lives from :meth:`EmbedNavigator.run` until the timeout elapses or
:meth:`EmbedNavigator.stop` is called, and then removes the reactions it added
exactly once.
"""

__all__ = ("SessionState", "EmbedNavigator", "DEFAULT_TIMEOUT")

import asyncio
import contextlib
import enum
import typing

import async_timeout

from pagedembed import errors
from pagedembed import logging_utils
from pagedembed.pagination import abc
from pagedembed.pagination import discord_surface
from pagedembed.pagination import router as _router
from pagedembed.pagination import store as _store
from pagedembed.pagination import surface as _surface

# 15 minutes.
DEFAULT_TIMEOUT = 15 * 60

PROMPT = "What page do you want to see? (Say `cancel` to cancel this prompt)"

INVALID_RESPONSE = "That is not a valid response."

NO_SUCH_PAGE = "That page does not exist."

CANCEL = "cancel"


class SessionState(enum.Enum):
    UNSTARTED = enum.auto()
    RENDERING = enum.auto()
    LISTENING = enum.auto()
    ACTING = enum.auto()
    CLOSING = enum.auto()
    CLOSED = enum.auto()


class EmbedNavigator(abc.PagABC, logging_utils.Loggable):
    """
    Shows a collection of embeds one at a time, controlled by reactions.

    :param surface: where to render. If the surface already has a message, it
        is reused as-is and nothing is sent until the first page change.
    :param caller: ID of the only user whose reactions are acted upon.
    :param timeout: how many seconds the session listens for, in total.
    """

    def __init__(self, surface: _surface.Surface, caller: int, *, timeout: float = DEFAULT_TIMEOUT):
        if caller is None:
            raise errors.MissingCaller()
        if not isinstance(caller, int) or isinstance(caller, bool):
            raise errors.ConstructionError(f"Caller must be resolved to a user ID first, not {type(caller).__name__}")

        self.surface = surface
        self.caller = caller
        self.timeout = timeout
        self.store = _store.PageStore()
        self.router = _router.ActionRouter()
        self.state = SessionState.UNSTARTED

        self._can_manage = False
        self._attached: typing.List[str] = []
        self._collector: typing.Optional[asyncio.Future] = None
        self._stop_requested = False
        self._closed = asyncio.Event()

    @classmethod
    def from_context(cls, ctx, *, message=None, timeout: float = None):
        """Builds a navigator for the author of a command, in the channel it was invoked in."""
        surface = discord_surface.DiscordSurface(ctx.bot, ctx.channel, message)
        caller = discord_surface.resolve_caller(ctx.channel, ctx.author)
        if timeout is None:
            timeout = getattr(ctx.bot, "pagination_timeout", DEFAULT_TIMEOUT)
        return cls(surface, caller, timeout=timeout)

    def __repr__(self):
        return (
            f"<{type(self).__name__} caller={self.caller} page={self.store.footer()} "
            f"state={self.state.name} tokens={''.join(self.router.tokens)!r}>"
        )

    @property
    def pages(self) -> typing.List:
        return self.store.pages

    @property
    def cursor(self) -> int:
        return self.store.cursor

    @property
    def message(self):
        return self.surface.message

    def add_page(self, page):
        self.store.add_page(page)
        return self

    def add_pages(self, pages: typing.Iterable):
        self.store.add_pages(pages)
        return self

    def set_pages(self, pages: typing.Iterable):
        self.store.set_pages(pages)
        return self

    def clear_pages(self):
        self.store.clear_pages()
        return self

    def bind(self, token: str, action):
        self.router.bind(token, action)
        return self

    def unbind_all(self):
        self.router.unbind_all()
        return self

    def use_default_reactions(self):
        """Previous page, go to page, next page."""
        return self.bind("prev", "prev").bind("1234", "goto").bind("next", "next")

    async def next_page(self):
        self.store.next_page()
        await self._update()

    async def prev_page(self):
        self.store.prev_page()
        await self._update()

    async def page_to(self, page: typing.Union[int, str]):
        """Shows the given 1-based page. The cursor is left alone if it does not exist."""
        self.store.page_to(page)
        await self._update()

    async def prompt(self):
        """Asks the caller which page to go to, then goes there."""
        reply = await self.surface.ask(PROMPT, lambda r: r.actor_id == self.caller)

        if reply.strip().lower() == CANCEL:
            return

        try:
            await self.page_to(reply)
        except errors.InvalidInputError:
            await self.surface.say(INVALID_RESPONSE)
        except errors.OutOfRangeError:
            await self.surface.say(NO_SUCH_PAGE)

    def _stamp(self, page):
        page.set_footer(text=self.store.footer())
        return page

    async def _update(self):
        page = self.store.current
        if page is None:
            return
        await self.surface.edit(self._stamp(page))

    async def run(self):
        """
        Shows the first page, adds the reactions, then handles reactions from
        the caller until the timeout elapses or :meth:`stop` is called.

        Anything raised while handling a reaction ends the session and is
        re-raised here after the reactions have been cleaned up.
        """
        if self.state is not SessionState.UNSTARTED:
            raise RuntimeError("This navigator has already been run")

        self.state = SessionState.RENDERING
        self._register()

        try:
            if self.surface.message is None:
                page = self.store.current
                if page is None:
                    self.logger.debug("No page at index %s, so there is nothing to navigate", self.store.cursor)
                    return
                await self.surface.send(self._stamp(page))

            self._can_manage = self.surface.can_manage_tokens()

            for glyph in self.router.tokens:
                await self.surface.attach(glyph)
                self._attached.append(glyph)

            if self._stop_requested:
                return

            self.state = SessionState.LISTENING
            self._collector = asyncio.ensure_future(self._collect())

            try:
                await self._collector
            except asyncio.CancelledError:
                if not self._stop_requested:
                    raise
                self.logger.debug("Navigator for %s was stopped", self.caller)
        finally:
            await self.close()

    async def _collect(self):
        try:
            async with async_timeout.timeout(self.timeout):
                async with contextlib.aclosing(self.surface.collect(self._accepts)) as events:
                    async for event in events:
                        await self._on_token(event)
        except asyncio.TimeoutError:
            self.logger.debug("Navigator for %s timed out after %ss", self.caller, self.timeout)

    def _accepts(self, event: _surface.TokenEvent) -> bool:
        return event.actor_id == self.caller and event.glyph in self.router

    async def _on_token(self, event: _surface.TokenEvent):
        self.state = SessionState.ACTING

        if self._can_manage:
            try:
                await self.surface.detach_actor(event.glyph, event.actor_id)
            except errors.PlatformIOError as ex:
                self.logger.warning("Could not remove reaction %s from %s: %s", event.glyph, event.actor_id, ex)

        action = self.router.resolve(event.glyph)
        self.logger.debug("%s pressed %s, performing %r", event.actor_id, event.glyph, action)
        await action.perform(self)

        self.state = SessionState.LISTENING

    def stop(self) -> None:
        """Stops listening for reactions. Cleanup happens in :meth:`run`."""
        self._stop_requested = True
        if self._collector is not None and not self._collector.done():
            self._collector.cancel()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def close(self):
        """Removes the reactions. Only the first call does anything."""
        if self.state in (SessionState.CLOSING, SessionState.CLOSED):
            return

        self.state = SessionState.CLOSING
        self._unregister()

        try:
            if self.surface.message is not None and self._attached:
                await self._remove_reactions()
        finally:
            self.state = SessionState.CLOSED
            self._closed.set()

    async def _remove_reactions(self):
        if self._can_manage:
            try:
                await self.surface.clear()
            except errors.PlatformIOError as ex:
                self.logger.warning("Could not clear reactions: %s", ex)
        else:
            for glyph in self._attached:
                try:
                    await self.surface.detach_own(glyph)
                except errors.PlatformIOError as ex:
                    self.logger.warning("Could not remove reaction %s: %s", glyph, ex)
