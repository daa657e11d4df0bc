"""Shared fixtures: an in-memory surface standing in for a Discord message."""

import asyncio
import collections

import discord
import pytest

from pagedembed import errors
from pagedembed.pagination import surface


class FakeSurface(surface.Surface):
    """Records every call and feeds reactions/replies from queues."""

    def __init__(self, *, manage=True, message=None):
        self.manage = manage
        self.message = message
        self.calls = []
        self.renders = []
        self.footers = []
        self.said = []
        self.replies = collections.deque()
        self.fail = set()
        self.events = None

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail:
            raise errors.PlatformIOError(name)

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)

    def _rendered(self, page):
        # Footers are stamped onto the same embed objects, so snapshot them now.
        self.renders.append(page)
        self.footers.append(page.footer.text)

    async def send(self, page):
        self._record("send", page)
        self.message = object()
        self._rendered(page)

    async def edit(self, page):
        self._record("edit", page)
        self._rendered(page)

    async def attach(self, glyph):
        self._record("attach", glyph)

    async def detach_actor(self, glyph, actor_id):
        self._record("detach_actor", glyph, actor_id)

    async def detach_own(self, glyph):
        self._record("detach_own", glyph)

    async def clear(self):
        self._record("clear")

    async def say(self, text):
        self._record("say", text)
        self.said.append(text)

    def can_manage_tokens(self):
        return self.manage

    def _queue(self):
        if self.events is None:
            self.events = asyncio.Queue()
        return self.events

    async def press(self, glyph, actor_id):
        await self._queue().put(surface.TokenEvent(glyph, actor_id))

    async def drain(self):
        """Waits until every pressed reaction has been fully handled."""
        await self._queue().join()

    async def collect(self, predicate):
        queue = self._queue()
        while True:
            event = await queue.get()
            try:
                if predicate(event):
                    yield event
            finally:
                queue.task_done()

    async def ask(self, prompt, predicate):
        self._record("ask", prompt)
        while self.replies:
            reply = self.replies.popleft()
            if predicate(reply):
                return reply.content
        # Nobody answers.
        await asyncio.Event().wait()


def make_pages(count):
    return [discord.Embed(title=f"Page {i}") for i in range(count)]


@pytest.fixture
def fake_surface():
    return FakeSurface()


@pytest.fixture
def pages():
    return make_pages(3)
