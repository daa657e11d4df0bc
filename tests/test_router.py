"""Tests for binding reactions to actions."""

import asyncio
import functools

import pytest

from pagedembed import errors
from pagedembed import functional
from pagedembed.pagination import actions
from pagedembed.pagination.emojis import EMOJIS
from pagedembed.pagination.router import ActionRouter


class TestBind:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("next", actions.NextPage),
            ("NextPage", actions.NextPage),
            ("prev", actions.PrevPage),
            ("prevpage", actions.PrevPage),
            ("prompt", actions.PromptGoTo),
            ("goto", actions.PromptGoTo),
            ("gotopage", actions.PromptGoTo),
            ("ask", actions.PromptGoTo),
        ],
    )
    def test_names_resolve_at_bind_time(self, name, expected):
        router = ActionRouter().bind("next", name)
        assert isinstance(router.resolve("next"), expected)

    def test_symbolic_token_names_become_glyphs(self):
        router = ActionRouter().bind("prev", "prev").bind("1234", "goto")
        assert router.tokens == (EMOJIS["prev"], EMOJIS["1234"])
        assert "prev" in router
        assert EMOJIS["prev"] in router

    def test_raw_glyph(self):
        router = ActionRouter().bind("\N{CROSS MARK}", "next")
        assert router.tokens == ("\N{CROSS MARK}",)

    def test_callable_is_wrapped(self):
        def callback():
            pass

        action = ActionRouter().bind("up", callback).resolve("up")
        assert action == actions.Custom(callback)

    def test_action_instance_kept(self):
        action = actions.PrevPage()
        assert ActionRouter().bind("up", action).resolve("up") is action

    def test_unknown_name_rejected(self):
        with pytest.raises(TypeError):
            ActionRouter().bind("next", "nextt")

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            ActionRouter().bind("next", 12)

    def test_rebinding_moves_to_end_and_replaces(self):
        router = ActionRouter().bind("prev", "prev").bind("next", "next").bind("prev", "goto")
        assert router.tokens == (EMOJIS["next"], EMOJIS["prev"])
        assert isinstance(router.resolve("prev"), actions.PromptGoTo)
        assert isinstance(router.resolve("next"), actions.NextPage)
        assert len(router) == 2

    def test_unbind_all(self):
        router = ActionRouter().bind("prev", "prev").unbind_all()
        assert router.tokens == ()
        assert "prev" not in router


class TestResolve:
    def test_unbound_token(self):
        router = ActionRouter().bind("next", "next")
        with pytest.raises(errors.UnboundToken) as info:
            router.resolve("prev")
        assert info.value.token == EMOJIS["prev"]


class TestEnsureCoroutineFunction:
    def test_sync_function(self):
        assert asyncio.run(functional.ensure_coroutine_function(lambda: 3)()) == 3

    def test_async_function(self):
        async def four():
            return 4

        assert functional.ensure_coroutine_function(four) is four

    def test_sync_function_returning_awaitable(self):
        async def five():
            return 5

        assert asyncio.run(functional.ensure_coroutine_function(lambda: five())()) == 5

    def test_partial_of_async(self):
        async def add(a, b):
            return a + b

        partial = functools.partial(add, 1)
        assert functional.is_coroutine_function(partial)
        assert asyncio.run(functional.ensure_coroutine_function(partial)(2)) == 3
