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
Actions that a reaction button can be bound to.

There is a closed set of these: the three built-in navigation actions, and
:class:`Custom`, which wraps any zero-argument function or coroutine function.
String names are resolved into one of these exactly once, when the button is
bound, and are never looked at again.
"""

__all__ = ("Action", "NextPage", "PrevPage", "PromptGoTo", "Custom")

import dataclasses
import typing

from pagedembed import functional


class Action:
    """Something to do when a bound reaction is pressed."""

    __slots__ = ()

    async def perform(self, navigator) -> None:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class NextPage(Action):
    async def perform(self, navigator) -> None:
        await navigator.next_page()


@dataclasses.dataclass(frozen=True)
class PrevPage(Action):
    async def perform(self, navigator) -> None:
        await navigator.prev_page()


@dataclasses.dataclass(frozen=True)
class PromptGoTo(Action):
    async def perform(self, navigator) -> None:
        await navigator.prompt()


@dataclasses.dataclass(frozen=True)
class Custom(Action):
    """
    Runs the caller's callback. Nothing raised by it is caught here; it is up
    to the callback whether it re-renders the navigator.
    """

    callback: typing.Callable[[], typing.Any]

    async def perform(self, navigator) -> None:
        await functional.ensure_coroutine_function(self.callback)()


_NAMES = {
    "next": NextPage,
    "nextpage": NextPage,
    "prev": PrevPage,
    "prevpage": PrevPage,
    "prompt": PromptGoTo,
    "goto": PromptGoTo,
    "gotopage": PromptGoTo,
    "ask": PromptGoTo,
}


def from_name(name: str) -> typing.Optional[Action]:
    """Gets the built-in action with the given name, or None."""
    action_t = _NAMES.get(name.lower())
    return action_t() if action_t else None


def coerce(action) -> Action:
    """
    Turns whatever was passed to ``bind`` into an Action.

    :raises TypeError: for unrecognised names and non-callables.
    """
    if isinstance(action, Action):
        return action
    if isinstance(action, str):
        resolved = from_name(action)
        if resolved is None:
            raise TypeError(f"{action!r} is not a recognised action name")
        return resolved
    if callable(action):
        return Custom(action)
    raise TypeError(f"Action must be callable or a recognised name, not {type(action).__name__}")
