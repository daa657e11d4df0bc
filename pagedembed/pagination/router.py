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
Maps reaction glyphs to the actions they trigger.
"""

__all__ = ("ActionRouter",)

import typing

from pagedembed import errors
from pagedembed import logging_utils
from pagedembed.pagination import actions
from pagedembed.pagination import emojis


class ActionRouter(logging_utils.Loggable):
    """
    Keeps one action per glyph, plus the order the glyphs should be added to
    the message in. Binding a glyph again replaces its action and moves it to
    the end of that order.
    """

    def __init__(self):
        self._order: typing.List[str] = []
        self._actions: typing.Dict[str, actions.Action] = {}

    def __contains__(self, token: str) -> bool:
        return emojis.glyph_for(token) in self._actions

    def __len__(self):
        return len(self._order)

    @property
    def tokens(self) -> typing.Tuple[str, ...]:
        """Glyphs in the order they get attached to the message."""
        return tuple(self._order)

    def bind(self, token: str, action):
        """
        Binds a glyph (or its symbolic name) to an action, a callable, or
        one of ``next``, ``nextpage``, ``prev``, ``prevpage``, ``prompt``,
        ``goto``, ``gotopage`` and ``ask``.
        """
        glyph = emojis.glyph_for(token)
        action = actions.coerce(action)

        if glyph in self._actions:
            self._order.remove(glyph)
            self.logger.debug("Rebinding %s to %r", glyph, action)

        self._order.append(glyph)
        self._actions[glyph] = action
        return self

    def unbind_all(self):
        self._order.clear()
        self._actions.clear()
        return self

    def resolve(self, token: str) -> actions.Action:
        glyph = emojis.glyph_for(token)
        try:
            return self._actions[glyph]
        except KeyError:
            raise errors.UnboundToken(glyph) from None
