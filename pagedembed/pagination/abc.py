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
Abstract base classes for the pagination module.
"""

__all__ = ("PagABC",)

import weakref
from abc import ABC
from abc import abstractmethod


class PagABC(ABC):
    """
    Keeps track of the sessions that are currently listening for reactions,
    so that the bot can stop all of them when it shuts down.

    The weak references are dealt with automatically internally, so a session
    that is garbage collected without closing simply disappears from here.
    """

    active_sessions = weakref.WeakSet()

    def _register(self):
        self.active_sessions.add(self)

    def _unregister(self):
        self.active_sessions.discard(self)

    @abstractmethod
    def stop(self) -> None:
        """Requests that the session stops listening and cleans up."""
        ...

    @abstractmethod
    async def wait_closed(self) -> None:
        """Waits until cleanup has finished."""
        ...
