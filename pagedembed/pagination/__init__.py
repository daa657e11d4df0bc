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
Reaction-driven navigation through pages of embeds.

A navigator is a state machine that holds a collection of pages and the index
of the one being shown, and provides Discord reactions (known as "buttons")
that have actions associated with them. When the member who invoked the
command presses one of those reactions, the bot removes it again (if it is
allowed to) and performs the bound action, which usually means editing the
message to show another page. Only one message is ever used for this.

There is also a standalone utility for splitting long text into embed fields,
for commands that just want pages without the navigation.
"""

from .abc import *
from .actions import *
from .discord_surface import *
from .emojis import *
from .router import *
from .session import *
from .splitting import *
from .store import *
from .surface import *
