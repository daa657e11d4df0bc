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
Global theme stuff.
"""
import discord

# Used when the bot has no coloured role to borrow a colour from.
FALLBACK_COLOUR = 5198940


def role_colour(ctx) -> int:
    """The colour of the bot's highest role in this guild, or the fallback."""
    me = getattr(ctx, "me", None)
    top_role = getattr(me, "top_role", None)
    if top_role is not None and top_role.colour.value:
        return top_role.colour.value
    return FALLBACK_COLOUR


def generic_embed(ctx, *, colour=None, **kwargs) -> discord.Embed:
    if colour is None:
        colour = role_colour(ctx)
    return discord.Embed(colour=colour, **kwargs)
