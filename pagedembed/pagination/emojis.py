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
Symbolic names for the reactions a navigator can use as buttons.
"""

__all__ = ("EMOJIS", "glyph_for")

import types

EMOJIS = types.MappingProxyType(
    {
        "1234": "\N{INPUT SYMBOL FOR NUMBERS}",
        "right": "\N{BLACK RIGHT-POINTING TRIANGLE}",
        "forward": "\N{BLACK RIGHT-POINTING TRIANGLE}",
        "backward": "\N{BLACK LEFT-POINTING TRIANGLE}",
        "left": "\N{BLACK LEFT-POINTING TRIANGLE}",
        "up": "\N{UP-POINTING SMALL RED TRIANGLE}",
        "down": "\N{DOWN-POINTING SMALL RED TRIANGLE}",
        "play": "\N{BLACK RIGHT-POINTING TRIANGLE}",
        "pause": "\N{DOUBLE VERTICAL BAR}",
        "square": "\N{BLACK SQUARE FOR STOP}",
        "circle": "\N{BLACK CIRCLE FOR RECORD}",
        "next": "\N{BLACK RIGHT-POINTING DOUBLE TRIANGLE WITH VERTICAL BAR}",
        "prev": "\N{BLACK LEFT-POINTING DOUBLE TRIANGLE WITH VERTICAL BAR}",
        "right_double": "\N{BLACK RIGHT-POINTING DOUBLE TRIANGLE}",
        "fast_forward": "\N{BLACK RIGHT-POINTING DOUBLE TRIANGLE}",
        "left_double": "\N{BLACK LEFT-POINTING DOUBLE TRIANGLE}",
        "rewind": "\N{BLACK LEFT-POINTING DOUBLE TRIANGLE}",
        "up_double": "\N{BLACK UP-POINTING DOUBLE TRIANGLE}",
        "down_double": "\N{BLACK DOWN-POINTING DOUBLE TRIANGLE}",
        "point_right": "\N{BLACK RIGHTWARDS ARROW}",
        "right_arrow": "\N{BLACK RIGHTWARDS ARROW}",
        "point_left": "\N{LEFTWARDS BLACK ARROW}",
        "left_arrow": "\N{LEFTWARDS BLACK ARROW}",
        "point_up": "\N{UPWARDS BLACK ARROW}",
        "up_arrow": "\N{UPWARDS BLACK ARROW}",
        "point_down": "\N{DOWNWARDS BLACK ARROW}",
        "down_arrow": "\N{DOWNWARDS BLACK ARROW}",
        "up_right_arrow": "\N{NORTH EAST ARROW}",
        "point_up_right": "\N{NORTH EAST ARROW}",
        "down_right_arrow": "\N{SOUTH EAST ARROW}",
        "point_down_right": "\N{SOUTH EAST ARROW}",
        "down_left_arrow": "\N{SOUTH WEST ARROW}",
        "point_down_left": "\N{SOUTH WEST ARROW}",
        "up_left_arrow": "\N{NORTH WEST ARROW}",
        "point_up_left": "\N{NORTH WEST ARROW}",
        "hook_right": "\N{RIGHTWARDS ARROW WITH HOOK}",
        "hook_left": "\N{LEFTWARDS ARROW WITH HOOK}",
        "arrow_clockwise": "\N{CLOCKWISE RIGHTWARDS AND LEFTWARDS OPEN CIRCLE ARROWS}",
        "reload": "\N{CLOCKWISE RIGHTWARDS AND LEFTWARDS OPEN CIRCLE ARROWS}",
    }
)


def glyph_for(token: str) -> str:
    """Resolves a symbolic name to its glyph. Anything else is taken as a raw glyph."""
    return EMOJIS.get(token, token)
