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
Ordered pages plus the cursor pointing at the one being shown.
"""

__all__ = ("PageStore",)

import re
import typing

from pagedembed import errors

# Plain decimal numbers only: no exponents, underscores, infinities or NaN.
_decimal = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


class PageStore:
    """
    Holds the pages of a navigator and the index of the current page.

    The cursor wraps around in both directions. Replacing the pages does not
    reset the cursor, so :attr:`current` may be ``None`` until it is moved
    back into range.
    """

    __slots__ = ("pages", "cursor")

    def __init__(self, pages: typing.Iterable = ()):
        self.pages = list(pages)
        self.cursor = 0

    def __len__(self):
        return len(self.pages)

    def add_page(self, page):
        self.pages.append(page)
        return self

    def add_pages(self, pages: typing.Iterable):
        self.pages.extend(pages)
        return self

    def set_pages(self, pages: typing.Iterable):
        self.pages = list(pages)
        return self

    def clear_pages(self):
        self.pages = []
        return self

    @property
    def current(self):
        """The page under the cursor, or None if the cursor is out of range."""
        if 0 <= self.cursor < len(self.pages):
            return self.pages[self.cursor]
        return None

    def footer(self) -> str:
        return f"{self.cursor + 1}/{len(self.pages)}"

    def next_page(self) -> int:
        if self.pages:
            self.cursor = (self.cursor + 1) % len(self.pages)
        return self.cursor

    def prev_page(self) -> int:
        if self.pages:
            self.cursor = (self.cursor - 1) % len(self.pages)
        return self.cursor

    def page_to(self, page: typing.Union[int, str]) -> int:
        """
        Moves to the given 1-based page number. Strings are parsed first, as
        they usually come straight from a chat message.

        :raises InvalidInputError: if the string is not a number at all.
        :raises OutOfRangeError: if the number is not a page we have.
        """
        number = page
        if isinstance(page, str):
            text = page.strip()
            if not _decimal.fullmatch(text):
                raise errors.InvalidInputError(page)

            number = float(text)
            if not number.is_integer():
                raise errors.OutOfRangeError(page, len(self.pages))
            number = int(number)
        elif not isinstance(number, int) or isinstance(number, bool):
            raise errors.InvalidInputError(page)

        if not 1 <= number <= len(self.pages):
            raise errors.OutOfRangeError(page, len(self.pages))

        self.cursor = number - 1
        return self.cursor
