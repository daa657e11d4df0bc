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
Implementations of errors.
"""

__all__ = (
    "HttpError",
    "NotFound",
    "PaginationError",
    "ConstructionError",
    "MissingCaller",
    "UnboundToken",
    "OutOfRangeError",
    "InvalidInputError",
    "PlatformIOError",
)


class HttpError(RuntimeError):
    def __init__(self, response):
        self.response = response

    @property
    def reason(self) -> str:
        return self.response.reason

    @property
    def status(self) -> int:
        return self.response.status

    def __str__(self):
        return f"{self.status}: {self.reason}"


class NotFound(RuntimeError):
    def __init__(self, message=None):
        self.message = message if message else "No valid result was found"

    def __str__(self):
        return self.message


class PaginationError(RuntimeError):
    """Base for anything a paged embed session can raise."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


class ConstructionError(PaginationError):
    """Raised synchronously when a navigator is built with a bad caller."""


class MissingCaller(ConstructionError):
    def __init__(self, message=None):
        super().__init__(message or "A caller must be the member or user who invoked the command")


class UnboundToken(PaginationError, LookupError):
    """
    A reaction reached the router without an action bound to it. This is a
    wiring mistake in the command, so it is never swallowed.
    """

    def __init__(self, token: str):
        super().__init__(f"No action is bound to {token!r}")
        self.token = token


class OutOfRangeError(PaginationError, IndexError):
    def __init__(self, page, page_count: int):
        super().__init__(f"Page {page} is not in the range 1-{page_count}")
        self.page = page
        self.page_count = page_count


class InvalidInputError(PaginationError, ValueError):
    def __init__(self, value):
        super().__init__(f"{value!r} is not a page number")
        self.value = value


class PlatformIOError(PaginationError):
    """
    Wraps a failed send, edit or reaction call on the chat platform. Nothing
    in the pagination core retries these.
    """

    def __init__(self, operation: str, cause: BaseException = None):
        super().__init__(f"Failed to {operation}" + (f": {cause}" if cause else ""))
        self.operation = operation
