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
Base class for cogs.
"""
import aiohttp
from discord.ext import commands

from pagedembed import errors
from pagedembed import logging_utils
from pagedembed import pagination


class CogBase(logging_utils.Loggable, commands.Cog):
    """Contains any shared resource traits we may want to acquire."""

    def __init__(self, bot):
        super().__init__()
        self.bot = bot

    @classmethod
    def acquire_http_session(cls):
        """
        Acquires a new HTTP client session. This must be closed after use to
        avoid leaving connections open.
        """
        return aiohttp.ClientSession()

    async def get_json(self, url, **kwargs):
        """GETs the URL and decodes the JSON body, raising HttpError on a bad status."""
        self.logger.debug("GET %s", url)
        async with self.acquire_http_session() as session:
            async with session.get(url, **kwargs) as resp:
                if resp.status >= 400:
                    raise errors.HttpError(resp)
                return await resp.json(content_type=None)

    @staticmethod
    def navigator(ctx, pages=(), **kwargs) -> pagination.EmbedNavigator:
        """Makes a navigator over the given pages for the command author, with the default buttons."""
        return pagination.EmbedNavigator.from_context(ctx, **kwargs).add_pages(pages).use_default_reactions()

    @classmethod
    def create_setup(cls):
        async def setup(bot):
            await bot.add_cog(cls(bot))

        return setup
