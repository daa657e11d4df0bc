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
Turns a wall of text into something you can page through.
"""
from discord.ext import commands

from pagedembed import cog
from pagedembed import pagination
from pagedembed import theme

FIELDS_PER_PAGE = 2


class ReaderCog(cog.CogBase):
    @commands.command(name="read", aliases=["wall"], brief="Page through a long piece of text.")
    async def read_command(self, ctx, *, text: str):
        template = theme.generic_embed(ctx, title=f"{ctx.author.display_name} wrote")
        pages = pagination.split_fields(text, template, per_page=FIELDS_PER_PAGE)

        if not pages:
            raise commands.BadArgument("There is nothing to read.")

        await self.navigator(ctx, pages).run()


setup = ReaderCog.create_setup()
