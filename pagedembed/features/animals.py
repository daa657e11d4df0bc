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
Pictures of animals.
"""
import asyncio
import dataclasses

from discord.ext import commands

from pagedembed import cog
from pagedembed import errors
from pagedembed import theme

# Most images a gallery will fetch in one go.
MAX_GALLERY = 10

FAILED_TO_LOAD = "Click here if the image failed to load."


@dataclasses.dataclass(frozen=True)
class Animal:
    name: str
    url: str
    # Member of the JSON response holding the image URL.
    key: str
    activity: str


ANIMALS = {
    "owl": Animal("owl", "http://pics.floofybot.moe/owl", "image", "petting an owl"),
    "lizard": Animal("lizard", "https://nekos.life/api/lizard", "url", "looking for a lizard"),
}


class AnimalsCog(cog.CogBase):
    async def fetch_image(self, animal: Animal) -> str:
        data = await self.get_json(animal.url)
        image = data.get(animal.key) if isinstance(data, dict) else None
        if not image:
            raise errors.NotFound(f"Couldn't find a {animal.name} right now, try again later.")
        return image

    @staticmethod
    def image_embed(ctx, url, **kwargs):
        embed = theme.generic_embed(ctx, title=FAILED_TO_LOAD, url=url, **kwargs)
        embed.set_image(url=url)
        return embed

    async def post_one(self, ctx, animal: Animal):
        msg = await ctx.send(f"**{ctx.author.display_name}** is {animal.activity}...")
        try:
            url = await self.fetch_image(animal)
        except Exception:
            await msg.delete()
            raise
        await msg.edit(content=None, embed=self.image_embed(ctx, url))

    @commands.cooldown(1, 10, commands.BucketType.user)
    @commands.command(name="owl", aliases=["hoot"], brief="Post a randomly selected image of an owl.")
    async def owl_command(self, ctx):
        """This command will return a beautiful owl."""
        await self.post_one(ctx, ANIMALS["owl"])

    @commands.cooldown(1, 10, commands.BucketType.user)
    @commands.command(name="lizard", brief="Post a randomly selected image of a lizard.")
    async def lizard_command(self, ctx):
        """This command will return a beautiful lizard."""
        await self.post_one(ctx, ANIMALS["lizard"])

    @commands.cooldown(1, 30, commands.BucketType.user)
    @commands.command(name="gallery", brief="Page through several pictures of an animal.")
    async def gallery_command(self, ctx, animal: str, count: int = 5):
        """
        Fetches a few pictures of the given animal and lets you flick through
        them with reactions. Use the number button to jump to a picture.
        """
        try:
            kind = ANIMALS[animal.lower()]
        except KeyError:
            raise commands.BadArgument(f"I only know about {', '.join(sorted(ANIMALS))}.") from None

        count = max(1, min(count, MAX_GALLERY))

        async with ctx.typing():
            urls = await asyncio.gather(*(self.fetch_image(kind) for _ in range(count)))

        pages = [self.image_embed(ctx, url) for url in urls]
        self.logger.debug("Showing %s %s pictures to %s", len(pages), kind.name, ctx.author)
        await self.navigator(ctx, pages).run()


setup = AnimalsCog.create_setup()
