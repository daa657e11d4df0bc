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
Splits long text into embed fields without needing a navigator.
"""

__all__ = ("FIELD_LIMIT", "split_fields", "clone_embed")

import re
import typing

import discord

# Max characters Discord allows in an embed field value.
FIELD_LIMIT = 1024

ZWSP = "\N{ZERO WIDTH SPACE}"

_sentence_end = re.compile(r"(\n|\.)")


def _sentences(text: str) -> typing.List[str]:
    # Splitting with a capture group alternates text and the delimiter after it.
    parts = _sentence_end.split(text)
    sentences = []
    for i in range(0, len(parts), 2):
        sentence = parts[i] + (parts[i + 1] if i + 1 < len(parts) else "")
        if sentence:
            sentences.append(sentence)
    return sentences


def _chunks(text: str, limit: int) -> typing.List[str]:
    chunks = []
    for sentence in _sentences(text):
        # A single sentence over the limit gets hard wrapped.
        pieces = [sentence[i : i + limit] for i in range(0, len(sentence), limit)]
        for piece in pieces:
            if chunks and len(chunks[-1]) + len(piece) <= limit:
                chunks[-1] += piece
            else:
                chunks.append(piece)
    return chunks


def clone_embed(embed: discord.Embed) -> discord.Embed:
    return embed.copy()


def split_fields(
    text: str, embed: discord.Embed = None, per_page: int = 2, field_title: str = ZWSP
) -> typing.Union[typing.List[str], typing.List[discord.Embed]]:
    """
    Splits text on full stops and line breaks into chunks no longer than
    :data:`FIELD_LIMIT` characters.

    If no embed is given, the chunks themselves are returned. Otherwise, each
    group of ``per_page`` chunks is added as fields to a copy of the embed,
    and the copies are returned. The first field on each copy is named
    ``field_title``; the rest are left blank.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    chunks = _chunks(text, FIELD_LIMIT)

    if embed is None:
        return chunks

    pages = []
    for i, chunk in enumerate(chunks):
        if i % per_page == 0:
            pages.append(clone_embed(embed))
            name = field_title
        else:
            name = ZWSP
        pages[-1].add_field(name=name, value=chunk.strip() or ZWSP, inline=False)

    return pages
