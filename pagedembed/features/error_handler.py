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

import asyncio
import inspect
import uuid

import discord
from discord.ext import commands

from pagedembed import cog
from pagedembed import errors


def mark_as_handler(ex_type, *ex_types):
    def decorator(func):
        assert inspect.iscoroutinefunction(func), "Handler must be a coroutine function"
        setattr(func, "__error_handler_for__", [ex_type, *ex_types])
        return func

    return decorator


def is_handler(obj):
    try:
        return all(issubclass(cls, Exception) for cls in obj.__error_handler_for__)
    except AttributeError:
        return False


# These are exception types we can safely print out to the user in a message with no checking.
MANAGED_EXCEPTIONS = [
    commands.NotOwner,
    commands.MissingRequiredArgument,
    commands.BadArgument,
    commands.BotMissingPermissions,
    commands.MissingPermissions,
    commands.NoPrivateMessage,
    commands.TooManyArguments,
    discord.Forbidden,
    discord.NotFound,
    errors.NotFound,
    errors.OutOfRangeError,
    errors.InvalidInputError,
]


class ErrorHandlerCog(cog.CogBase):
    def __init__(self, bot):
        super().__init__(bot)
        self.handlers = {}
        for _, handler in inspect.getmembers(self, is_handler):
            for ex_t in handler.__error_handler_for__:
                self.handlers[ex_t] = handler

        self.logger.info("Registered exception handlers for %s scenarios", len(self.handlers))

    def find_handler(self, error):
        for klass in type(error).mro():
            if klass in self.handlers:
                return self.handlers[klass]
        return None

    @cog.CogBase.listener()
    async def on_command_error(self, ctx, error):
        self.logger.debug("Handling exception", exc_info=error)

        cause = error.__cause__ if error.__cause__ and not isinstance(error, commands.BadArgument) else error

        handler = self.find_handler(cause)
        if handler is not None:
            await handler(ctx, cause)

    @mark_as_handler(commands.CommandNotFound)
    async def on_command_not_found(self, ctx, error):
        await ctx.message.add_reaction("\N{BLACK QUESTION MARK ORNAMENT}")

    @mark_as_handler(commands.DisabledCommand, commands.CheckFailure)
    async def on_command_disabled(self, ctx, error):
        await ctx.message.add_reaction("\N{NO ENTRY SIGN}")

    @mark_as_handler(commands.CommandOnCooldown)
    async def on_command_on_cooldown(self, ctx, error):
        reaction = "\N{SNOWFLAKE}\N{VARIATION SELECTOR-16}"
        asyncio.create_task(ctx.message.add_reaction(reaction))
        await asyncio.sleep(error.retry_after)
        try:
            await ctx.message.remove_reaction(reaction, ctx.bot.user)
        except discord.NotFound:
            pass

    @mark_as_handler(errors.HttpError)
    async def on_http_error(self, ctx, error):
        self.logger.warning("Upstream HTTP error in %s: %s", ctx.command, error)
        await ctx.send(f"The service I get that from is having a bad day ({error}). Try again later.")

    @mark_as_handler(errors.PlatformIOError)
    async def on_platform_io_error(self, ctx, error):
        self.logger.warning("Navigator in %s hit a Discord error: %s", ctx.channel, error)

    @mark_as_handler(*MANAGED_EXCEPTIONS)
    async def on_managed_exception(self, ctx, error):
        message = str(error).strip()
        if message:
            await ctx.send(message)

    @mark_as_handler(Exception)
    async def on_unhandled_exception(self, ctx, error):
        ref = uuid.uuid4()
        self.logger.exception("Unhandled exception! UUID: %s", ref, exc_info=error)
        await ctx.send(f"Uh oh, something unexpected went wrong!\n\n> Ref: `{ref}`")


setup = ErrorHandlerCog.create_setup()
