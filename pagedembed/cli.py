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
Application entry point. This reads the configuration, sets up logging, and
then starts the bot, which loads its modules as it connects.

Secrets come from the environment. Anything else may be put in an optional
``pagedembed.yaml`` (or ``.json``) in ``PAGEDEMBED_CONFIG_DIRECTORY``.
"""
import asyncio
import logging
import os

from pagedembed import bot as client
from pagedembed import configuration_files
from pagedembed import logging_utils

CONFIG_FILE = "pagedembed"


async def read_config() -> dict:
    file_config = await configuration_files.get_config_data(CONFIG_FILE, default={})

    config = dict(
        bot={"command_prefix": os.getenv("PAGEDEMBED_PREFIX", "p."), **file_config.get("bot", {})},
        auth=dict(
            token=os.environ["PAGEDEMBED_TOKEN"],
        ),
        pagination=file_config.get("pagination", {}),
        debug=file_config.get("debug", False),
    )

    owner_id = os.getenv("PAGEDEMBED_OWNER_ID")
    if owner_id:
        config["bot"]["owner_id"] = int(owner_id)

    return config


def cli():
    logger = logging_utils.configure(os.getenv("LOGGER_LEVEL", "INFO"))

    try:
        import uvloop

        run = uvloop.run
        logging.info("Using uvloop for asyncio event loop")
    except ImportError:
        run = asyncio.run
        logging.info("Using default asyncio event loop")

    async def main():
        bot = client.Bot(await read_config())
        async with bot:
            await bot.start(bot.token)

    try:
        run(main())
    except client.BotInterrupt as ex:
        logger.critical(f"Received interrupt {ex}")
    except Exception as ex:
        logger.exception("An unrecoverable error occurred.", exc_info=ex)
    else:
        logger.info("The bot stopped executing as expected")
    finally:
        logger.critical("Process is terminating NOW.")


if __name__ == "__main__":
    cli()
