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
Loggable class.
"""
import logging

__all__ = ("Loggable", "LOGGERS_TO_SUPPRESS", "configure")

LOGGERS_TO_SUPPRESS = ["discord.http", "discord.gateway"]

SUPPRESS_TO_LEVEL = "FATAL"

LOG_FORMAT = "%(asctime)s.%(msecs)03d L:%(levelname)s M:%(module)s F:%(funcName)s: %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Loggable:
    """Adds functionality to a class to allow it to log information."""

    logger: logging.Logger

    def __init_subclass__(cls, **_):
        cls.logger: logging.Logger = logging.getLogger(cls.__name__)


def configure(level: str = "INFO") -> logging.Logger:
    """Sets up the root logger and quietens the noisy discord.py loggers."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    for other_logger in LOGGERS_TO_SUPPRESS:
        logging.getLogger(other_logger).setLevel(SUPPRESS_TO_LEVEL)

    return logging.getLogger("pagedembed")
