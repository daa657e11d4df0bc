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
Handles reading config files.
"""
import io  # Streams
import json
import os  # File operations
import typing  # Type checking

import aiofiles  # Async file IO
import yaml

from pagedembed import logging_utils

CONFIG_DIRECTORY = os.getenv("PAGEDEMBED_CONFIG_DIRECTORY", "./config")

# Functions to call to deserialize each type.
deserializers = {".json": json.load, ".yaml": yaml.safe_load, ".yml": yaml.safe_load}


class ConfigFile(logging_utils.Loggable):
    """
    Representation of a configuration file that allows for read-only
    access. This model assumes that the config file is not changeable at
    runtime; thus the data is cached after the first access.

    This also will attempt to guess the file extension if omitted, for example,
    if you attempt to load `foo`, but `foo` does not exist, the class will
    attempt to resolve `foo.json`, then `foo.yaml`, etc. If one of those is
    found, then that is loaded instead.

    Note. This is not thread-safe.

    :param path: the path of the file to read. If extension is omitted, we
        attempt to find it.
    :param should_guess: defaults to true. If true, we allow guessing of the
        extension if we fail to find it.
    """

    def __init__(self, path, *, should_guess=True):
        path, ext = self._get_extension(path, should_guess)

        if not os.access(path, os.R_OK):
            raise PermissionError(f"I do not have read access to {path!r}.")
        else:
            self.path = path
            self._value = None
            self.deserializer = deserializers[ext]

    @staticmethod
    def _get_extension(base: str, should_guess: bool = True) -> typing.Tuple[str, str]:
        """
        Assuming that base is not found as an actual file path, attempt
        to resolve the config file by guessing the extension. We return the
        first match for the file name, with the extension. This will also work
        if the extension already exists. If nothing can be found, then an
        exception is raised.
        """
        for ext in deserializers:
            if os.path.isfile(base) and base.endswith(ext):
                return base, ext
            elif os.path.isfile(base + ext) and should_guess:
                return base + ext, ext

        if os.path.isfile(base):
            raise NotImplementedError(f"No deserialiser is defined for {base!r}")
        elif os.path.exists(base):
            raise TypeError(f"{base!r} is not a valid file.")
        else:
            raise FileNotFoundError(f"{base!r} does not exist.")

    def _describe(self):
        return f'{getattr(self.deserializer, "__module__")}.{self.deserializer.__name__}'

    async def async_get(self):
        """Asynchronously reads the config from file, the first time only."""
        if self._value is None:
            self.logger.info("Asynchronously deserialising %s using %s", self.path, self._describe())
            async with aiofiles.open(self.path) as fp:
                with io.StringIO(await fp.read()) as str_io:
                    self._value = self.deserializer(str_io)
        return self._value


def get_from_config_dir(file_name):
    """
    Constructs a ConfigFile from the default configuration directory.

    :param file_name: the file to open in the configuration directory.
    :returns: a ConfigFile object.
    """
    return ConfigFile(os.path.join(CONFIG_DIRECTORY, file_name))


async def get_config_data(file_name, default=None):
    """
    Quickly fetches the config data from the config directory. If the file
    does not exist and a default is given, the default is returned instead.
    """
    try:
        config_file = get_from_config_dir(file_name)
    except FileNotFoundError:
        if default is None:
            raise
        return default
    return await config_file.async_get()
