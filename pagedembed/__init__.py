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
A Discord bot built around reaction-driven paged embeds.
"""

__author__ = "Natsurii Labs"
__repository__ = "https://github.com/Natsurii/pagedembed"
__version__ = "0.5.0"
