#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyWellGrad - Stepwise pressure traverse of vertical well tubing
              Copyright (C) 2026, pyWellGrad contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

from enum import Enum

class seg_method(Enum):  # Segment outlet pressure solution method
    PICARD = 0
    BRENT = 1

class_dic = {
    "segmethod": seg_method,
}
