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

import math
import numbers
import numpy as np
import numpy.typing as npt

from pywellgrad.errors import InvalidSpec


def check_grid_inputs(top, bottom, nseg):
    """ Raises InvalidSpec unless nseg is an integer >= 1 and top < bottom are finite"""
    if isinstance(nseg, bool) or not isinstance(nseg, numbers.Integral):
        raise InvalidSpec(f"Segment count must be an integer, got {nseg!r}")
    if nseg < 1:
        raise InvalidSpec(f"Segment count must be at least 1, got {nseg}")
    if not (math.isfinite(top) and math.isfinite(bottom)):
        raise InvalidSpec(f"Depths must be finite, got top={top}, bottom={bottom}")
    if bottom <= top:
        raise InvalidSpec(f"Bottom depth ({bottom}) must be greater than top depth ({top})")


def depth_grid(top: float, bottom: float, nseg: int) -> npt.ArrayLike:
    """ Returns read-only array of nseg + 1 equally spaced depths from top to bottom inclusive

        top: Depth of the top of the string (ft)
        bottom: Depth of the bottom of the string (ft). Must exceed top
        nseg: Number of equal length segments. Must be an integer >= 1
    """
    check_grid_inputs(top, bottom, nseg)
    nseg = int(nseg)
    grid = top + np.arange(nseg + 1) * ((bottom - top) / nseg)
    grid[0], grid[-1] = top, bottom  # Endpoints exact regardless of rounding
    grid.flags.writeable = False
    return grid


def segment_lengths(grid: npt.ArrayLike) -> npt.ArrayLike:
    """ Returns the nseg segment lengths of a depth grid"""
    dl = np.diff(np.asarray(grid, dtype=float))
    dl.flags.writeable = False
    return dl
