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


def relative_error(p_out, p_calc):
    """ Relative change between the outlet estimate and the newly computed pressure, scaled on the latter"""
    return abs((p_out - p_calc) / p_calc)


def degenerate(p_in, p_calc):
    """ True when p_calc cannot serve as the scale of a relative error"""
    return (not math.isfinite(p_calc)) or p_calc == 0 or (p_calc > 0) != (p_in > 0)


def bracket_root(f, x0, step, max_iter):
    """ Expands an interval about x0, doubling its half width each pass, until f changes sign across it.
        Returns (lo, hi, iterations), or None if no sign change was found within max_iter expansions.
        Raises FloatingPointError if f returns a non-finite value
    """
    step = abs(step)
    for iternum in range(1, max_iter + 1):
        lo, hi = x0 - step, x0 + step
        f_lo, f_hi = f(lo), f(hi)
        if not (math.isfinite(f_lo) and math.isfinite(f_hi)):
            raise FloatingPointError(f"Non-finite function value while bracketing between {lo} and {hi}")
        if f_lo * f_hi <= 0:
            return lo, hi, iternum
        step *= 2
    return None
