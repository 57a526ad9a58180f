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


# Traverse defaults
DEFAULT_TOL = 1e-5  # Relative convergence tolerance on segment outlet pressure
DEFAULT_SEED_GRADIENT = 0.002  # Zeroth gradient estimate used to seed the first segment (psi/ft)
DEFAULT_MAX_ITER = 100  # Maximum fixed point iterations per segment

# Constants
R = 10.731577089016  # Universal gas constant, ft³·psia/°R·lb.mol
degF2R = 459.67  # Offset to convert degrees F to degrees Rankine
MW_AIR = 28.97  # MW of Air
PSI_PER_FT_FW = 0.433  # Fresh water hydrostatic gradient (psi/ft)
SQIN_PER_SQFT = 144.0
