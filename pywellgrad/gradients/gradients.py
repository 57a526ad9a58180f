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

Gradient functions map the average pressure of a segment (psia) to a local
pressure gradient (psi/ft). The traverse treats them as opaque callables;
the factories below cover the common simple cases and the polynomial used
for validation.
"""

import math
import numpy as np

from pywellgrad.constants import R, degF2R, MW_AIR, PSI_PER_FT_FW, SQIN_PER_SQFT


def _clamp(val, lo, hi):
    return max(lo, min(hi, val))


def polynomial_gradient(coeffs):
    """ Returns gradient function dp/dz = c0 + c1*p + c2*p^2 + ...

        coeffs: Polynomial coefficients in increasing order of power
    """
    coeffs = [float(c) for c in coeffs]
    if not coeffs:
        raise ValueError("At least one polynomial coefficient is required")
    poly = np.polynomial.Polynomial(coeffs)

    def gradient(p_avg):
        return float(poly(p_avg))
    return gradient


def constant_gradient(dpdz):
    """ Returns gradient function independent of pressure"""
    dpdz = float(dpdz)

    def gradient(p_avg):
        return dpdz
    return gradient


def liquid_gradient(sg=1.0):
    """ Returns hydrostatic gradient function of an incompressible liquid column

        sg: Liquid specific gravity relative to fresh water. Defaults to 1.0
    """
    if sg <= 0:
        raise ValueError("Liquid specific gravity must be positive")
    return constant_gradient(PSI_PER_FT_FW * sg)


def z_factor(sg, degf, p):
    """ Z-Factor of a sweet dry gas via Hall-Yarborough (1973), Sutton critical properties

        sg: Gas specific gravity (relative to air)
        degf: Temperature (deg F)
        p: Pressure (psia)
    """
    if p < 1.0:
        return 1.0
    tpc = 169.2 + 349.5 * sg - 74.0 * sg * sg
    ppc = 756.8 - 131.0 * sg - 3.6 * sg * sg
    tr = (degf + degF2R) / tpc
    pr = p / ppc

    t_inv = 1.0 / tr
    a = -0.06125 * t_inv * math.exp(-1.2 * (1.0 - t_inv) ** 2)
    b = 14.76 * t_inv - 9.76 * t_inv ** 2 + 4.58 * t_inv ** 3
    c = 90.7 * t_inv - 242.2 * t_inv ** 2 + 42.4 * t_inv ** 3
    d = 2.18 + 2.82 * t_inv

    # Newton solve for reduced density y
    y = _clamp(0.0125 * pr * t_inv, 1e-10, 0.9)
    for _ in range(50):
        y2, y3, y4 = y * y, y * y * y, y ** 4
        one_m_y = 1.0 - y
        fy = (y + y2 + y3 - y4) / one_m_y ** 3 + a * pr - b * y2 + c * y ** d
        dfy = ((1.0 + 4.0 * y + 4.0 * y2 - 4.0 * y3 + y4) / one_m_y ** 4 -
               2.0 * b * y + c * d * y ** (d - 1.0))
        if abs(dfy) < 1e-30:
            break
        dy = fy / dfy
        y = _clamp(y - dy, 1e-10, 0.99)
        if abs(dy) < 1e-12:
            break

    return _clamp(-a * pr / y, 0.1, 5.0)


def gas_gradient(sg=0.65, degf=150.0):
    """ Returns static gradient function of an isothermal dry gas column

        sg: Gas specific gravity (relative to air). Defaults to 0.65
        degf: Column temperature (deg F). Defaults to 150
    """
    if sg <= 0:
        raise ValueError("Gas specific gravity must be positive")
    temp_r = degf + degF2R
    if temp_r <= 0:
        raise ValueError("Temperature must be above absolute zero")

    def gradient(p_avg):
        p = max(p_avg, 0.0)
        zee = z_factor(sg, degf, p)
        rho_gas = MW_AIR * sg * p / (zee * R * temp_r)  # lb/cuft
        return rho_gas / SQIN_PER_SQFT
    return gradient


# Test function used to validate the traverse, psi/ft against psia
validation_gradient = polynomial_gradient([0.09, 1e-4, 5e-8, -2e-11])
