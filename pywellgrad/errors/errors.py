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


class InvalidSpec(ValueError):
    """ Malformed well description. Raised before any segment is solved."""


class ConvergenceFailure(RuntimeError):
    """ Segment fixed point loop hit its iteration cap without meeting tolerance.

        segment: 1-based segment index
        depth: Depth at the bottom of the segment
        epsilon: Relative error of the last iteration
        p_calc: Last computed outlet pressure
        iterations: Number of iterations performed
        tol: Tolerance that was not met, if known
    """
    def __init__(self, segment, depth, epsilon, p_calc, iterations, tol=None):
        self.segment = segment
        self.depth = float(depth)
        self.epsilon = float(epsilon)
        self.p_calc = float(p_calc)
        self.iterations = iterations
        self.tol = tol
        msg = (f"Segment {segment} (depth {self.depth:g}) did not converge after {iterations} iterations: "
               f"last relative error {self.epsilon:.3e}, last pressure {self.p_calc:g}")
        if tol == 0:
            msg += " (a zero tolerance is unreachable)"
        elif tol is not None:
            msg += f" against tolerance {tol:.3e}"
        super().__init__(msg)


class NumericDegeneracy(RuntimeError):
    """ Outlet pressure became zero, non-finite or changed sign, leaving the
        relative error test undefined.
    """
    def __init__(self, segment, depth, p_calc, iterations):
        self.segment = segment
        self.depth = float(depth)
        self.p_calc = float(p_calc)
        self.iterations = iterations
        super().__init__(
            f"Segment {segment} (depth {self.depth:g}) degenerated at iteration {iterations}: "
            f"computed pressure {self.p_calc:g}")


class MarchCancelled(RuntimeError):
    """ Cancellation was requested before segment `segment` was solved."""
    def __init__(self, segment):
        self.segment = segment
        super().__init__(f"Traverse cancelled before segment {segment}")
