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

Stepwise pressure traverse of a vertical tubing string.

The string is split into equal length segments. Working down from the
surface, each segment solves the implicit relation

    p_out = p_in + G((p_in + p_out) / 2) * dL

where G is an injected gradient function of average segment pressure. The
converged outlet pressure and gradient of one segment become the inlet
pressure and starting extrapolation of the next, so segments are solved
strictly in order.
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, List

import numpy as np
import numpy.typing as npt
import pandas as pd
from scipy.optimize import brentq

from pywellgrad.constants import DEFAULT_TOL, DEFAULT_SEED_GRADIENT, DEFAULT_MAX_ITER
from pywellgrad.errors import InvalidSpec, ConvergenceFailure, NumericDegeneracy, MarchCancelled
from pywellgrad.grid import check_grid_inputs, depth_grid
from pywellgrad.shared_fns import relative_error, degenerate, bracket_root
from pywellgrad.validate import validate_methods

logger = logging.getLogger(__name__)

GradientFunction = Callable[[float], float]


# ============================================================================
#  Data Classes: WellSpec, SegmentState, SegmentResult and ResultTable
# ============================================================================

@dataclass(frozen=True)
class WellSpec:
    """ Well description for a pressure traverse. Validated on construction.

        psurf: Surface (tubing head) pressure (psia). Must be non-zero
        top: Depth of top of string (ft)
        bottom: Depth of bottom of string (ft). Must exceed top
        nseg: Number of equal length segments (integer >= 1)
        tol: Relative convergence tolerance on segment outlet pressure. Defaults to 1e-5.
             Zero is accepted, but can never be met
        seed_gradient: Gradient used to extrapolate the first segment's starting estimate (psi/ft). Defaults to 0.002
        max_iter: Maximum fixed point iterations per segment. Defaults to 100
    """
    psurf: float
    top: float
    bottom: float
    nseg: int
    tol: float = DEFAULT_TOL
    seed_gradient: float = DEFAULT_SEED_GRADIENT
    max_iter: int = DEFAULT_MAX_ITER

    def __post_init__(self):
        self.validate()

    def validate(self):
        """ Raises InvalidSpec describing the first problem found"""
        check_grid_inputs(self.top, self.bottom, self.nseg)
        if not math.isfinite(self.psurf):
            raise InvalidSpec(f"Surface pressure must be finite, got {self.psurf}")
        if self.psurf == 0:
            raise InvalidSpec("Surface pressure must be non-zero")
        if not math.isfinite(self.tol) or self.tol < 0:
            raise InvalidSpec(f"Tolerance must be a finite non-negative number, got {self.tol}")
        if not math.isfinite(self.seed_gradient):
            raise InvalidSpec(f"Seed gradient must be finite, got {self.seed_gradient}")
        if isinstance(self.max_iter, bool) or not isinstance(self.max_iter, numbers.Integral) or self.max_iter < 1:
            raise InvalidSpec(f"Maximum iterations must be an integer >= 1, got {self.max_iter!r}")

    @property
    def grid(self) -> npt.ArrayLike:
        """ Depths bounding each segment, top to bottom"""
        return depth_grid(self.top, self.bottom, self.nseg)

    @property
    def length(self) -> float:
        return self.bottom - self.top


@dataclass
class SegmentState:
    """ Working values of one segment's fixed point loop"""
    p_in: float
    p_out: float
    p_avg: float = math.nan
    dp_dz: float = math.nan
    p_calc: float = math.nan
    iterations: int = 0
    epsilon: float = math.inf


@dataclass(frozen=True)
class SegmentResult:
    """ Converged solution of one segment

        depth: Depth at the bottom of the segment (ft)
        pressure: Converged outlet pressure (psia)
        p_avg: Average segment pressure of the final iteration (psia)
        gradient: Gradient evaluated at p_avg (psi/ft)
        p_in: Inlet pressure (psia)
        length: Segment length (ft)
        iterations: Iterations taken to converge
        epsilon: Relative error of the final iteration
    """
    depth: float
    pressure: float
    p_avg: float
    gradient: float
    p_in: float = field(default=math.nan, compare=False)
    length: float = field(default=math.nan, compare=False)
    iterations: int = field(default=0, compare=False)
    epsilon: float = field(default=math.nan, compare=False)


class ResultTable:
    """ Ordered, append-only collection of SegmentResult, one per segment in increasing depth"""

    columns = ['Depth', 'Pressure', 'P_avg', 'Gradient', 'Iterations', 'Epsilon']

    def __init__(self, results=None):
        self._results: List[SegmentResult] = []
        for result in results or []:
            self.append(result)

    def append(self, result: SegmentResult):
        if self._results and not result.depth > self._results[-1].depth:
            raise ValueError(f"Segment depth {result.depth} does not follow {self._results[-1].depth}")
        self._results.append(result)

    def __len__(self):
        return len(self._results)

    def __iter__(self):
        return iter(self._results)

    def __getitem__(self, idx):
        return self._results[idx]

    def __repr__(self):
        return f"ResultTable({len(self)} segments, bhp={self.bhp if self._results else None})"

    def _column(self, attr):
        arr = np.array([getattr(r, attr) for r in self._results], dtype=float)
        arr.flags.writeable = False
        return arr

    @property
    def depths(self):
        return self._column('depth')

    @property
    def pressures(self):
        return self._column('pressure')

    @property
    def p_avgs(self):
        return self._column('p_avg')

    @property
    def gradients(self):
        return self._column('gradient')

    @property
    def bhp(self) -> float:
        """ Pressure at the bottom of the deepest segment (psia)"""
        if not self._results:
            raise IndexError("ResultTable is empty")
        return self._results[-1].pressure

    def to_dataframe(self) -> pd.DataFrame:
        """ Returns one row per segment with columns Depth, Pressure, P_avg, Gradient, Iterations, Epsilon"""
        rows = [[r.depth, r.pressure, r.p_avg, r.gradient, r.iterations, r.epsilon] for r in self._results]
        df = pd.DataFrame(rows, columns=self.columns)
        df['Iterations'] = df['Iterations'].astype(int)
        return df


# ============================================================================
#  Segment solvers
# ============================================================================

def _picard_segment(p_in, dl, gradient_fn, dp_dz_prev, tol, max_iter, segment, depth):
    # Successive substitution on the outlet pressure
    state = SegmentState(p_in=p_in, p_out=p_in + dp_dz_prev * dl)

    for _ in range(max_iter):
        state.iterations += 1
        state.p_avg = (state.p_in + state.p_out) / 2.0
        state.dp_dz = float(gradient_fn(state.p_avg))
        state.p_calc = state.p_in + state.dp_dz * dl

        if degenerate(state.p_in, state.p_calc):
            logger.warning("Segment %d degenerated: p_calc=%r at iteration %d", segment, state.p_calc, state.iterations)
            raise NumericDegeneracy(segment, depth, state.p_calc, state.iterations)

        state.epsilon = relative_error(state.p_out, state.p_calc)
        if state.epsilon < tol:
            return state
        state.p_out = state.p_calc

    logger.warning("Segment %d failed to converge in %d iterations, last error %.3e",
                   segment, state.iterations, state.epsilon)
    raise ConvergenceFailure(segment, depth, state.epsilon, state.p_calc, state.iterations, tol=tol)


def _brent_segment(p_in, dl, gradient_fn, dp_dz_prev, tol, max_iter, segment, depth):
    # Bracketed root of the residual of the implicit relation
    def residual(p_out):
        return p_out - p_in - float(gradient_fn((p_in + p_out) / 2.0)) * dl

    p_guess = p_in + dp_dz_prev * dl
    step = max(abs(p_guess - p_in), 1e-3 * abs(p_in))
    try:
        bracket = bracket_root(residual, p_guess, step, max_iter)
    except FloatingPointError:
        logger.warning("Segment %d degenerated while bracketing", segment)
        raise NumericDegeneracy(segment, depth, math.nan, 0)
    if bracket is None:
        logger.warning("Segment %d: no sign change found in %d bracket expansions", segment, max_iter)
        raise ConvergenceFailure(segment, depth, math.inf, p_guess, max_iter, tol=tol)
    lo, hi, _ = bracket

    rtol = max(tol * 1e-2, 4.0 * np.finfo(float).eps)
    p_root, r = brentq(residual, lo, hi, xtol=rtol * abs(p_in), rtol=rtol, maxiter=max_iter,
                       full_output=True, disp=False)

    state = SegmentState(p_in=p_in, p_out=p_root, iterations=r.iterations)
    state.p_avg = (p_in + p_root) / 2.0
    state.dp_dz = float(gradient_fn(state.p_avg))
    state.p_calc = p_in + state.dp_dz * dl
    if degenerate(p_in, state.p_calc):
        logger.warning("Segment %d degenerated: p_calc=%r", segment, state.p_calc)
        raise NumericDegeneracy(segment, depth, state.p_calc, state.iterations)
    state.epsilon = relative_error(p_root, state.p_calc)
    if not r.converged or not state.epsilon < tol:
        logger.warning("Segment %d failed to converge, last error %.3e", segment, state.epsilon)
        raise ConvergenceFailure(segment, depth, state.epsilon, state.p_calc, state.iterations, tol=tol)
    return state


_SEG_METHOD_DIC = {
    "PICARD": _picard_segment,
    "BRENT": _brent_segment,
}


def solve_segment(p_in, dl, gradient_fn, dp_dz_prev, tol=DEFAULT_TOL, max_iter=DEFAULT_MAX_ITER,
                  segment=1, depth=None, segmethod='PICARD') -> SegmentResult:
    """ Solves outlet pressure of a single segment. Returns SegmentResult.

        p_in: Inlet pressure (psia)
        dl: Segment length (ft)
        gradient_fn: Callable returning gradient (psi/ft) for an average pressure (psia)
        dp_dz_prev: Gradient used to extrapolate the starting outlet estimate (psi/ft)
        tol: Relative convergence tolerance. Defaults to 1e-5. A zero tolerance is unreachable and always
             raises ConvergenceFailure; for BRENT the reported iterations are those of the root solve
        max_iter: Iteration cap. Defaults to 100
        segment: 1-based segment index, for diagnostics. Defaults to 1
        depth: Depth at the bottom of the segment (ft). Defaults to dl
        segmethod: 'PICARD' (successive substitution) or 'BRENT' (bracketed root solve). Defaults to 'PICARD'
    """
    segmethod = validate_methods(["segmethod"], [segmethod])
    if depth is None:
        depth = dl
    state = _SEG_METHOD_DIC[segmethod.name](p_in, dl, gradient_fn, dp_dz_prev, tol, max_iter, segment, depth)
    logger.debug("Segment %d: depth=%g p=%.4f p_avg=%.4f dp/dz=%.6f iterations=%d eps=%.2e",
                 segment, depth, state.p_calc, state.p_avg, state.dp_dz, state.iterations, state.epsilon)
    return SegmentResult(depth=float(depth), pressure=state.p_calc, p_avg=state.p_avg, gradient=state.dp_dz,
                         p_in=p_in, length=dl, iterations=state.iterations, epsilon=state.epsilon)


# ============================================================================
#  Public API: march, fbhp, check_consistency
# ============================================================================

def march(spec: WellSpec, gradient_fn: GradientFunction, segmethod='PICARD', cancel=None) -> ResultTable:
    """ Returns ResultTable of the pressure traverse from surface to bottom of the string.

        spec: WellSpec describing pressure, depths, segment count and convergence settings
        gradient_fn: Callable returning gradient (psi/ft) for an average segment pressure (psia)
        segmethod: Segment solution method, 'PICARD' or 'BRENT'. Defaults to 'PICARD'
        cancel: Optional object with is_set() (eg threading.Event). Checked before each segment,
                raising MarchCancelled when set

        Any failure aborts the whole traverse; no partial table is returned.
    """
    segmethod = validate_methods(["segmethod"], [segmethod])
    if not callable(gradient_fn):
        raise TypeError("gradient_fn must be callable")
    spec.validate()
    grid = spec.grid

    logger.info("Traverse of %d segments from %g to %g ft, surface pressure %g psia (%s)",
                spec.nseg, spec.top, spec.bottom, spec.psurf, segmethod.name)

    table = ResultTable()
    p_in = spec.psurf
    dp_dz_prev = spec.seed_gradient
    for i in range(1, spec.nseg + 1):
        if cancel is not None and cancel.is_set():
            logger.warning("Traverse cancelled before segment %d", i)
            raise MarchCancelled(i)
        result = solve_segment(p_in, float(grid[i] - grid[i - 1]), gradient_fn, dp_dz_prev,
                               tol=spec.tol, max_iter=spec.max_iter, segment=i, depth=float(grid[i]),
                               segmethod=segmethod)
        table.append(result)
        p_in, dp_dz_prev = result.pressure, result.gradient

    logger.info("Traverse complete: bottom pressure %.4f psia", table.bhp)
    return table


def fbhp(spec: WellSpec, gradient_fn: GradientFunction, segmethod='PICARD', cancel=None) -> float:
    """ Returns pressure at the bottom of the string (psia). Arguments as for march()"""
    return march(spec, gradient_fn, segmethod=segmethod, cancel=cancel).bhp


def check_consistency(table: ResultTable, spec: WellSpec, gradient_fn: GradientFunction) -> npt.ArrayLike:
    """ Returns relative residual of the implicit segment relation for each stored solution,
        abs((p - (p_in + G((p_in + p)/2) * dL)) / p), using the stored pressures only.
    """
    grid = spec.grid
    residuals = np.empty(len(table))
    p_in = spec.psurf
    for i, result in enumerate(table):
        dl = grid[i + 1] - grid[i]
        dp_dz = float(gradient_fn((p_in + result.pressure) / 2.0))
        residuals[i] = abs((result.pressure - (p_in + dp_dz * dl)) / result.pressure)
        p_in = result.pressure
    return residuals
