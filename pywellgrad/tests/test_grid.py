#!/usr/bin/env python3
"""
Validation tests for grid module.
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pywellgrad.grid import depth_grid, segment_lengths
from pywellgrad.errors import InvalidSpec

def test_grid_size_and_endpoints():
    """Grid has nseg + 1 points with exact endpoints"""
    for top, bottom, nseg in [(0, 9700, 30), (150.5, 8123.7, 7), (-50, 50, 3), (1000, 1001, 1000)]:
        grid = depth_grid(top, bottom, nseg)
        assert len(grid) == nseg + 1
        assert grid[0] == top
        assert grid[-1] == bottom

def test_grid_even_spacing():
    """Consecutive spacing is constant"""
    grid = depth_grid(150.5, 8123.7, 7)
    dl = segment_lengths(grid)
    assert len(dl) == 7
    assert np.allclose(dl, (8123.7 - 150.5) / 7, rtol=1e-12)

def test_grid_linear_formula():
    """depth[i] = top + i * (bottom - top) / nseg"""
    grid = depth_grid(0, 9700, 30)
    for i in range(31):
        assert abs(grid[i] - i * 9700 / 30) < 1e-9
    assert abs(grid[1] - 323.3333333) < 1e-6

def test_grid_single_segment():
    grid = depth_grid(0, 9700, 1)
    assert list(grid) == [0, 9700]

def test_grid_read_only():
    """Grid cannot be modified after creation"""
    grid = depth_grid(0, 100, 4)
    with pytest.raises(ValueError):
        grid[1] = 10.0

def test_grid_invalid_segment_count():
    for nseg in [0, -3, 2.5]:
        with pytest.raises(InvalidSpec):
            depth_grid(0, 100, nseg)

def test_grid_inverted_or_degenerate_depths():
    with pytest.raises(InvalidSpec):
        depth_grid(100, 100, 5)
    with pytest.raises(InvalidSpec):
        depth_grid(200, 100, 5)
    with pytest.raises(InvalidSpec):
        depth_grid(0, float('inf'), 5)

def test_invalid_spec_is_value_error():
    """InvalidSpec can be caught as ValueError"""
    with pytest.raises(ValueError):
        depth_grid(0, 100, 0)

def test_check_grid_inputs_matches_depth_grid():
    """Scalar checks accept and reject the same inputs as depth_grid"""
    from pywellgrad.grid import check_grid_inputs
    check_grid_inputs(0, 9700, 30)
    for top, bottom, nseg in [(0, 100, 0), (0, 100, 2.5), (100, 100, 5), (0, float('nan'), 5)]:
        with pytest.raises(InvalidSpec):
            check_grid_inputs(top, bottom, nseg)
