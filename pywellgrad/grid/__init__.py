from .grid import check_grid_inputs, depth_grid, segment_lengths
