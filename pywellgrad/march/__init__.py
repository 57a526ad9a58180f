from .march import (
    WellSpec, SegmentState, SegmentResult, ResultTable, GradientFunction,
    solve_segment, march, fbhp, check_consistency
)
