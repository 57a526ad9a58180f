from .shared_fns import relative_error, degenerate, bracket_root
