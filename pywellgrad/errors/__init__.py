from .errors import InvalidSpec, ConvergenceFailure, NumericDegeneracy, MarchCancelled
