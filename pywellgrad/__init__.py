"""
pywellgrad
===================================

-----------------------------------------------------------
Stepwise pressure traverse of vertical well tubing strings
-----------------------------------------------------------

Marches from a known surface pressure to the bottom of a tubing string in
equal length segments. Each segment resolves the implicit dependence of the
pressure gradient on average segment pressure by successive substitution
(or, optionally, a bracketed root solve), and the converged state seeds the
next segment.

Includes;

- Depth discretization of the string
- Segment by segment pressure traverse with bounded iteration and typed failures
- Ready made gradient functions (polynomial, constant, liquid column, dry gas column)
- Tabular export of the traverse to pandas

Note: Submodules are imported on first access, eg pywellgrad.march
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

submodules = [
    'classes',
    'constants',
    'errors',
    'gradients',
    'grid',
    'march',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pywellgrad.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pywellgrad' has no attribute '{name}'"
            )
