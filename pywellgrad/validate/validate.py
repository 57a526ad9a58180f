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

from pywellgrad.classes import class_dic

def validate_methods(names, variables):
    """ Converts method names passed as strings into their Enum members.
        Enum members are passed through untouched.
        Returns a single member if one name was passed, otherwise the list
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                options = ", ".join(class_dic[method].__members__)
                raise ValueError(f"An incorrect {method} was specified: '{variables[m]}'. Options are {options}")
        elif not isinstance(variables[m], class_dic[method]):
            raise ValueError(f"An incorrect {method} was specified: {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
