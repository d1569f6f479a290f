#!/usr/bin/env python

"""
common.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

Common constants, exceptions and functions for the Sudoku solvers.

"""

import logging
import sys
import traceback
from typing import Callable

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEFAULT_RANK = 3

UNKNOWN = "."
UNKNOWN_ZERO = "0"
FILLERS = (UNKNOWN, UNKNOWN_ZERO)
NEWLINE = "\n"
SPACE = " "
HASH = "#"
DISPLAY_UNKNOWN = "·"
DISPLAY_SOLVED = "■"
DISPLAY_CONTRADICTION = "!"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class SudokuError(Exception):
    """
    Base class for everything this package raises deliberately.
    """
    pass


class InputFormatError(SudokuError, ValueError):
    """
    The puzzle is the wrong shape (length) or contains characters we don't
    understand.
    """
    pass


class InvalidPuzzleError(SudokuError):
    """
    The puzzle is the right shape but cannot be a proper Sudoku: either the
    givens clash, or there is no way to complete it.
    """
    DUPLICATE = "duplicate"
    UNSOLVABLE = "unsolvable"

    def __init__(self, error_type: str, message: str) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message


class ConfigurationError(SudokuError):
    """
    Programmer error: e.g. an empty strategy list, or an unknown strategy
    name. Don't retry.
    """
    pass


class ContradictionError(SudokuError):
    """
    A cell would be left with no possible digits. Sound strategies never do
    this to a consistent grid, so it's an internal failure (or the puzzle was
    never solvable).
    """
    pass


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)

