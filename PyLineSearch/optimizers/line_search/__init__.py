"""
Module containing the line searchers

Line Searches :
  - BacktrackLineSearch
    - finds a step fraction according to the Armijo rule, backtracking with
      quadratic then cubic interpolation of the score along the direction
"""

from .backtrack_line_search import *

line_search__all__ = ['BacktrackLineSearch', 'quadratic_step', 'cubic_step']
__all__ = line_search__all__
