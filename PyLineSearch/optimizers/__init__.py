"""
Optimization module

Sub-modules :
  - defaults, the default parameters and status codes of the searches
  - line_search, the line searches
  - step, the rules turning a step fraction into a parameter update
  - helpers, objective adapters for plain cost functions
"""

from . import defaults
from . import helpers
from . import step
from . import line_search

__all__ = ['defaults', 'line_search', 'step', 'helpers']
