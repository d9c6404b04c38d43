"""
Helper functions

Objective adapters :
  - FunctionObjective wraps a plain cost function f(x) so that the line search
    can install trial points and score them
  - FiniteDifferencesObjective adds a forward difference gradient for cost
    functions that do not provide one
"""

from .function_objective import *

helpers__all__ = ['FunctionObjective', 'FiniteDifferencesObjective']

__all__ = helpers__all__
