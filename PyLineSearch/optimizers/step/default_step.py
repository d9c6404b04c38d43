"""
Applies a scaled direction to a parameter vector, in place
"""

import numpy

__all__ = ['DefaultStep', 'NegativeDefaultStep']

class DefaultStep(object):
  """
  The default step rule, parameters += alpha * direction
  """
  orientation = 1.

  def __call__(self, parameters, direction, alpha, *extra_args):
    """
    Updates parameters in place and returns them
    Parameters :
      - parameters is a float array that will be modified
      - direction is the direction of the update
      - alpha is the step fraction
    """
    parameters += self.orientation * alpha * numpy.asarray(direction)
    return parameters

class NegativeDefaultStep(DefaultStep):
  """
  The negated step rule, parameters -= alpha * direction
  Useful when the direction handed to the search is the raw gradient
  """
  orientation = -1.
