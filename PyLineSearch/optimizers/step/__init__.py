"""
Module containing the step rules, turning a step fraction into a parameter update

Steps :
  - DefaultStep
    - moves the parameters along the direction : x += alpha * d
  - NegativeDefaultStep
    - moves the parameters against the direction : x -= alpha * d
"""

from .default_step import *

step__all__ = ['DefaultStep', 'NegativeDefaultStep']

__all__ = step__all__
