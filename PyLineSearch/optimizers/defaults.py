"""
Defines the defaults parameters for the backtracking line search
"""

__all__ = ['parameters', 'messages',
           'ALF', 'MIN_CONTRACTION', 'MAX_CONTRACTION', 'UNSTABLE_CONTRACTION']

# Numerical Recipes lnsrch constants
ALF = 1.e-4
MIN_CONTRACTION = 0.1
MAX_CONTRACTION = 0.5
UNSTABLE_CONTRACTION = 0.2

STEP_ACCEPTED = 1
CONVERGED_SMALL_STEP = 2
CONVERGED_NO_MOVE = 3

UNSTABLE_SMALL_STEP = -4
MAX_ITER_REACHED = -7

parameters = {
              'stpmax' : 100.,
              'rel_tolx' : 1.e-7,
              'abs_tolx' : 1.e-4,
              'iterations_max' : 5,
              'alf' : ALF,
              'min_contraction' : MIN_CONTRACTION,
              'max_contraction' : MAX_CONTRACTION,
              'unstable_contraction' : UNSTABLE_CONTRACTION,
              'x_tolerance' : 1.e-12,
              }

messages = {
            STEP_ACCEPTED : "sufficient decrease reached",
            CONVERGED_SMALL_STEP : "step fraction is below the relative tolerance",
            CONVERGED_NO_MOVE : "parameters did not change after the step",

            UNSTABLE_SMALL_STEP : "score is not finite and the step cannot shrink further",
            MAX_ITER_REACHED : "maximum number of iterations reached",
            }
