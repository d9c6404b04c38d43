#!/usr/bin/env python

"""
Steepest descent loops driving the backtracking line search
"""

import numpy
from numpy.testing import assert_almost_equal
from scipy.optimize import rosen, rosen_der

from PyLineSearch.optimizers import line_search, step, helpers


class Quadratic:
  """
  A simple quadratic function
  """
  def __call__(self, x):
    return (x[0] + 2* x[1] - 7)**2 + (2 * x[0] + x[1] - 5)**2

  def gradient(self, x):
    return numpy.array([2 * (x[0] + 2* x[1] - 7) + 4 * (2 * x[0] + x[1] - 5), 4 * (x[0] + 2* x[1] - 7) + 2 * (2 * x[0] + x[1] - 5)], dtype = float)

def descend(function, gradient, x0, iterations, stepRule = None, **kwargs):
  x = numpy.array(x0, dtype = float)
  objective = helpers.FunctionObjective(function, x)
  lineSearch = line_search.BacktrackLineSearch(objective, step = stepRule, **kwargs)
  values = [function(x)]
  for i in range(iterations):
    g = gradient(x)
    direction = g if isinstance(stepRule, step.NegativeDefaultStep) else -g
    if lineSearch.optimize(1., x, g, direction) == 0.:
      break
    values.append(function(x))
  return x, values

def test_quadratic_descent():
  function = Quadratic()
  x, values = descend(function, function.gradient, numpy.zeros(2), 500)
  assert_almost_equal(x, numpy.array([1, 3], dtype = float), decimal = 4)
  assert all(later < earlier for earlier, later in zip(values, values[1:]))

def test_quadratic_descent_negative_rule():
  function = Quadratic()
  x, values = descend(function, function.gradient, numpy.zeros(2), 500, step.NegativeDefaultStep())
  assert_almost_equal(x, numpy.array([1, 3], dtype = float), decimal = 4)

def test_rosenbrock_monotone():
  x, values = descend(rosen, rosen_der, numpy.array([-1.2, 1.]), 100, iterations_max = 20)
  assert len(values) > 10
  assert values[-1] < values[0]
  assert all(later < earlier for earlier, later in zip(values, values[1:]))

def test_rosenbrock_finite_differences():
  x0 = numpy.array([-1.2, 1.])
  objective = helpers.FiniteDifferencesObjective(rosen, x0)
  x = x0.copy()
  lineSearch = line_search.BacktrackLineSearch(objective, iterations_max = 20)
  start = rosen(x)
  for i in range(20):
    objective.set_parameters(x)
    g = objective.gradient()
    if lineSearch.optimize(1., x, g, -g) == 0.:
      break
  assert rosen(x) < start
