"""
Backtracking line search with safeguarded quadratic and cubic interpolation
(Numerical Recipes in C, lnsrch, p. 385)

No attempt is made at accurately finding the minimum along the line, the goal
is only to find a step that decreases the score enough for the Armijo rule.
"""

import logging

import numpy

from PyLineSearch.errors import LineSearchConfigError, LineSearchTypeError, \
     InvalidDirectionError, DegenerateInterpolationError, InconsistentAcceptanceError
from .. import defaults
from ..step import DefaultStep
from ..helpers import FunctionObjective

__all__ = ['BacktrackLineSearch', 'quadratic_step', 'cubic_step']

logger = logging.getLogger(__name__)

def quadratic_step(slope, fold, alam, f):
  """
  Minimizer of the quadratic going through (0, fold) with derivative slope
  and through (alam, f)
  """
  return -slope * alam * alam / (2. * (f - fold - slope * alam))

def cubic_step(slope, fold, alam, f, alam2, f2, fallback = defaults.MAX_CONTRACTION):
  """
  Minimizer of the cubic going through (0, fold) with derivative slope, and
  through the last two trials (alam, f) and (alam2, f2)
  When the cubic has no minimizer, fallback * alam is returned
  """
  if alam == alam2:
    raise DegenerateInterpolationError("Cannot interpolate between two equal steps, alam = %g" % alam, alam)
  rhs1 = f - fold - alam * slope
  rhs2 = f2 - fold - alam2 * slope
  a = (rhs1 / (alam * alam) - rhs2 / (alam2 * alam2)) / (alam - alam2)
  b = (-alam2 * rhs1 / (alam * alam) + alam * rhs2 / (alam2 * alam2)) / (alam - alam2)
  if a == 0.:
    if b == 0.:
      return fallback * alam
    return -slope / (2. * b)
  disc = b * b - 3. * a * slope
  if disc < 0.:
    return fallback * alam
  # pick the root form that avoids cancellation
  if b <= 0.:
    return (-b + numpy.sqrt(disc)) / (3. * a)
  return -slope / (b + numpy.sqrt(disc))

class BacktrackLineSearch(object):
  """
  The backtracking line search for enforcing the Armijo rule, with polynomial
  interpolation of the next trial step

  Works on an objective that scores its installed parameters :
    - objective.score() returns the score at the installed parameters
    - objective.set_parameters(x) installs a trial point
  The step rule turns a step fraction into a parameter update, in place.
  """
  def __init__(self, objective = None, step = None, record = None,
               stpmax = defaults.parameters['stpmax'],
               rel_tolx = defaults.parameters['rel_tolx'],
               abs_tolx = defaults.parameters['abs_tolx'],
               max_iterations = defaults.parameters['iterations_max'],
               alf = defaults.parameters['alf'],
               min_contraction = defaults.parameters['min_contraction'],
               max_contraction = defaults.parameters['max_contraction'],
               unstable_contraction = defaults.parameters['unstable_contraction'],
               x_tolerance = defaults.parameters['x_tolerance'], **kwargs):
    """
    Can have :
      - an objective to score the trial points (objective), needed by optimize()
      - a step rule (step = DefaultStep()), a callable step(parameters, direction, alpha)
        updating parameters in place, with an orientation attribute (+1. or -1.)
      - a recorder called with the search state at each stage of the search (record = self.recordHistory)
      - the maximum norm of the direction, larger directions are scaled down (stpmax = 100.)
      - the relative tolerance on the parameters giving the smallest step fraction (rel_tolx = 1e-7)
      - the absolute tolerance on the parameters (abs_tolx = 1e-4), kept but not used by the search
      - the maximum number of trial steps (max_iterations = 5, also accepted as iterations_max)
      - the coefficient of the Armijo rule (alf = 1e-4)
      - the bounds of the contraction of a backtracking step (min_contraction = 0.1, max_contraction = 0.5)
      - the contraction of the step when the score is not finite (unstable_contraction = 0.2)
      - the tolerance under which the parameters are considered unchanged (x_tolerance = 1e-12)
    """
    self.objective = objective
    if step is None:
      step = DefaultStep()
    self.step = step
    if record is not None:
      self.recordHistory = record

    self.stpmax = stpmax
    self.rel_tolx = rel_tolx
    self.abs_tolx = abs_tolx
    if 'iterations_max' in kwargs:
      max_iterations = kwargs.pop('iterations_max')
    if kwargs:
      raise LineSearchConfigError("Unknown parameters for the line search: %s" % ', '.join(sorted(kwargs)))
    self.max_iterations = max_iterations
    self.alf = alf
    self.min_contraction = min_contraction
    self.max_contraction = max_contraction
    self.unstable_contraction = unstable_contraction
    self.x_tolerance = x_tolerance

    self.state = {}
    self.last_status = None
    self.check_arguments()

  @property
  def stpmax(self):
    return self._stpmax

  @stpmax.setter
  def stpmax(self, value):
    self._stpmax = _positive('stpmax', value)

  @property
  def rel_tolx(self):
    return self._rel_tolx

  @rel_tolx.setter
  def rel_tolx(self, value):
    self._rel_tolx = _positive('rel_tolx', value)

  @property
  def abs_tolx(self):
    return self._abs_tolx

  @abs_tolx.setter
  def abs_tolx(self, value):
    self._abs_tolx = _positive('abs_tolx', value)

  @property
  def max_iterations(self):
    return self._max_iterations

  @max_iterations.setter
  def max_iterations(self, value):
    if isinstance(value, bool) or int(value) != value or value < 1:
      raise LineSearchConfigError("max_iterations must be a positive integer, got %r" % (value,))
    self._max_iterations = int(value)

  def check_arguments(self):
    """
    Checks if the constants of the search are consistent
    """
    if not 0. < self.alf < 1.:
      raise LineSearchConfigError("alf must lie in (0, 1), got %r" % (self.alf,))
    if not 0. < self.min_contraction <= self.max_contraction < 1.:
      raise LineSearchConfigError("contraction bounds must satisfy 0 < min <= max < 1, got %r and %r"
                                  % (self.min_contraction, self.max_contraction))
    if not 0. < self.unstable_contraction < 1.:
      raise LineSearchConfigError("unstable_contraction must lie in (0, 1), got %r" % (self.unstable_contraction,))
    if not self.x_tolerance >= 0.:
      raise LineSearchConfigError("x_tolerance must be non-negative, got %r" % (self.x_tolerance,))

  def recordHistory(self, **kwargs):
    """
    Function that does nothing, called with the search state at each stage of the search
    """
    pass

  def optimize(self, initial_step, parameters, gradient, direction):
    """
    Returns the fraction of the direction to apply to parameters, or 0. if no
    step could decrease the score enough
    Parameters :
      - initial_step is ignored, the search always starts with a full step
      - parameters is a float numpy array, modified in place with the trial points
        (anything else raises LineSearchTypeError before the search starts).
        The accepted point is left installed, the original one is restored
        when 0. is returned
      - gradient is the gradient of the score at parameters
      - direction is the search direction, never modified
    """
    if self.objective is None:
      raise LineSearchConfigError("An objective is needed to score the trial points")
    return self._search(self.objective, initial_step, parameters, gradient, direction)

  def __call__(self, origin, function, state, **kwargs):
    """
    Returns a good candidate
    Parameters :
      - origin is the origin of the search
      - function is the function to minimize
      - state is the state of the optimizer, with the direction and the gradient
    """
    point = numpy.array(origin, dtype = float)
    alpha = self._search(FunctionObjective(function, point), state.get('initial_alpha_step', 1.),
                         point, state['gradient'], state['direction'])
    state['alpha_step'] = alpha
    if alpha == 0.:
      return origin
    return point

  def _search(self, objective, initial_step, parameters, gradient, direction):
    self.check_arguments()
    if not isinstance(parameters, numpy.ndarray) or not numpy.issubdtype(parameters.dtype, numpy.floating):
      raise LineSearchTypeError("parameters must be a float numpy array, modified in place, got %s"
                                % type(parameters).__name__)
    # starting with anything but a full step makes the first jump grow
    if initial_step != 1.:
      logger.debug("Ignoring initial step %g, starting from a full step", initial_step)

    gradient = numpy.asarray(gradient, dtype = float)
    direction = numpy.array(direction, dtype = float)
    oldParameters = numpy.array(parameters, dtype = float)
    orientation = getattr(self.step, 'orientation', 1.)

    norm = numpy.linalg.norm(direction)
    if norm > self.stpmax:
      logger.warning("Attempted step too big, scaling direction: norm = %g, stpmax = %g", norm, self.stpmax)
      direction *= self.stpmax / norm

    slope = orientation * numpy.dot(direction, gradient)
    logger.debug("slope = %g", slope)
    if slope == 0.:
      raise InvalidDirectionError("Slope = %g is zero" % slope, slope)
    elif not slope < 0.:
      raise InvalidDirectionError("Slope = %g is not negative, the direction does not descend" % slope, slope)

    test = numpy.max(numpy.abs(gradient) / numpy.maximum(numpy.abs(oldParameters), 1.))
    alamin = self.rel_tolx / test

    alam = 1.
    alam2 = 0.
    f2 = fold = objective.score()

    self.last_status = None
    self.state = {'iteration' : 0, 'alam' : alam, 'alam2' : alam2, 'f' : fold, 'f2' : f2,
                  'fold' : fold, 'slope' : slope, 'alamin' : alamin}
    self._record('start')

    # whatever escapes the loop, the caller gets its parameters back
    try:
      return self._backtrack(objective, parameters, oldParameters, direction, slope, alamin, fold)
    except BaseException:
      self._restore(objective, parameters, oldParameters)
      raise

  def _backtrack(self, objective, parameters, oldParameters, direction, slope, alamin, fold):
    alam = 1.
    alam2 = 0.
    tmplam = 0.
    f2 = fold

    for iteration in range(self.max_iterations):
      self.state.update(iteration = iteration, alam = alam, alam2 = alam2, f2 = f2)
      logger.debug("Backtrack iteration %d: alam = %g, alam2 = %g", iteration, alam, alam2)

      parameters[...] = oldParameters
      self.step(parameters, direction, alam)
      self._record('step')

      # convergence on delta x
      if alam < alamin:
        return self._give_up(objective, parameters, oldParameters, defaults.CONVERGED_SMALL_STEP, 'converged')
      if numpy.all(numpy.abs(parameters - oldParameters) <= self.x_tolerance):
        return self._give_up(objective, parameters, oldParameters, defaults.CONVERGED_NO_MOVE, 'converged')

      objective.set_parameters(parameters)
      f = objective.score()
      self.state['f'] = f
      logger.debug("Score after step = %g", f)

      # sufficient decrease, Armijo rule. A +inf score is never accepted, even
      # from a +inf origin; -inf is
      if f < numpy.inf and f <= fold + self.alf * alam * slope:
        if f > fold:
          raise InconsistentAcceptanceError("Function did not decrease: f = %g > %g = fold" % (f, fold), f, fold)
        self.last_status = defaults.STEP_ACCEPTED
        self._record('accepted')
        return alam

      elif not (numpy.isfinite(f) and numpy.isfinite(f2)):
        logger.warning("Score is not finite after step, alam = %g, f = %g, f2 = %g, scaling back step size",
                       alam, f, f2)
        tmplam = self.unstable_contraction * alam
        self.state['tmplam'] = tmplam
        self._record('unstable')
        if tmplam < alamin:
          return self._give_up(objective, parameters, oldParameters, defaults.UNSTABLE_SMALL_STEP, 'converged')

      else:
        if alam == 1.:
          tmplam = quadratic_step(slope, fold, alam, f)
        else:
          tmplam = cubic_step(slope, fold, alam, f, alam2, f2, self.max_contraction)
        tmplam = min(tmplam, self.max_contraction * alam)
        self.state['tmplam'] = tmplam
        self._record('backtrack')
        logger.debug("tmplam = %g", tmplam)

      alam2 = alam
      f2 = f
      alam = max(tmplam, self.min_contraction * alam)

    logger.debug("Exited line search after %d iterations", self.max_iterations)
    return self._give_up(objective, parameters, oldParameters, defaults.MAX_ITER_REACHED, 'exhausted')

  def _restore(self, objective, parameters, oldParameters):
    parameters[...] = oldParameters
    objective.set_parameters(parameters)

  def _give_up(self, objective, parameters, oldParameters, status, event):
    self._restore(objective, parameters, oldParameters)
    self.last_status = status
    logger.debug("Exiting backtrack using the original parameters: %s", defaults.messages[status])
    self._record(event)
    return 0.

  def _record(self, event):
    self.state['event'] = event
    self.state['status'] = self.last_status
    self.recordHistory(**self.state)

def _positive(name, value):
  if not value > 0.:
    raise LineSearchConfigError("%s must be strictly positive, got %r" % (name, value))
  return float(value)
