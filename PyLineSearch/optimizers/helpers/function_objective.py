import logging

import numpy as np
from scipy.optimize import approx_fprime

__all__ = ['FunctionObjective', 'FiniteDifferencesObjective']

logger = logging.getLogger(__name__)


class FunctionObjective(object):
    """
    Exposes a cost function as an objective that scores the currently
    installed parameters.
    """
    def __init__(self, function, parameters):
        """
        Creates the objective :
        - function is called with a parameter array and returns a scalar cost.
          If it has a gradient method, the objective provides gradient() too
        - parameters is the initial point, copied
        """
        self.function = function
        self.parameters = np.array(parameters, dtype=float)
        self.nfev = 0

    def set_parameters(self, parameters):
        self.parameters = np.array(parameters, dtype=float)

    def score(self):
        self.nfev += 1
        return float(self.function(self.parameters))

    def gradient(self):
        try:
            grad = self.function.gradient
        except AttributeError:
            raise NotImplementedError("Cost function has no gradient method")
        return np.asarray(grad(self.parameters), dtype=float)


class FiniteDifferencesObjective(FunctionObjective):
    """
    A function objective that computes its gradient with a forward
    difference formula
    """
    def __init__(self, function, parameters, eps=1e-7):
        """
        - eps is the amount of difference that will be used in the computations
        """
        FunctionObjective.__init__(self, function, parameters)
        self.eps = eps

    def gradient(self):
        """
        Computes the gradient of the function at the installed parameters
        """
        grad = approx_fprime(self.parameters, self.function, self.eps)
        self.nfev += len(self.parameters) + 1
        logger.debug("finite difference gradient, eps=%g, norm=%g",
                     self.eps, np.linalg.norm(grad))
        return grad
