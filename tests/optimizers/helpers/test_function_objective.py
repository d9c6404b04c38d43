#/usr/bin/env python

import numpy
import pytest

from numpy.testing import assert_almost_equal, assert_array_equal
from PyLineSearch.optimizers.helpers import FunctionObjective, FiniteDifferencesObjective


class Function(object):
    def __call__(self, x):
        return (x[0] - 2) ** 2 + (2 * x[1] + 4) ** 2

    def gradient(self, x):
        return numpy.array((2 * (x[0] - 2), 4 * (2 * x[1] + 4)))


def test_score_installed_parameters():
    x = numpy.zeros(2)
    objective = FunctionObjective(Function(), x)
    assert objective.score() == 20.
    objective.set_parameters(numpy.array((2., -2.)))
    assert objective.score() == 0.
    assert objective.nfev == 2


def test_parameters_are_copied():
    x = numpy.zeros(2)
    objective = FunctionObjective(Function(), x)
    x[0] = 5.
    assert_array_equal(objective.parameters, (0., 0.))
    objective.set_parameters(x)
    x[0] = 7.
    assert_array_equal(objective.parameters, (5., 0.))


def test_gradient_from_function():
    objective = FunctionObjective(Function(), numpy.zeros(2))
    assert_array_equal(objective.gradient(), (-4., 16.))


def test_gradient_missing():
    objective = FunctionObjective(lambda x: numpy.sum(x), numpy.zeros(2))
    with pytest.raises(NotImplementedError):
        objective.gradient()


def test_finite_differences_gradient():
    objective = FiniteDifferencesObjective(Function(), numpy.zeros(2))
    assert_almost_equal(objective.gradient(), (-4., 16.), decimal=4)
    assert objective.nfev == 3
