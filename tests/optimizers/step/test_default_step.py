#/usr/bin/env python

import unittest
import numpy

from numpy.testing import assert_equal, assert_array_equal
from PyLineSearch.optimizers.step import DefaultStep, NegativeDefaultStep


class test_DefaultStep(unittest.TestCase):
  def test_call(self):
    step = DefaultStep()
    parameters = numpy.zeros((3))
    result = step(parameters, numpy.array((1., -2., 4.)), 0.5)
    assert_array_equal(parameters, (0.5, -1., 2.))
    assert result is parameters

  def test_orientation(self):
    assert_equal(DefaultStep.orientation, 1.)
    assert_equal(NegativeDefaultStep.orientation, -1.)

  def test_extra_args_ignored(self):
    parameters = numpy.ones((2))
    DefaultStep()(parameters, [1., 1.], 2., 'ignored')
    assert_array_equal(parameters, (3., 3.))

class test_NegativeDefaultStep(unittest.TestCase):
  def test_call(self):
    step = NegativeDefaultStep()
    parameters = numpy.zeros((3))
    step(parameters, numpy.array((1., -2., 4.)), 0.5)
    assert_array_equal(parameters, (-0.5, 1., -2.))

if __name__ == "__main__":
  unittest.main()
