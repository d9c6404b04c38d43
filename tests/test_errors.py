#!/usr/bin/env python
# -*- coding: utf-8 -*-

from PyLineSearch.errors import (
    LineSearch_Error,
    InvalidStepError,
    InvalidDirectionError,
    DegenerateInterpolationError,
    InconsistentAcceptanceError,
)


def test_invalid_direction_is_an_invalid_step():
    err = InvalidDirectionError("Slope = 1 is not negative", 1.)
    assert isinstance(err, InvalidStepError)
    assert err.slope == 1.


def test_degenerate_interpolation_is_distinct_from_invalid_direction():
    err = DegenerateInterpolationError("collapsed", 0.5)
    assert isinstance(err, InvalidStepError)
    assert not isinstance(err, InvalidDirectionError)


def test_inconsistent_acceptance_is_not_an_invalid_step():
    err = InconsistentAcceptanceError("worse", 2., 1.)
    assert isinstance(err, LineSearch_Error)
    assert not isinstance(err, InvalidStepError)
    assert (err.f, err.fold) == (2., 1.)


def test_str_is_repr_of_value():
    assert str(LineSearch_Error("oops")) == "'oops'"
