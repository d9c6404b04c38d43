## Exceptions

__all__ = ['LineSearch_Error', 'LineSearchConfigError', 'LineSearchTypeError', 'InvalidStepError',
           'InvalidDirectionError', 'DegenerateInterpolationError',
           'InconsistentAcceptanceError']


class LineSearch_Error(Exception):
    def __init__(self, value=None):
        self.value = value
        self.code = None
    def __str__(self):
        return repr(self.value)
    def __repr__(self):
        return repr(self.value)

class LineSearchConfigError(LineSearch_Error):
    pass

class LineSearchTypeError(LineSearch_Error):
    pass

class InvalidStepError(LineSearch_Error):
    """No step can be taken in this call"""
    pass

class InvalidDirectionError(InvalidStepError):
    """The search direction does not descend (slope >= 0)"""
    def __init__(self, value, slope=None):
        self.slope = slope
        InvalidStepError.__init__(self, value)

class DegenerateInterpolationError(InvalidStepError):
    """Two trial steps collapsed onto each other during the cubic fit"""
    def __init__(self, value, alam=None):
        self.alam = alam
        InvalidStepError.__init__(self, value)

class InconsistentAcceptanceError(LineSearch_Error):
    """The Armijo test accepted a step whose score is worse than the origin"""
    def __init__(self, value, f=None, fold=None):
        self.f = f
        self.fold = fold
        LineSearch_Error.__init__(self, value)
