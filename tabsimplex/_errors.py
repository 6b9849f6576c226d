'''Exceptions raised by the tableau simplex solver.

Each error carries a ``status`` code using the same numbering as
``scipy.optimize.linprog`` so results can be reported uniformly.
'''

class SimplexError(ValueError):
    '''Base class for all solver failures.'''
    status = 4
    default_msg = 'Simplex method failed.'

    def __init__(self, msg=None):
        super().__init__(msg if msg is not None else self.default_msg)

class InvalidDataError(SimplexError):
    '''Problem data has inconsistent shapes or non-finite entries.'''
    default_msg = 'Problem data is malformed.'

class NoSolutionsError(SimplexError):
    '''The constraints describe an empty feasible region.'''
    status = 2
    default_msg = 'The problem is infeasible.'

class UnlimitedError(SimplexError):
    '''The objective can be improved without bound.'''
    status = 3
    default_msg = 'The problem is unbounded.'

class UnableToCalculateError(SimplexError):
    '''No usable pivot could be found.'''
    status = 4
    default_msg = 'Unable to find a valid pivot.'

class IterationLimitError(SimplexError):
    '''Pivot budget ran out before the algorithm terminated.'''
    status = 1
    default_msg = 'Iteration limit reached.'
