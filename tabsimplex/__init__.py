'''Linear programming by the two-phase tableau simplex method.'''

from .tableau import Tableau
from .simplex import simplex
from ._errors import (
    SimplexError, InvalidDataError, NoSolutionsError, UnlimitedError,
    UnableToCalculateError, IterationLimitError)
