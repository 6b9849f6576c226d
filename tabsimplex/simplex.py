'''Interface for solving linear programs with the tableau method.'''

from warnings import warn

from scipy.optimize import OptimizeWarning, OptimizeResult

from .tableau import Tableau
from ._errors import SimplexError

def _make_result(t, err=None):
    '''Make an OptimizeResult object from a solved (or failed) Tableau.'''

    res = OptimizeResult()
    res['nit'] = t.nit
    if err is None:
        sol = t.solution()
        res['x'] = sol['x']
        res['slack'] = sol['slack']
        res['fun'] = sol['fopt']
        res['basis'] = sol['basis']
        res['success'] = True
        res['status'] = 0
        res['message'] = 'Optimization terminated successfully.'
    else:
        # Tableau is left mid-transform, nothing in it is meaningful
        res['x'] = None
        res['slack'] = None
        res['fun'] = None
        res['basis'] = None
        res['success'] = False
        res['status'] = err.status
        res['message'] = str(err)
    return res

def simplex(A, b, c, minimize=False, maxiter=None, disp=False):
    '''Solve a linear program using the tableau simplex method.

    Parameters
    ----------
    A : 2-D array
        Constraint matrix. Row ``i`` requires
        ``A[i] @ x <= b[i]``; the row variable (slack) of each
        constraint is introduced implicitly.
    b : 1-D array
        Right hand side of each constraint. Negative entries are
        allowed and are handled by phase 1.
    c : 1-D array
        Objective coefficients.
    minimize : bool, optional
        Minimize ``c @ x`` instead of maximizing it.
    maxiter : int, optional
        Maximum number of pivots. Unlimited by default.
    disp : bool, optional
        Show the tableau at each pivot.

    Returns
    -------
    res : OptimizeResult

        - x : 1-D array
            Values of the declared variables at the optimum.
        - slack : 1-D array
            Values of the implicit row variables, ``b - A @ x``.
        - fun : float
            Objective value ``c @ x`` at the optimum.
        - basis : list of (str, float)
            Basic variable label and value for each constraint row.
        - success : bool
            ``True`` when an optimal solution was found.
        - status : int
            ``0`` optimal, ``1`` iteration limit, ``2`` infeasible,
            ``3`` unbounded, ``4`` numerical difficulties.
        - message : str
            Description of the exit status.
        - nit : int
            Number of pivots performed.

    Raises
    ------
    InvalidDataError
        Problem data has inconsistent shapes.

    Notes
    -----
    Assumes all variables are non-negative.
    '''

    t = Tableau(A, b, c, minimize=minimize, disp=disp)
    try:
        t.optimize(maxiter=maxiter)
    except SimplexError as e:
        warn(str(e), OptimizeWarning)
        return _make_result(t, e)
    return _make_result(t)
