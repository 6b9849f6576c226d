'''Two-phase simplex method on a compact ("big table") tableau.'''

import logging

import numpy as np
from tabulate import tabulate

from ._errors import (
    InvalidDataError, NoSolutionsError, UnlimitedError,
    UnableToCalculateError, IterationLimitError)

def _process_tableau_args(A, b, c):
    '''Sanitize input to Tableau.'''

    try:
        c = np.array(c, dtype=float).flatten()
        b = np.array(b, dtype=float).flatten()
        A = np.array(A, dtype=float)
    except (TypeError, ValueError) as e:
        # ragged or non-numeric input
        raise InvalidDataError(str(e)) from e

    # No constraints at all is still a (trivially unbounded) problem
    if A.ndim == 1 and A.size == 0 and b.size == 0:
        A = A.reshape((0, c.size))

    if A.ndim != 2:
        raise InvalidDataError('Constraint matrix must be 2D!')
    if b.size != A.shape[0]:
        raise InvalidDataError(
            'Constraint vector must match number of rows of matrix '
            '(got %d, expected %d)!' % (b.size, A.shape[0]))
    if c.size != A.shape[1]:
        raise InvalidDataError(
            'Objective vector must match number of columns of matrix '
            '(got %d, expected %d)!' % (c.size, A.shape[1]))
    for name, arr in (('A', A), ('b', b), ('c', c)):
        if not np.all(np.isfinite(arr)):
            raise InvalidDataError('%s contains non-finite entries!' % name)

    return A, b, c

class Tableau:
    '''Simplex tableau.

    Rows are constraints with the objective row last, columns are
    non-basic variables with the free term (right-hand side) last.
    Each row encodes ``basic = free - sum(coef*nonbasic)`` and the
    objective row encodes ``F = free - c @ x``, so the algorithm
    drives ``F`` down which maximizes ``c @ x``.

    Attributes
    ----------
    tableau : 2-D array
        Augmented coefficient matrix of shape ``(m+1, n+1)``.
    row_labels : list of str
        Basic variable of each row, ``'F'`` for the objective row.
    col_labels : list of str
        Non-basic variable of each column, ``'S'`` for free terms.
    nit : int
        Number of pivots performed so far.
    '''

    def __init__(self, A, b, c, minimize=False, disp=False):
        A, b, c = _process_tableau_args(A, b, c)
        m, n = A.shape
        self.m, self.n = m, n
        self.minimize = minimize
        self.disp = disp

        # Internally we always maximize
        if minimize:
            c = -1*c

        self.tableau = np.zeros((m+1, n+1))
        self.tableau[:m, :n] = A
        self.tableau[-1, :n] = c
        self.tableau[:m, -1] = b # objective value starts at 0

        # Declared variables are 1-indexed, row variables come after
        self.col_labels = [str(jj+1) for jj in range(n)] + ['S']
        self.row_labels = [str(n+1+ii) for ii in range(m)] + ['F']

        self.nit = 0

    def optimize(self, maxiter=None):
        '''Restore feasibility then optimize the objective.

        Parameters
        ----------
        maxiter : int, optional
            Maximum number of pivots over both phases. No limit is
            imposed by default.

        Raises
        ------
        NoSolutionsError
            The problem is infeasible.
        UnlimitedError
            The objective is unbounded.
        UnableToCalculateError
            Phase 1 could not find a pivot row.
        IterationLimitError
            More than ``maxiter`` pivots were required.
        '''
        logging.debug('Beginning tableau:%r', self)

        # Phase 1: get rid of negative free terms
        while True:
            row = self._find_negative_free_row()
            if row is None:
                break
            logging.debug('Found negative free term in row %d', row)
            self._make_acceptable(row, maxiter)
            logging.debug('Making acceptable:%r', self)
        logging.info('Feasible tableau found after %d pivots', self.nit)

        # Phase 2: pivot till you can't pivot no more
        while not self.is_optimal():
            self._iterate(maxiter)
            logging.debug('Iteration:%r', self)
        logging.info('Optimal tableau found after %d pivots', self.nit)

    def is_optimal(self):
        '''No objective coefficient can still improve the solution.'''
        return not np.any(self.tableau[-1, :-1] > 0)

    def ratio_test(self, col):
        '''Choose the pivot row for a given pivot column.

        Only rows whose ratio ``free/coef`` is non-negative are
        eligible. A zero free term (of either sign) is eligible only
        with a positive coefficient. Ties go to the topmost row.

        Returns
        -------
        row : int or None
            Index of the pivot row, ``None`` if no row is eligible.
        '''
        min_ratio, min_row = None, None
        for ii in range(self.m):
            coef = self.tableau[ii, col]
            # ratio is undefined
            if coef == 0:
                continue
            ratio = self.tableau[ii, -1]/coef
            # zero ratio counts only when increasing the column keeps the
            # row feasible; the sign of the zero is irrelevant
            if not (ratio > 0 or (ratio == 0 and coef > 0)):
                continue
            if min_ratio is None or ratio < min_ratio:
                min_ratio, min_row = ratio, ii
        return min_row

    def pivot(self, row, col):
        '''Exchange the basic variable of row with the non-basic of col.'''
        val = self.tableau[row, col]
        if val == 0:
            raise UnableToCalculateError(
                'Pivot element at (%d, %d) is zero.' % (row, col))

        if self.disp:
            print(self)
        logging.debug('Transforming on pivot i: %d\tj: %d', row, col)

        # Source values must survive until every cell is updated
        pivot_row = self.tableau[row, :].copy()
        pivot_col = self.tableau[:, col].copy()
        self.tableau -= np.outer(pivot_col, pivot_row)/val
        self.tableau[row, :] = pivot_row/val
        self.tableau[:, col] = pivot_col/-val
        self.tableau[row, col] = 1/val

        self.row_labels[row], self.col_labels[col] = (
            self.col_labels[col], self.row_labels[row])
        self.nit += 1

    def solution(self):
        '''Return all useful info about solution.'''
        free = self.tableau[:-1, -1]
        x = np.zeros(self.n)
        slack = np.zeros(self.m)
        for label, val in zip(self.row_labels[:-1], free):
            idx = int(label) - 1
            if idx < self.n:
                x[idx] = val
            else:
                slack[idx - self.n] = val

        # Objective row holds -max(c @ x); minimization negated c
        fopt = self.tableau[-1, -1]
        if not self.minimize:
            fopt = -1*fopt

        return {
            'x': x,
            'slack': slack,
            'basis': list(zip(self.row_labels[:-1], free.tolist())),
            'fopt': fopt,
            'nit': self.nit,
        }

    def _check_iteration_limit(self, maxiter):
        if maxiter is not None and self.nit >= maxiter:
            raise IterationLimitError(
                'Iteration limit of %d pivots reached.' % maxiter)

    def _find_negative_free_row(self):
        '''First constraint row with a negative free term.'''
        rows = np.flatnonzero(self.tableau[:-1, -1] < 0)
        if rows.size == 0:
            return None
        return int(rows[0])

    def _make_acceptable(self, row, maxiter=None):
        '''Phase 1 pivot for a row with a negative free term.'''
        cols = np.flatnonzero(self.tableau[row, :-1] < 0)
        if cols.size == 0:
            raise NoSolutionsError(
                'Row %s has a negative free term but no negative '
                'coefficient: the problem is infeasible.'
                % self.row_labels[row])
        col = int(cols[0])

        pivot_row = self.ratio_test(col)
        if pivot_row is None:
            raise UnableToCalculateError(
                'No eligible pivot row for column %s.' % self.col_labels[col])
        self._check_iteration_limit(maxiter)
        self.pivot(pivot_row, col)

    def _iterate(self, maxiter=None):
        '''Phase 2 pivot.'''
        row, col = self._find_pivot()
        self._check_iteration_limit(maxiter)
        logging.debug('Current pivot: i: %d\tj: %d', row, col)
        self.pivot(row, col)

    def _find_pivot(self):
        cols = np.flatnonzero(self.tableau[-1, :-1] > 0)
        if cols.size == 0:
            raise UnableToCalculateError('Objective is already optimal.')
        col = int(cols[0])

        if not np.any(self.tableau[:-1, col] > 0):
            raise UnlimitedError(
                'Variable %s can increase without bound.'
                % self.col_labels[col])
        row = self.ratio_test(col)
        if row is None:
            raise UnlimitedError(
                'No eligible pivot row for column %s.' % self.col_labels[col])
        return row, col

    def __repr__(self):
        table = tabulate(
            [[label] + self.tableau[ii, :].tolist()
             for ii, label in enumerate(self.row_labels)],
            headers=[''] + self.col_labels,
            tablefmt='orgtbl',
            floatfmt='.7f')
        values = ['X_%s = %s' % (label, val) for label, val in zip(
            self.row_labels[:-1], self.tableau[:-1, -1])]
        values.append('F = %s' % self.tableau[-1, -1])
        return '\n' + table + '\n\n' + '\n'.join(values) + '\n'
