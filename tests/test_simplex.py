'''Make sure the simplex driver agrees with known optima.

References
----------
.. [1] https://sites.math.washington.edu/~burke/crs/407/notes/section2.pdf
.. [2] https://faculty.math.illinois.edu/~mlavrov/docs/482-fall-2019/lecture13.pdf
.. [3] http://www.math.wsu.edu/faculty/dzhang/201/Guideline%20to%20Simplex%20Method.pdf
'''

import unittest

import numpy as np
from scipy.optimize import linprog, OptimizeWarning
from tabsimplex import simplex, InvalidDataError

class TestSimplex(unittest.TestCase):
    '''Run the driver through the ringer.'''

    def test_prob1(self):
        '''Example prob (2.1) from [1]_.'''
        c = [5, 4, 3]
        A = [
            [2, 3, 1],
            [4, 1, 2],
            [3, 4, 2],
        ]
        b = [5, 11, 8]
        res = simplex(A, b, c)

        self.assertTrue(res.success)
        self.assertEqual(res.status, 0)
        np.testing.assert_allclose(res.x, [2, 0, 1])
        np.testing.assert_allclose(res.slack, [0, 1, 0])
        self.assertAlmostEqual(res.fun, 13)
        self.assertEqual(res.nit, 2)

    def test_symmetric_dual_primal(self):
        '''Primal of the example prob from pg 1 of [2]_.'''
        c = [2, 3]
        A = [
            [-1, 1],
            [1, -2],
            [3, 4],
        ]
        b = [3, 2, 26]
        res = simplex(A, b, c)

        np.testing.assert_allclose(res.x, [2, 5])
        np.testing.assert_allclose(res.slack, [0, 10, 0], atol=1e-9)
        self.assertAlmostEqual(res.fun, 19)

    def test_wsu_example(self):
        '''Example from WSU guide [3]_.'''
        c = [3, 1]
        A = [
            [2, 1],
            [2, 3],
        ]
        b = [8, 12]
        res = simplex(A, b, c)

        np.testing.assert_allclose(res.x, [4, 0])
        np.testing.assert_allclose(res.slack, [0, 4])
        self.assertAlmostEqual(res.fun, 12)

    def test_minimize(self):
        '''min x + y s.t. x + 2y >= 4, 3x + y >= 3.'''
        A = [
            [-1, -2],
            [-3, -1],
        ]
        b = [-4, -3]
        res = simplex(A, b, [1, 1], minimize=True)

        self.assertTrue(res.success)
        np.testing.assert_allclose(res.x, [0.4, 1.8])
        self.assertAlmostEqual(res.fun, 2.2)

    def test_matches_linprog(self):
        '''Random bounded problems agree with scipy's HiGHS solver.'''
        rng = np.random.default_rng(0)
        for _ in range(20):
            m, n = rng.integers(2, 7, size=2)
            A = rng.uniform(0.1, 1, (m, n))
            b = rng.uniform(1, 10, m)
            c = rng.uniform(0.1, 1, n)

            res = simplex(A, b, c)
            ref = linprog(-1*c, A_ub=A, b_ub=b, method='highs')

            self.assertTrue(res.success)
            self.assertAlmostEqual(res.fun, -1*ref.fun, places=8)
            np.testing.assert_allclose(res.x, ref.x, atol=1e-8)
            np.testing.assert_allclose(res.slack, b - A @ res.x, atol=1e-8)

    def test_flipped_geq_rows(self):
        '''max x s.t. y - x >= 0, -y >= -2 written by negating both sides.'''
        A_lb = np.array([[-1., 1.], [0., -1.]])
        b_lb = np.array([0., -2.])
        res = simplex(-1*A_lb, -1*b_lb, [1, 0])

        self.assertTrue(res.success)
        np.testing.assert_allclose(res.x, [2, 2])
        self.assertAlmostEqual(res.fun, 2)
        self.assertEqual(res.nit, 2)

    def test_infeasible(self):
        with self.assertWarns(OptimizeWarning):
            res = simplex([[1]], [-1], [1])
        self.assertFalse(res.success)
        self.assertEqual(res.status, 2)
        self.assertIsNone(res.x)
        self.assertIsNone(res.fun)

    def test_unbounded(self):
        with self.assertWarns(OptimizeWarning):
            res = simplex([[-1]], [0], [1])
        self.assertFalse(res.success)
        self.assertEqual(res.status, 3)

    def test_iteration_limit(self):
        A = [
            [2, 3, 1],
            [4, 1, 2],
            [3, 4, 2],
        ]
        with self.assertWarns(OptimizeWarning):
            res = simplex(A, [5, 11, 8], [5, 4, 3], maxiter=1)
        self.assertFalse(res.success)
        self.assertEqual(res.status, 1)
        self.assertEqual(res.nit, 1)

    def test_invalid_data_raises(self):
        with self.assertRaises(InvalidDataError):
            simplex([[1, 2]], [1], [1])

if __name__ == '__main__':
    unittest.main()
