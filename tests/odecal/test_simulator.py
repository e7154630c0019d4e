########################################################################################
##
##                                  TESTS FOR
##                                'simulator.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

import numpy as np

from odecal.simulator import simulate, simulate_scheme
from odecal.solvers import Euler, RK2
from odecal.grid import make_grid
from odecal.utils.errors import ConfigurationError


# TESTS ================================================================================

class TestSimulate(unittest.TestCase):
    """
    Test the step-function-agnostic trajectory simulator
    """

    def test_length_matches_grid(self):

        for n in [1, 2, 17, 100]:
            with self.subTest(n=n):
                y = simulate(lambda y: y + 1.0, 0.0, 0.1, n)
                self.assertEqual(len(y), len(make_grid(0.1, n)))


    def test_recurrence(self):

        y = simulate(lambda y: 2.0 * y, 1.5, 0.1, 5)
        np.testing.assert_array_equal(y, 1.5 * 2.0 ** np.arange(6))


    def test_initial_value_first(self):

        y = simulate(lambda y: y - 3.0, 4.0, 0.5, 3)
        self.assertEqual(y[0], 4.0)


    def test_step_function_call_count(self):

        calls = []

        def step(y):
            calls.append(y)
            return y + 1.0

        simulate(step, 0.0, 0.1, 10)
        self.assertEqual(len(calls), 10)

        # every call sees the previous output
        self.assertEqual(calls, [float(i) for i in range(10)])


    def test_fresh_array_per_call(self):

        a = simulate(lambda y: y, 1.0, 0.1, 4)
        b = simulate(lambda y: y, 1.0, 0.1, 4)
        self.assertIsNot(a, b)
        a[:] = 0.0
        np.testing.assert_array_equal(b, np.ones(5))


    def test_non_finite_values_propagate(self):

        y = simulate(lambda y: np.nan, 1.0, 0.1, 4)
        self.assertEqual(y[0], 1.0)
        self.assertTrue(np.all(np.isnan(y[1:])))

        y = simulate(lambda y: y * 1e308, 10.0, 0.1, 3)
        self.assertTrue(np.isinf(y[-1]))


    def test_invalid_configuration(self):

        with self.assertRaises(ConfigurationError):
            simulate(lambda y: y, 1.0, 0.1, 0)
        with self.assertRaises(ConfigurationError):
            simulate(lambda y: y, 1.0, 0.0, 10)


class TestSimulateScheme(unittest.TestCase):

    def test_zero_derivative_is_constant(self):

        for rule in [Euler(), RK2(), "euler", "rk2"]:
            with self.subTest(rule=rule):
                y = simulate_scheme(rule, lambda y, k: 0.0, 3.25, 0.7, 0.1, 40)
                np.testing.assert_array_equal(y, np.full(41, 3.25))


    def test_matches_manual_euler_loop(self):

        h, k, n = 0.1, 0.5, 50

        expected = [1.0]
        for _ in range(n):
            prev = expected[-1]
            expected.append(prev + (k * prev) * h)

        y = simulate_scheme("euler", lambda y, k: k * y, 1.0, k, h, n)
        np.testing.assert_array_equal(y, expected)


    def test_rk2_matches_exponential(self):

        y = simulate_scheme(RK2(), lambda y, k: k * y, 1.0, 0.5, 0.01, 100)
        t = make_grid(0.01, 100)
        np.testing.assert_allclose(y, np.exp(0.5 * t), rtol=1e-4)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
