########################################################################################
##
##                                  TESTS FOR
##                  'solvers/_rule.py', 'solvers/euler.py', 'solvers/rk2.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

import numpy as np

from odecal.solvers import StepRule, Euler, RK2, Heun, get_step_rule, STEP_RULES
from odecal.simulator import simulate_scheme
from odecal.utils.errors import ConfigurationError


# HELPERS ==============================================================================

def _growth(y, k):
    return k * y


def _global_error(rule, step_size, step_count):
    """Absolute error at the final time for dy/dt = -y, y(0) = 1."""
    y = simulate_scheme(rule, _growth, 1.0, -1.0, step_size, step_count)
    return abs(y[-1] - np.exp(-step_size * step_count))


# TESTS ================================================================================

class TestStepRuleBase(unittest.TestCase):

    def test_step_not_implemented(self):

        with self.assertRaises(NotImplementedError):
            StepRule().step(_growth, 1.0, 1.0, 0.1)


    def test_bind_freezes_arguments(self):

        class Doubler(StepRule):
            def step(self, derivative, previous_y, k, step_size):
                return derivative(previous_y, k) * step_size

        fn = Doubler().bind(_growth, 2.0, 0.5)
        self.assertEqual(fn(3.0), 3.0)


    def test_rules_are_not_step_functions(self):

        self.assertFalse(callable(Euler()))
        self.assertTrue(callable(Euler().bind(_growth, 3.0, 0.1)))


class TestEuler(unittest.TestCase):

    def test_attributes(self):

        E = Euler()
        self.assertEqual(E.name, "euler")
        self.assertEqual(E.n, 1)
        self.assertEqual(E.s, 1)


    def test_single_step(self):

        # 2 + (3 * 2) * 0.1
        self.assertAlmostEqual(Euler().step(_growth, 2.0, 3.0, 0.1), 2.6)


    def test_derivative_evaluations(self):

        calls = []

        def f(y, k):
            calls.append((y, k))
            return 1.0

        Euler().step(f, 0.0, 7.0, 0.1)
        self.assertEqual(calls, [(0.0, 7.0)])


    def test_first_order_convergence(self):

        e1 = _global_error(Euler(), 0.01, 100)
        e2 = _global_error(Euler(), 0.005, 200)
        self.assertGreater(e1 / e2, 1.8)
        self.assertLess(e1 / e2, 2.2)


class TestRK2(unittest.TestCase):

    def test_attributes(self):

        R = RK2()
        self.assertEqual(R.name, "rk2")
        self.assertEqual(R.n, 2)
        self.assertEqual(R.s, 2)


    def test_single_step(self):

        # s1 = 6, provisional = 2.6, s2 = 7.8, next = 2 + 6.9 * 0.1
        self.assertAlmostEqual(RK2().step(_growth, 2.0, 3.0, 0.1), 2.69)


    def test_predictor_corrector_evaluations(self):

        calls = []

        def f(y, k):
            calls.append(y)
            return y

        RK2().step(f, 1.0, 0.0, 0.5)
        self.assertEqual(calls, [1.0, 1.5])


    def test_second_order_convergence(self):

        e1 = _global_error(RK2(), 0.01, 100)
        e2 = _global_error(RK2(), 0.005, 200)
        self.assertGreater(e1 / e2, 3.6)
        self.assertLess(e1 / e2, 4.4)


    def test_reduces_to_euler_for_y_independent_slope(self):

        def f(y, k):
            return k

        for k in [0.3, -1.7, 12.0]:
            with self.subTest(k=k):
                y_e = simulate_scheme(Euler(), f, 0.4, k, 0.1, 30)
                y_r = simulate_scheme(RK2(), f, 0.4, k, 0.1, 30)
                np.testing.assert_array_equal(y_e, y_r)


    def test_more_accurate_than_euler(self):

        self.assertLess(_global_error(RK2(), 0.1, 10), _global_error(Euler(), 0.1, 10))


    def test_heun_alias(self):

        self.assertIs(Heun, RK2)
        self.assertEqual(Heun().name, "rk2")
        self.assertEqual(repr(Heun()), "RK2()")


class TestGetStepRule(unittest.TestCase):

    def test_by_name(self):

        self.assertIsInstance(get_step_rule("euler"), Euler)
        self.assertIsInstance(get_step_rule("RK2"), RK2)
        self.assertIsInstance(get_step_rule(" heun "), Heun)


    def test_by_class_and_instance(self):

        self.assertIsInstance(get_step_rule(Euler), Euler)
        R = RK2()
        self.assertIs(get_step_rule(R), R)


    def test_registry(self):

        self.assertEqual(set(STEP_RULES), {"euler", "rk2", "heun"})


    def test_unknown(self):

        with self.assertRaises(ConfigurationError):
            get_step_rule("rk4")
        with self.assertRaises(ConfigurationError):
            get_step_rule(42)
        with self.assertRaises(ConfigurationError):
            get_step_rule(int)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
