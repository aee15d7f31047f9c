import unittest

import numpy as np

import cachematrix
from cachematrix import CachedMatrix, InversionFailure, resolve_inverse


class CountingInverter:
    """Wraps cachematrix.invert and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, matrix, *args, **kwargs):
        self.calls.append((args, kwargs))
        return cachematrix.invert(matrix, *args, **kwargs)


class TestResolveInverse(unittest.TestCase):
    def setUp(self):
        self.inverter = CountingInverter()

    def test_concrete_scenario(self):
        cm = CachedMatrix(np.array([[2.0, 0.0], [0.0, 2.0]]), inverter=self.inverter)

        inv = resolve_inverse(cm)
        np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.5]])
        self.assertEqual(len(self.inverter.calls), 1)

        again = resolve_inverse(cm)
        self.assertIs(again, inv)
        self.assertEqual(len(self.inverter.calls), 1)

        cm.set_matrix(np.array([[1.0, 0.0], [0.0, 1.0]]))
        fresh = resolve_inverse(cm)
        np.testing.assert_allclose(fresh, [[1.0, 0.0], [0.0, 1.0]])
        self.assertEqual(len(self.inverter.calls), 2)

    def test_repeated_hits_compute_once(self):
        rng = np.random.default_rng(7)
        m = rng.random((6, 6)) + np.eye(6) * 6.0
        cm = CachedMatrix(m, inverter=self.inverter)

        results = [resolve_inverse(cm) for _ in range(25)]
        self.assertEqual(len(self.inverter.calls), 1)
        for r in results[1:]:
            self.assertIs(r, results[0])
        self.assertEqual(cm.stats.hits, 24)
        self.assertEqual(cm.stats.misses, 1)

    def test_set_matrix_forces_recompute(self):
        m1 = np.array([[4.0, 1.0], [2.0, 3.0]])
        m2 = np.array([[1.0, 2.0], [3.0, 4.0]])
        cm = CachedMatrix(m1, inverter=self.inverter)
        inv1 = resolve_inverse(cm)

        cm.set_matrix(m2)
        inv2 = resolve_inverse(cm)

        self.assertEqual(len(self.inverter.calls), 2)
        np.testing.assert_allclose(m2 @ inv2, np.eye(2), atol=1e-12)
        self.assertFalse(np.allclose(inv1, inv2))

    def test_round_trip_identity(self):
        rng = np.random.default_rng(42)
        m = rng.random((10, 10)) + np.eye(10) * 2.0
        inv = resolve_inverse(CachedMatrix(m))
        np.testing.assert_allclose(m @ inv, np.eye(10), atol=1e-10)

    def test_accepts_nested_lists(self):
        cm = CachedMatrix([[2, 0], [0, 4]])
        inv = resolve_inverse(cm)
        np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.25]])

    def test_singular_matrix_leaves_cache_empty(self):
        cm = CachedMatrix(np.array([[1.0, 2.0], [2.0, 4.0]]), inverter=self.inverter)

        with self.assertRaises(InversionFailure):
            resolve_inverse(cm)
        self.assertIsNone(cm.get_cached_inverse())
        self.assertEqual(cm.stats.failures, 1)

        # Retrying without a fix fails again rather than returning garbage.
        with self.assertRaises(InversionFailure):
            resolve_inverse(cm)
        self.assertIsNone(cm.get_cached_inverse())

        cm.set_matrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
        inv = resolve_inverse(cm)
        np.testing.assert_allclose(inv, [[-2.0, 1.0], [1.5, -0.5]])
        self.assertIs(cm.get_cached_inverse(), inv)
        self.assertEqual(cm.stats.computations, 1)

    def test_non_square_matrix_fails(self):
        cm = CachedMatrix(np.ones((2, 3)))
        with self.assertRaises(InversionFailure):
            resolve_inverse(cm)
        self.assertIsNone(cm.get_cached_inverse())

    def test_inversion_failure_is_a_linalg_error(self):
        cm = CachedMatrix(np.zeros((3, 3)))
        with self.assertRaises(np.linalg.LinAlgError):
            resolve_inverse(cm)
        with self.assertRaises(ValueError):
            resolve_inverse(cm)

    def test_custom_inverter_errors_propagate_unchanged(self):
        class Boom(RuntimeError):
            pass

        def failing(matrix):
            raise Boom("no")

        cm = CachedMatrix(np.eye(2), inverter=failing)
        with self.assertRaises(Boom):
            resolve_inverse(cm)
        self.assertIsNone(cm.get_cached_inverse())

    def test_extra_arguments_only_used_on_miss(self):
        m = np.array([[2.0, 0.0], [0.0, 4.0]])
        b_first = np.array([2.0, 4.0])
        b_second = np.array([8.0, 8.0])
        cm = CachedMatrix(m, inverter=self.inverter)

        first = resolve_inverse(cm, b_first)
        second = resolve_inverse(cm, b_second)

        np.testing.assert_allclose(first, [1.0, 1.0])
        self.assertIs(second, first)
        self.assertEqual(len(self.inverter.calls), 1)
        self.assertIs(self.inverter.calls[0][0][0], b_first)

    def test_keyword_arguments_forwarded_on_miss(self):
        cm = CachedMatrix(np.eye(2), inverter=self.inverter)
        resolve_inverse(cm, tol=1e-8)
        resolve_inverse(cm, tol=0.5)
        self.assertEqual(self.inverter.calls, [((), {"tol": 1e-8})])

    def test_inverse_method_and_cache_solve_alias(self):
        cm = CachedMatrix(np.array([[2.0, 0.0], [0.0, 2.0]]))
        inv = cm.inverse()
        self.assertIs(cachematrix.cache_solve(cm), inv)

    def test_placeholder_inverts_to_empty(self):
        inv = resolve_inverse(CachedMatrix())
        self.assertEqual(inv.shape, (0, 0))

    def test_configured_inverter_used_when_instance_has_none(self):
        cachematrix.configure(inverter=self.inverter)
        resolve_inverse(CachedMatrix(np.eye(3)))
        self.assertEqual(len(self.inverter.calls), 1)

    def test_instance_inverter_beats_configured_one(self):
        configured = CountingInverter()
        cachematrix.configure(inverter=configured)
        resolve_inverse(CachedMatrix(np.eye(3), inverter=self.inverter))
        self.assertEqual(len(self.inverter.calls), 1)
        self.assertEqual(configured.calls, [])


class _Slot:
    """Minimal container exposing only the two accessors resolve_inverse needs."""

    def __init__(self, matrix):
        self._matrix = matrix
        self._inverse = None

    def get_matrix(self):
        return self._matrix

    def get_cached_inverse(self):
        return self._inverse

    def set_cached_inverse(self, inverse):
        self._inverse = inverse


class TestDuckTypedContainer(unittest.TestCase):
    def test_works_without_stats_or_inverter(self):
        slot = _Slot(np.array([[4.0]]))
        inv = resolve_inverse(slot)
        np.testing.assert_allclose(inv, [[0.25]])
        self.assertIs(resolve_inverse(slot), inv)


if __name__ == "__main__":
    unittest.main()
