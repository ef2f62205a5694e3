import unittest
import numpy as np

from logo_framework import benchmarks as bm
from logo_framework.examples import quick_demo


class TestBenchmarkFunctions(unittest.TestCase):
    def test_rescale(self):
        np.testing.assert_allclose(bm.rescale(np.array([0.0, 0.5, 1.0]), -5.0, 10.0), [-5.0, 2.5, 10.0])

    def test_known_maxima(self):
        # rosenbrock_like peaks at (+-1, 1) on [-5, 10]^2
        self.assertAlmostEqual(bm.rosenbrock_like(np.array([6.0 / 15.0, 6.0 / 15.0])), 0.0, places=12)
        self.assertAlmostEqual(bm.rosenbrock_like(np.array([4.0 / 15.0, 6.0 / 15.0])), 0.0, places=12)
        self.assertAlmostEqual(bm.negated_sphere(np.array([0.3, 0.3])), 0.0, places=12)
        x_star = (0.5 + 5.12) / 10.24
        self.assertAlmostEqual(bm.negated_rastrigin(np.array([x_star, x_star])), 0.0, places=9)

    def test_values_below_optimum(self):
        rng = np.random.default_rng(0)
        for name, (fn, optimum) in bm.FUNS.items():
            for x in rng.uniform(0.0, 1.0, size=(50, 2)):
                v = fn(x)
                self.assertTrue(np.isfinite(v), name)
                self.assertLessEqual(v, optimum + 1e-12, name)

    def test_call_counter(self):
        counter = bm.CallCounter(bm.negated_sphere)
        counter(np.array([0.1, 0.2]))
        counter(np.array([0.3, 0.3]))
        self.assertEqual(counter.calls, 2)
        np.testing.assert_allclose(counter.points[1], [0.3, 0.3])


class TestQuickDemo(unittest.TestCase):
    def test_run_demo_rows(self):
        rows = quick_demo.run_demo(budget=60)
        self.assertEqual(len(rows), 2 * len(bm.FUNS))
        for row in rows:
            self.assertLessEqual(row["samples"], 60)
            self.assertEqual(len(row["x"]), 2)
        self.assertEqual({r["schedule"] for r in rows}, {"fixed(w=1)", "adaptive"})


if __name__ == '__main__':
    unittest.main(verbosity=2)
