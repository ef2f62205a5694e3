import unittest
import numpy as np

from logo_framework import LogoOptions, SearchState, create_child_node, create_root_node, expand_and_remove
from logo_framework.benchmarks import CallCounter


def linear(x):
    return float(x[0] + 2.0 * x[1])


def make_state(fn, k=3, max_samples=1000, **kw):
    opts = LogoOptions(objective=fn, k=k, max_samples=max_samples, **kw)
    state = SearchState.from_options(opts)
    root = create_root_node(state)
    state.space.insert(root)
    return state, root


class TestRootAndChildren(unittest.TestCase):
    def test_root_covers_domain_and_is_sampled(self):
        counter = CallCounter(linear)
        state, root = make_state(counter)
        np.testing.assert_allclose(root.edges, [0.0, 0.0])
        np.testing.assert_allclose(root.sizes, [1.0, 1.0])
        self.assertEqual(root.depth, 0)
        self.assertEqual(counter.calls, 1)
        self.assertEqual(state.samples_taken, 1)
        np.testing.assert_allclose(counter.points[0], [0.5, 0.5])
        self.assertAlmostEqual(root.value, 1.5)

    def test_child_geometry(self):
        state, root = make_state(linear)
        child = create_child_node(root, 3, 1, 2)
        np.testing.assert_allclose(child.edges, [0.0, 2.0 / 3.0])
        np.testing.assert_allclose(child.sizes, [1.0, 1.0 / 3.0])
        self.assertEqual(child.depth, 1)
        # Parent untouched
        np.testing.assert_allclose(root.sizes, [1.0, 1.0])


class TestExpandAndRemove(unittest.TestCase):
    def test_middle_child_inherits_value_without_call(self):
        for k in (3, 5, 7):
            counter = CallCounter(linear)
            state, root = make_state(counter, k=k)
            expand_and_remove(root, state)

            self.assertEqual(counter.calls, k, f"k={k}")
            self.assertEqual(state.samples_taken, k)
            children = list(state.space.depth_list(1))
            self.assertEqual(len(children), k)
            middle = [c for c in children if np.allclose(c.center(), root.center())]
            self.assertEqual(len(middle), 1)
            self.assertEqual(middle[0].value, root.value)
            # The root centre was queried once only
            n_root_queries = sum(np.allclose(p, root.center()) for p in counter.points)
            self.assertEqual(n_root_queries, 1)

    def test_split_dimension_cycles_with_depth(self):
        state, root = make_state(linear)
        expand_and_remove(root, state)
        for c in state.space.depth_list(1):
            np.testing.assert_allclose(c.sizes, [1.0 / 3.0, 1.0])
        child = state.space.best_at_depth(1)
        expand_and_remove(child, state)
        for c in state.space.depth_list(2):
            np.testing.assert_allclose(c.sizes, [1.0 / 3.0, 1.0 / 3.0])

    def test_children_tile_parent(self):
        state, root = make_state(linear, k=5)
        expand_and_remove(root, state)
        children = list(state.space.depth_list(1))
        self.assertAlmostEqual(sum(c.volume() for c in children), 1.0, places=12)
        lows = sorted(float(c.edges[0]) for c in children)
        np.testing.assert_allclose(lows, [0.0, 0.2, 0.4, 0.6, 0.8], atol=1e-12)
        self.assertNotIn(root, state.space.depth_list(0))
        self.assertEqual(len(state.space.depth_list(0)), 0)

    def test_returns_best_child_value(self):
        state, root = make_state(linear)
        best = expand_and_remove(root, state)
        values = [c.value for c in state.space]
        self.assertEqual(best, max(values))

    def test_expanding_unknown_node_fails(self):
        state, root = make_state(linear)
        expand_and_remove(root, state)
        with self.assertRaises(ValueError):
            expand_and_remove(root, state)

    def test_budget_stops_split_early(self):
        counter = CallCounter(linear)
        state, root = make_state(counter, k=5, max_samples=2)
        expand_and_remove(root, state)
        self.assertEqual(state.samples_taken, 2)
        self.assertEqual(counter.calls, 2)
        children = list(state.space.depth_list(1))
        # First child plus the free middle child
        self.assertEqual(len(children), 2)
        self.assertIn(root.value, [c.value for c in children])
        self.assertLess(sum(c.volume() for c in children), 1.0)

    def test_target_stops_split_early(self):
        # First child already hits the optimum; nothing else is sampled
        def objective(x):
            return 0.0 if x[0] < 1.0 / 3.0 else -1.0

        counter = CallCounter(objective)
        state, root = make_state(counter, k=3, known_optimum=0.0, epsilon=1e-6)
        best = expand_and_remove(root, state)
        self.assertEqual(best, 0.0)
        self.assertEqual(counter.calls, 2)
        self.assertEqual(len(state.space.depth_list(1)), 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
