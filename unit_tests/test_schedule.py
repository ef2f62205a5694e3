import unittest

from logo_framework import (
    AdaptiveLadderSchedule,
    BandwidthSchedule,
    FixedBandwidthSchedule,
    LogoOptions,
    Node,
    SearchState,
)
from logo_framework.schedule import adaptive, fixed


def state_with(bandwidth, last_best, current_best):
    state = SearchState.from_options(LogoOptions(objective=lambda x: 0.0))
    state.bandwidth = bandwidth
    state.last_best_value = last_best
    n = Node.unit(2)
    n.value = current_best
    state.space.insert(n)
    return state


class TestFixedSchedule(unittest.TestCase):
    def test_always_same(self):
        sched = FixedBandwidthSchedule(2)
        self.assertEqual(sched(state_with(5, 0.0, 1.0)), 2)
        self.assertEqual(sched(state_with(1, 1.0, 0.0)), 2)
        self.assertEqual(fixed()(state_with(7, 0.0, 0.0)), 1)

    def test_rejects_invalid_width(self):
        with self.assertRaises(ValueError):
            FixedBandwidthSchedule(0)
        with self.assertRaises(ValueError):
            FixedBandwidthSchedule(1.5)

    def test_satisfies_protocol(self):
        self.assertIsInstance(FixedBandwidthSchedule(), BandwidthSchedule)
        self.assertIsInstance(AdaptiveLadderSchedule(), BandwidthSchedule)


class TestAdaptiveLadder(unittest.TestCase):
    def test_moves_up_on_improvement(self):
        sched = AdaptiveLadderSchedule()
        self.assertEqual(sched(state_with(4, 1.0, 2.0)), 5)

    def test_moves_down_without_improvement(self):
        sched = AdaptiveLadderSchedule()
        self.assertEqual(sched(state_with(4, 2.0, 2.0)), 3)
        self.assertEqual(sched(state_with(8, 2.0, 1.0)), 6)

    def test_clamped_at_ends(self):
        sched = AdaptiveLadderSchedule()
        self.assertEqual(sched(state_with(30, 1.0, 2.0)), 30)
        self.assertEqual(sched(state_with(3, 2.0, 2.0)), 3)

    def test_off_ladder_bandwidth_snaps_to_nearest(self):
        sched = AdaptiveLadderSchedule()
        self.assertEqual(sched.index_of(1), 0)
        self.assertEqual(sched.index_of(7), 3)
        self.assertEqual(sched.index_of(20), 5)
        self.assertEqual(sched.index_of(100), 5)
        # 1 snaps to 3, then moves up
        self.assertEqual(sched(state_with(1, 0.0, 1.0)), 4)

    def test_custom_ladder(self):
        sched = adaptive([1, 2, 4])
        self.assertEqual(sched.ladder, (1, 2, 4))
        self.assertEqual(sched(state_with(2, 0.0, 1.0)), 4)
        self.assertEqual(sched(state_with(2, 1.0, 0.5)), 1)

    def test_rejects_bad_ladders(self):
        for ladder in ((), (3, 3, 4), (4, 3), (0, 1), (1, 2.5)):
            with self.assertRaises(ValueError, msg=str(ladder)):
                AdaptiveLadderSchedule(ladder)


if __name__ == '__main__':
    unittest.main(verbosity=2)
