# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import numpy as np

from heartpi.errors import PreconditionViolation
from heartpi.simulation.sampler import UniformSampler


class TestUniformSampler(unittest.TestCase):
    def test_samples_stay_in_closed_interval(self) -> None:
        sampler = UniformSampler()
        for _ in range(2000):
            value = sampler.sample(-0.1, 0.3)
            self.assertGreaterEqual(value, -0.1)
            self.assertLessEqual(value, 0.3)

    def test_degenerate_interval_returns_bound(self) -> None:
        sampler = UniformSampler()
        self.assertEqual(sampler.sample(72.0, 72.0), 72.0)
        self.assertEqual(sampler.sample_many(5, 5, 3), [5.0, 5.0, 5.0])

    def test_reversed_bounds_raise(self) -> None:
        sampler = UniformSampler()
        with self.assertRaises(PreconditionViolation):
            sampler.sample(10, 5)
        with self.assertRaises(PreconditionViolation):
            sampler.sample_many(10, 5, 3)
        # Still a ValueError for callers that catch broadly.
        with self.assertRaises(ValueError):
            sampler.sample(1.0, 0.0)

    def test_negative_count_raises(self) -> None:
        with self.assertRaises(PreconditionViolation):
            UniformSampler().sample_many(0, 1, -1)

    def test_sample_many_count_and_range(self) -> None:
        values = UniformSampler().sample_many(55, 65, 20)
        self.assertEqual(len(values), 20)
        self.assertTrue(all(55 <= v <= 65 for v in values))
        self.assertTrue(all(isinstance(v, float) for v in values))
        self.assertEqual(UniformSampler().sample_many(0, 1, 0), [])

    def test_not_biased_toward_endpoints(self) -> None:
        sampler = UniformSampler(seed=1234)
        values = sampler.sample_many(0.0, 1.0, 10000)
        mean = sum(values) / len(values)
        self.assertAlmostEqual(mean, 0.5, delta=0.02)
        near_edges = sum(1 for v in values if v < 0.05 or v > 0.95)
        # ~10% expected for a uniform draw.
        self.assertLess(near_edges, 1300)
        self.assertGreater(near_edges, 700)

    def test_unseeded_samplers_differ(self) -> None:
        first = UniformSampler().sample_many(0, 1, 5)
        second = UniformSampler().sample_many(0, 1, 5)
        self.assertNotEqual(first, second)

    def test_injected_generator_is_used(self) -> None:
        a = UniformSampler(generator=np.random.default_rng(7))
        b = UniformSampler(seed=7)
        self.assertEqual(a.sample(0, 100), b.sample(0, 100))


if __name__ == "__main__":
    unittest.main()
