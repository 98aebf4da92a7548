from __future__ import annotations

import numpy as np
import pytest

from pysatl_inference.distributions.discrete import DiscreteDistribution
from pysatl_inference.distributions.sampling import (
    RandomSource,
    continuous_sample,
    discrete_sample,
    resolve_rng,
)
from pysatl_inference.errors import DegenerateParameterError
from pysatl_inference.families import NormalDistribution
from tests.utils.mocks import FixedRandomSource


class TestRandomSource:
    def test_numpy_generator_is_a_random_source(self, rng) -> None:
        assert isinstance(rng, RandomSource)

    def test_resolve_rng_keeps_given_source(self, rng) -> None:
        assert resolve_rng(rng) is rng

    def test_resolve_rng_defaults_to_generator(self) -> None:
        assert isinstance(resolve_rng(None), np.random.Generator)


class TestSampleProducers:
    def test_discrete_sample_shape_and_values(self, rng) -> None:
        dist = DiscreteDistribution.binomial(0.75)
        samples = discrete_sample(1000, dist, rng)

        assert isinstance(samples, list)
        assert len(samples) == 1000
        assert set(samples) <= {0, 1}
        assert np.mean(samples) == pytest.approx(0.75, abs=0.05)

    def test_discrete_sample_replays_source(self) -> None:
        dist = DiscreteDistribution.multinomial([0.2, 0.3, 0.5])
        source = FixedRandomSource([0.1, 0.3, 0.9])
        assert discrete_sample(3, dist, source) == [0, 1, 2]

    def test_continuous_sample_shape_bounds_and_mean(self, rng) -> None:
        dist = NormalDistribution(2.0, 0.25)
        samples = continuous_sample(2000, dist, rng)

        assert isinstance(samples, np.ndarray)
        assert samples.shape == (2000,)
        assert np.isfinite(samples).all()
        assert float(samples.mean()) == pytest.approx(2.0, abs=0.05)

    def test_seeded_sampling_is_reproducible(self) -> None:
        dist = NormalDistribution(0.0, 1.0)
        first = continuous_sample(10, dist, np.random.default_rng(7))
        second = continuous_sample(10, dist, np.random.default_rng(7))
        np.testing.assert_array_equal(first, second)

    def test_zero_samples(self, rng) -> None:
        assert discrete_sample(0, DiscreteDistribution.binomial(0.5), rng) == []
        assert continuous_sample(0, NormalDistribution(0.0, 1.0), rng).shape == (0,)

    def test_negative_count_raises(self, rng) -> None:
        with pytest.raises(DegenerateParameterError):
            discrete_sample(-1, DiscreteDistribution.binomial(0.5), rng)
