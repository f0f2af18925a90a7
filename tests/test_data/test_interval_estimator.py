import math

import numpy as np
import pytest

from data.population.population_synthesizer import Population
from data.sampling.interval_estimator import IntervalEstimator
from data.sampling.interval_estimator import Trial
from data.sampling.interval_estimator import estimate
from utils.exceptions import InvalidArgumentError
from utils.exceptions import InvalidStateError


class TestEstimate:
    
    def test_returns_requested_number_of_trials(self, population, rng):
        trials = estimate(population, 30, 1.96, 25, rng=rng)
        
        assert len(trials) == 25
    
    def test_trials_are_in_ascending_order(self, population, rng):
        trials = estimate(population, 30, 1.96, 10, rng=rng)
        
        assert [t.id for t in trials] == list(range(1, 11))
        assert [t.x for t in trials] == list(range(10))
    
    def test_lower_never_exceeds_upper(self, population, rng):
        trials = estimate(population, 10, 2.576, 200, rng=rng)
        
        assert all(t.lower <= t.upper for t in trials)
    
    def test_mean_is_strictly_inside_interval(self, population, rng):
        trials = estimate(population, 30, 1.96, 100, rng=rng)
        
        for trial in trials:
            assert trial.margin > 0
            assert trial.lower < trial.mean < trial.upper
    
    def test_interval_is_centered_on_sample_mean(self, population, rng):
        trials = estimate(population, 30, 1.96, 20, rng=rng)
        
        for trial in trials:
            assert trial.upper - trial.mean == pytest.approx(trial.mean - trial.lower)
    
    def test_zero_variance_gives_degenerate_interval(self, constant_population, rng):
        trials = estimate(constant_population, 30, 1.96, 5, rng=rng)
        
        for trial in trials:
            assert trial.lower == trial.mean == trial.upper == 2.0
    
    def test_samples_with_replacement(self, rng):
        single = Population(values=np.array([5.0]), mean=5.0, std_dev=1.0)
        
        trials = estimate(single, 3, 1.96, 2, rng=rng)
        
        assert all(t.mean == 5.0 and t.width == 0.0 for t in trials)
    
    def test_average_width_matches_theory(self, population, rng):
        trials = estimate(population, 30, 1.96, 500, rng=rng)
        
        expected = 2 * 1.96 * 1.0 / math.sqrt(30)
        mean_width = np.mean([t.width for t in trials])
        
        assert abs(mean_width - expected) < 0.03
    
    def test_seeded_regression(self, population):
        estimator = IntervalEstimator(np.random.default_rng(7))
        trials = estimator.estimate(population, 30, 1.96, 3)
        
        replay = np.random.default_rng(7)
        for index, trial in enumerate(trials):
            indices = replay.integers(0, len(population), size=30)
            sample = population.values[indices]
            mean = float(np.mean(sample))
            margin = 1.96 * float(np.std(sample, ddof=1)) / math.sqrt(30)
            
            assert trial.id == index + 1
            assert trial.mean == pytest.approx(mean)
            assert trial.lower == pytest.approx(mean - margin)
            assert trial.upper == pytest.approx(mean + margin)
    
    def test_same_seed_reproduces_trials(self, population):
        first = estimate(population, 30, 1.96, 5, rng=np.random.default_rng(11))
        second = estimate(population, 30, 1.96, 5, rng=np.random.default_rng(11))
        
        assert first == second


class TestEstimateErrors:
    
    def test_sample_size_one_raises(self, population, rng):
        with pytest.raises(InvalidArgumentError):
            estimate(population, 1, 1.96, 10, rng=rng)
    
    def test_empty_population_raises(self, rng):
        empty = Population(values=np.array([]), mean=0.0, std_dev=1.0)
        
        with pytest.raises(InvalidArgumentError):
            estimate(empty, 30, 1.96, 10, rng=rng)
    
    def test_missing_population_raises_invalid_state(self, rng):
        with pytest.raises(InvalidStateError):
            estimate(None, 30, 1.96, 10, rng=rng)
    
    def test_zero_trials_raises(self, population, rng):
        with pytest.raises(InvalidArgumentError):
            estimate(population, 30, 1.96, 0, rng=rng)
    
    @pytest.mark.parametrize("critical_value", [0.0, -1.96, float("inf")])
    def test_invalid_critical_value_raises(self, population, rng, critical_value):
        with pytest.raises(InvalidArgumentError):
            estimate(population, 30, critical_value, 10, rng=rng)


class TestTrial:
    
    def test_contains_is_inclusive(self):
        trial = Trial(id=1, x=0, lower=3.0, upper=4.0, mean=3.5)
        
        assert trial.contains(3.0)
        assert trial.contains(4.0)
        assert not trial.contains(4.0001)
    
    def test_to_dict(self):
        trial = Trial(id=2, x=1, lower=3.0, upper=4.0, mean=3.5)
        
        assert trial.to_dict() == {
            "id": 2, "x": 1, "lower": 3.0, "upper": 4.0, "mean": 3.5,
        }


class TestEstimateIntegerArguments:
    
    @pytest.mark.parametrize("sample_size", [30.5, 30.0, True])
    def test_non_integer_sample_size_raises(self, population, rng, sample_size):
        with pytest.raises(InvalidArgumentError):
            estimate(population, sample_size, 1.96, 5, rng=rng)
    
    @pytest.mark.parametrize("trial_count", [2.5, 5.0, True])
    def test_non_integer_trial_count_raises(self, population, rng, trial_count):
        with pytest.raises(InvalidArgumentError):
            estimate(population, 30, 1.96, trial_count, rng=rng)
    
    def test_numpy_integers_are_accepted(self, population, rng):
        trials = estimate(population, np.int64(30), 1.96, np.int32(3), rng=rng)
        
        assert len(trials) == 3
