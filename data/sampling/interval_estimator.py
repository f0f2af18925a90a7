from dataclasses import dataclass
from typing import Optional
import math

import numpy as np

from data.population.population_synthesizer import Population
from evaluation.metrics.confidence_interval import ConfidenceInterval
from utils.exceptions import InvalidArgumentError
from utils.exceptions import InvalidStateError
from utils.validation import require_integer


@dataclass(frozen=True)
class Trial:
    id: int
    x: int
    lower: float
    upper: float
    mean: float
    
    @property
    def margin(self) -> float:
        return (self.upper - self.lower) / 2.0
    
    @property
    def width(self) -> float:
        return self.upper - self.lower
    
    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "lower": self.lower,
            "upper": self.upper,
            "mean": self.mean,
        }


class IntervalEstimator:
    """Draws simple random samples with replacement and builds one interval per trial."""
    
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng()
    
    @staticmethod
    def _validate(
        population: Optional[Population],
        sample_size: int,
        critical_value: float,
        trial_count: int,
    ) -> None:
        if population is None:
            raise InvalidStateError(
                "population has not been synthesized; call reset_population first"
            )
        
        if population.is_empty:
            raise InvalidArgumentError("cannot sample from an empty population")
        
        require_integer("sample_size", sample_size, 2)
        
        if not (math.isfinite(critical_value) and critical_value > 0):
            raise InvalidArgumentError(
                f"critical_value must be positive, got {critical_value}"
            )
        
        require_integer("trial_count", trial_count, 1)
    
    def draw_sample(self, population: Population, sample_size: int) -> np.ndarray:
        indices = self._rng.integers(0, len(population), size=sample_size)
        return population.values[indices]
    
    def estimate_trial(
        self,
        index: int,
        population: Population,
        sample_size: int,
        critical_value: float,
    ) -> Trial:
        sample = self.draw_sample(population, sample_size)
        interval = ConfidenceInterval.from_samples(sample, critical_value)
        return Trial(
            id=index + 1,
            x=index,
            lower=interval.lower,
            upper=interval.upper,
            mean=interval.mean,
        )
    
    def estimate(
        self,
        population: Optional[Population],
        sample_size: int,
        critical_value: float,
        trial_count: int,
    ) -> list[Trial]:
        # validate eagerly so nothing is drawn for an invalid request
        self._validate(population, sample_size, critical_value, trial_count)
        return [
            self.estimate_trial(index, population, sample_size, critical_value)
            for index in range(trial_count)
        ]


def estimate(
    population: Optional[Population],
    sample_size: int,
    critical_value: float,
    trial_count: int,
    rng: Optional[np.random.Generator] = None,
) -> list[Trial]:
    return IntervalEstimator(rng).estimate(
        population, sample_size, critical_value, trial_count
    )
