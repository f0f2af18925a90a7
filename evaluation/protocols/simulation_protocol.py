from dataclasses import dataclass
from typing import Optional

import numpy as np

from configs.population_config import PopulationConfig
from configs.simulation_config import SimulationConfig
from data.population.normal_generator import NormalGenerator
from data.population.population_synthesizer import Population
from data.population.population_synthesizer import PopulationSynthesizer
from data.sampling.interval_estimator import IntervalEstimator
from data.sampling.interval_estimator import Trial
from evaluation.metrics.coverage import CoverageResult
from evaluation.metrics.coverage import aggregate
from evaluation.metrics.critical_value import CriticalValueMethod
from evaluation.metrics.critical_value import get_critical_value
from utils.exceptions import InvalidStateError
from utils.logging.custom_logger import CustomLogger


@dataclass(frozen=True)
class SimulationResult:
    trials: tuple[Trial, ...]
    coverage: CoverageResult
    critical_value: float
    confidence_level: float
    sample_size: int
    population_mean: float
    
    @property
    def num_trials(self) -> int:
        return len(self.trials)
    
    def mean_width(self) -> float:
        return float(np.mean([trial.width for trial in self.trials]))
    
    def to_dict(self) -> dict:
        return {
            "sample_size": self.sample_size,
            "confidence_level": self.confidence_level,
            "critical_value": self.critical_value,
            "population_mean": self.population_mean,
            "coverage": self.coverage.to_dict(),
            "trials": [
                {**trial.to_dict(), "contains_mean": trial.contains(self.population_mean)}
                for trial in self.trials
            ],
        }


def reset_population(
    size: int = PopulationConfig.size,
    mean: float = PopulationConfig.mean,
    std_dev: float = PopulationConfig.std_dev,
    generator: Optional[NormalGenerator] = None,
) -> Population:
    return PopulationSynthesizer(generator).synthesize(size, mean, std_dev)


def run_simulation(
    population: Optional[Population],
    sample_size: int,
    confidence_level: float,
    trial_count: int,
    rng: Optional[np.random.Generator] = None,
    method: CriticalValueMethod = CriticalValueMethod.TABLE,
) -> SimulationResult:
    """Resolve the critical value, estimate ``trial_count`` intervals and score them.

    A default population is synthesized when ``population`` is None.
    """
    rng = rng if rng is not None else np.random.default_rng()
    
    critical_value = get_critical_value(confidence_level, method)
    
    if population is None:
        population = reset_population(generator=NormalGenerator(rng=rng))
    
    trials = IntervalEstimator(rng).estimate(
        population, sample_size, critical_value, trial_count
    )
    coverage = aggregate(trials, population.mean)
    
    return SimulationResult(
        trials=tuple(trials),
        coverage=coverage,
        critical_value=critical_value,
        confidence_level=float(confidence_level),
        sample_size=sample_size,
        population_mean=population.mean,
    )


class SimulationSession:
    """Owns the population and the last result between runs.

    The population is created on the first run or on ``reset`` and is only
    ever replaced, never modified.
    """
    
    def __init__(
        self,
        population_config: Optional[PopulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Optional[CustomLogger] = None,
    ):
        self._population_config = population_config or PopulationConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._generator = NormalGenerator(rng=self._rng)
        self._logger = logger
        
        self._population: Optional[Population] = None
        self._last_result: Optional[SimulationResult] = None
        self._is_running = False
    
    @property
    def population(self) -> Optional[Population]:
        return self._population
    
    @property
    def last_result(self) -> Optional[SimulationResult]:
        return self._last_result
    
    @property
    def is_running(self) -> bool:
        return self._is_running
    
    def reset(self, population_config: Optional[PopulationConfig] = None) -> Population:
        if population_config is not None:
            self._population_config = population_config
        
        config = self._population_config
        self._population = reset_population(
            config.size, config.mean, config.std_dev, self._generator
        )
        self._last_result = None
        
        if self._logger:
            self._logger.log_population(config.size, config.mean, config.std_dev)
        
        return self._population
    
    def run(self, config: Optional[SimulationConfig] = None) -> SimulationResult:
        if self._is_running:
            raise InvalidStateError("a simulation run is already in progress")
        
        config = config or SimulationConfig()
        
        self._is_running = True
        try:
            if self._population is None:
                self.reset()
            
            result = run_simulation(
                self._population,
                config.sample_size,
                config.confidence_level,
                config.num_trials,
                rng=self._rng,
                method=config.critical_value_method,
            )
        finally:
            self._is_running = False
        
        self._last_result = result
        
        if self._logger:
            self._logger.log_simulation_result(
                sample_size=result.sample_size,
                confidence_level=result.confidence_level,
                critical_value=result.critical_value,
                num_covered=result.coverage.count,
                num_trials=result.coverage.total,
            )
        
        return result
