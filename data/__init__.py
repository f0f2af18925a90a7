from data.population.normal_generator import NormalGenerator
from data.population.population_synthesizer import Population
from data.population.population_synthesizer import PopulationSynthesizer
from data.sampling.interval_estimator import IntervalEstimator
from data.sampling.interval_estimator import Trial

__all__ = [
    "NormalGenerator",
    "Population",
    "PopulationSynthesizer",
    "IntervalEstimator",
    "Trial",
]
