from data.population.normal_generator import GeneratorConfig
from data.population.normal_generator import NormalGenerator
from data.population.population_synthesizer import Population
from data.population.population_synthesizer import PopulationSynthesizer
from data.population.population_synthesizer import synthesize

__all__ = [
    "GeneratorConfig",
    "NormalGenerator",
    "Population",
    "PopulationSynthesizer",
    "synthesize",
]
