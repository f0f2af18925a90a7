from pathlib import Path
import pytest
import numpy as np
from data.population.normal_generator import NormalGenerator
from data.population.population_synthesizer import Population
from data.population.population_synthesizer import PopulationSynthesizer
@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
@pytest.fixture
def population(rng: np.random.Generator) -> Population:
    synthesizer = PopulationSynthesizer(NormalGenerator(rng=rng))
    return synthesizer.synthesize(size=10_000, mean=3.5, std_dev=1.0)
@pytest.fixture
def constant_population() -> Population:
    return Population(values=np.full(100, 2.0), mean=2.0, std_dev=1.0)
@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    output_dir = tmp_path / "test_outputs"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir
