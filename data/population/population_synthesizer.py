from dataclasses import dataclass
from typing import Optional
import math

import numpy as np

from data.population.normal_generator import NormalGenerator
from utils.exceptions import InvalidArgumentError
from utils.validation import require_integer


DEFAULT_POPULATION_SIZE = 10_000
DEFAULT_POPULATION_MEAN = 3.5
DEFAULT_POPULATION_STD_DEV = 1.0


@dataclass(frozen=True, eq=False)
class Population:
    """A finite reference population with its configured true parameters.

    ``mean`` and ``std_dev`` are the values the population was drawn with,
    not statistics measured from ``values``.
    """
    
    values: np.ndarray
    mean: float
    std_dev: float
    
    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)
    
    def __len__(self) -> int:
        return int(self.values.shape[0])
    
    @property
    def size(self) -> int:
        return len(self)
    
    @property
    def is_empty(self) -> bool:
        return len(self) == 0
    
    def measured_mean(self) -> float:
        if self.is_empty:
            raise InvalidArgumentError("population is empty")
        return float(np.mean(self.values))
    
    def measured_std_dev(self) -> float:
        if len(self) < 2:
            raise InvalidArgumentError("population needs at least 2 values")
        return float(np.std(self.values, ddof=1))


class PopulationSynthesizer:
    
    def __init__(self, generator: Optional[NormalGenerator] = None):
        self._generator = generator or NormalGenerator()
    
    @property
    def generator(self) -> NormalGenerator:
        return self._generator
    
    def synthesize(
        self,
        size: int = DEFAULT_POPULATION_SIZE,
        mean: float = DEFAULT_POPULATION_MEAN,
        std_dev: float = DEFAULT_POPULATION_STD_DEV,
    ) -> Population:
        """Draw ``size`` values of ``mean + std_dev * z``.

        ``z`` comes from ``NormalGenerator.standard_normals``, the batched form of
        ``next_standard_normal``: the same Box-Muller transform and zero redraw,
        with all ``u`` draws taken before all ``v`` draws.
        """
        require_integer("size", size, 1)
        
        if not math.isfinite(mean):
            raise InvalidArgumentError(f"mean must be finite, got {mean}")
        
        if not (math.isfinite(std_dev) and std_dev > 0):
            raise InvalidArgumentError(f"std_dev must be positive, got {std_dev}")
        
        values = mean + std_dev * self._generator.standard_normals(size)
        
        return Population(values=values, mean=float(mean), std_dev=float(std_dev))


def synthesize(
    size: int = DEFAULT_POPULATION_SIZE,
    mean: float = DEFAULT_POPULATION_MEAN,
    std_dev: float = DEFAULT_POPULATION_STD_DEV,
    generator: Optional[NormalGenerator] = None,
) -> Population:
    return PopulationSynthesizer(generator).synthesize(size, mean, std_dev)
