from dataclasses import dataclass
from typing import Optional
import math

import numpy as np


@dataclass(frozen=True)
class GeneratorConfig:
    seed: Optional[int] = None


class NormalGenerator:
    """Standard normal draws from a uniform source via the Box-Muller transform.

    The uniform source is a ``numpy.random.Generator``. Pass one in (or a
    seed through ``GeneratorConfig``) to make draws reproducible.
    """
    
    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._config = config or GeneratorConfig()
        self._rng = rng if rng is not None else self._create_rng()
    
    def _create_rng(self) -> np.random.Generator:
        return np.random.default_rng(self._config.seed)
    
    @property
    def rng(self) -> np.random.Generator:
        return self._rng
    
    def _next_open_uniform(self) -> float:
        value = 0.0
        while value == 0.0:
            value = float(self._rng.random())
        return value
    
    def _open_uniforms(self, count: int) -> np.ndarray:
        values = self._rng.random(count)
        zeros = values == 0.0
        while zeros.any():
            values[zeros] = self._rng.random(int(zeros.sum()))
            zeros = values == 0.0
        return values
    
    def next_standard_normal(self) -> float:
        u = self._next_open_uniform()
        v = self._next_open_uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    
    def standard_normals(self, count: int) -> np.ndarray:
        if count < 0:
            raise ValueError("count must be non-negative")
        
        u = self._open_uniforms(count)
        v = self._open_uniforms(count)
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
