import math

import numpy as np
import pytest

from data.population.normal_generator import GeneratorConfig
from data.population.normal_generator import NormalGenerator


class ScriptedUniform:
    """Stands in for numpy's Generator, replaying a fixed list of uniforms."""
    
    def __init__(self, values: list[float]):
        self._values = list(values)
    
    def random(self, size=None):
        if size is None:
            return self._values.pop(0)
        drawn = [self._values.pop(0) for _ in range(size)]
        return np.array(drawn, dtype=np.float64)


def box_muller(u: float, v: float) -> float:
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


class TestNextStandardNormal:
    
    def test_applies_box_muller_transform(self):
        generator = NormalGenerator(rng=ScriptedUniform([0.25, 0.5]))
        
        value = generator.next_standard_normal()
        
        assert value == pytest.approx(box_muller(0.25, 0.5))
    
    def test_redraws_zero_uniforms(self):
        generator = NormalGenerator(rng=ScriptedUniform([0.0, 0.25, 0.0, 0.0, 0.5]))
        
        value = generator.next_standard_normal()
        
        assert value == pytest.approx(box_muller(0.25, 0.5))
        assert math.isfinite(value)
    
    def test_same_seed_gives_same_draws(self):
        first = NormalGenerator(GeneratorConfig(seed=7))
        second = NormalGenerator(GeneratorConfig(seed=7))
        
        draws_a = [first.next_standard_normal() for _ in range(10)]
        draws_b = [second.next_standard_normal() for _ in range(10)]
        
        assert draws_a == draws_b


class TestStandardNormals:
    
    def test_returns_requested_count(self, rng):
        values = NormalGenerator(rng=rng).standard_normals(123)
        
        assert values.shape == (123,)
    
    def test_redraws_zero_uniforms(self):
        uniforms = [0.0, 0.5, 0.25, 0.75, 0.5, 0.5, 0.5]
        generator = NormalGenerator(rng=ScriptedUniform(uniforms))
        
        values = generator.standard_normals(3)
        
        expected = [box_muller(u, 0.5) for u in (0.75, 0.5, 0.25)]
        np.testing.assert_allclose(values, expected)
    
    def test_moments_match_standard_normal(self, rng):
        values = NormalGenerator(rng=rng).standard_normals(20_000)
        
        assert abs(np.mean(values)) < 0.05
        assert abs(np.std(values, ddof=1) - 1.0) < 0.05
    
    def test_negative_count_raises(self, rng):
        with pytest.raises(ValueError):
            NormalGenerator(rng=rng).standard_normals(-1)
