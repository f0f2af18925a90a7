from dataclasses import dataclass
import math

import numpy as np

from evaluation.metrics.critical_value import resolve_critical_value
from utils.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ConfidenceInterval:
    mean: float
    std: float
    standard_error: float
    margin: float
    lower: float
    upper: float
    critical_value: float
    
    def __str__(self) -> str:
        return f"{self.mean:.2f}±{self.margin:.2f}"
    
    @property
    def width(self) -> float:
        return self.upper - self.lower
    
    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper
    
    @classmethod
    def from_samples(
        cls,
        samples: np.ndarray,
        critical_value: float,
    ) -> "ConfidenceInterval":
        samples = np.asarray(samples, dtype=np.float64)
        n = samples.shape[0]
        if n < 2:
            raise InvalidArgumentError(
                f"at least 2 samples are required, got {n}"
            )
        
        mean = float(np.mean(samples))
        std = float(np.std(samples, ddof=1))
        return cls.from_mean_std(mean, std, n, critical_value)
    
    @classmethod
    def from_mean_std(
        cls,
        mean: float,
        std: float,
        n: int,
        critical_value: float,
    ) -> "ConfidenceInterval":
        if n < 2:
            raise InvalidArgumentError(f"n must be at least 2, got {n}")
        
        if not (math.isfinite(critical_value) and critical_value > 0):
            raise InvalidArgumentError(
                f"critical_value must be positive, got {critical_value}"
            )
        
        standard_error = std / math.sqrt(n)
        margin = critical_value * standard_error
        return cls(
            mean=mean,
            std=std,
            standard_error=standard_error,
            margin=margin,
            lower=mean - margin,
            upper=mean + margin,
            critical_value=critical_value,
        )


def compute_confidence_interval(
    values: list[float],
    confidence_level: float = 95.0,
) -> ConfidenceInterval:
    samples = np.array(values, dtype=np.float64)
    critical_value = resolve_critical_value(confidence_level)
    return ConfidenceInterval.from_samples(samples, critical_value)
