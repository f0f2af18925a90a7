from dataclasses import dataclass
from typing import Protocol
from typing import Sequence
import math

from utils.exceptions import InvalidArgumentError


class Interval(Protocol):
    lower: float
    upper: float


@dataclass(frozen=True)
class CoverageResult:
    count: int
    total: int
    fraction: float
    
    @property
    def percentage(self) -> float:
        return self.fraction * 100.0
    
    def nominal_gap(self, confidence_level: float) -> float:
        """Empirical minus nominal coverage, both as fractions."""
        return self.fraction - confidence_level / 100.0
    
    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "total": self.total,
            "fraction": self.fraction,
        }


def contains_mean(interval: Interval, true_mean: float) -> bool:
    return interval.lower <= true_mean <= interval.upper


def aggregate(intervals: Sequence[Interval], true_mean: float) -> CoverageResult:
    total = len(intervals)
    if total == 0:
        raise InvalidArgumentError("cannot aggregate coverage of zero trials")
    
    if not math.isfinite(true_mean):
        raise InvalidArgumentError(f"true_mean must be finite, got {true_mean}")
    
    count = sum(1 for interval in intervals if contains_mean(interval, true_mean))
    
    return CoverageResult(count=count, total=total, fraction=count / total)
