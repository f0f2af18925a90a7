from dataclasses import dataclass
import math

from evaluation.metrics.critical_value import CriticalValueMethod
from utils.exceptions import InvalidArgumentError
from utils.validation import require_integer


# Ranges offered by the interactive front end. The engine accepts anything valid.
SAMPLE_SIZE_RANGE = (10, 100)
CONFIDENCE_LEVEL_RANGE = (80.0, 99.0)
NUM_TRIALS_RANGE = (1, 100)


@dataclass(frozen=True)
class SimulationConfig:
    sample_size: int = 30
    confidence_level: float = 95.0
    num_trials: int = 20
    critical_value_method: CriticalValueMethod = CriticalValueMethod.TABLE
    
    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "critical_value_method",
            CriticalValueMethod(self.critical_value_method),
        )
        
        require_integer("sample_size", self.sample_size, 2)
        
        if not (
            math.isfinite(self.confidence_level)
            and 0.0 < self.confidence_level < 100.0
        ):
            raise InvalidArgumentError("confidence_level must be in (0, 100)")
        
        require_integer("num_trials", self.num_trials, 1)
    
    def within_conventional_ranges(self) -> bool:
        return (
            SAMPLE_SIZE_RANGE[0] <= self.sample_size <= SAMPLE_SIZE_RANGE[1]
            and CONFIDENCE_LEVEL_RANGE[0] <= self.confidence_level <= CONFIDENCE_LEVEL_RANGE[1]
            and NUM_TRIALS_RANGE[0] <= self.num_trials <= NUM_TRIALS_RANGE[1]
        )
