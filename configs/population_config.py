from dataclasses import dataclass
import math

from utils.exceptions import InvalidArgumentError
from utils.validation import require_integer


@dataclass(frozen=True)
class PopulationConfig:
    size: int = 10_000
    mean: float = 3.5
    std_dev: float = 1.0
    
    def __post_init__(self) -> None:
        require_integer("size", self.size, 1)
        
        if not math.isfinite(self.mean):
            raise InvalidArgumentError("mean must be finite")
        
        if not (math.isfinite(self.std_dev) and self.std_dev > 0):
            raise InvalidArgumentError("std_dev must be positive")
