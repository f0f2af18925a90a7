from dataclasses import dataclass

from utils.exceptions import InvalidArgumentError
from utils.validation import require_integer


@dataclass(frozen=True)
class StudyConfig:
    sample_sizes: tuple[int, ...] = (10, 30, 100)
    confidence_levels: tuple[float, ...] = (80.0, 90.0, 95.0, 99.0)
    num_trials: int = 100
    num_repeats: int = 50
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "sample_sizes", tuple(self.sample_sizes))
        object.__setattr__(self, "confidence_levels", tuple(self.confidence_levels))
        
        if not self.sample_sizes:
            raise InvalidArgumentError("sample_sizes cannot be empty")
        
        for size in self.sample_sizes:
            require_integer("sample_sizes entry", size, 2)
        
        if not self.confidence_levels:
            raise InvalidArgumentError("confidence_levels cannot be empty")
        
        if any(not 0.0 < level < 100.0 for level in self.confidence_levels):
            raise InvalidArgumentError("all confidence_levels must be in (0, 100)")
        
        require_integer("num_trials", self.num_trials, 1)
        
        require_integer("num_repeats", self.num_repeats, 1)
    
    @property
    def num_cells(self) -> int:
        return len(self.sample_sizes) * len(self.confidence_levels)
