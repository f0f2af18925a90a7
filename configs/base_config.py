from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Optional

from configs.population_config import PopulationConfig
from configs.simulation_config import SimulationConfig
from configs.study_config import StudyConfig
from utils.exceptions import InvalidArgumentError


@dataclass
class PathConfig:
    root: Path
    outputs: Path
    logs: Path
    results: Path
    
    def create_directories(self) -> None:
        for path in [
            self.outputs,
            self.logs,
            self.results,
        ]:
            path.mkdir(parents=True, exist_ok=True)
    
    @classmethod
    def for_experiment(cls, experiment_name: str, root_dir: Path = Path("./")) -> "PathConfig":
        outputs = root_dir / "outputs" / experiment_name
        return cls(
            root=root_dir,
            outputs=outputs,
            logs=outputs / "logs",
            results=outputs / "results",
        )


@dataclass
class BaseConfig:
    experiment_name: str
    paths: PathConfig
    seed: Optional[int] = None
    population: PopulationConfig = field(default_factory=PopulationConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    study: StudyConfig = field(default_factory=StudyConfig)
    
    debug_mode: bool = False
    
    def __post_init__(self) -> None:
        if not self.experiment_name:
            raise InvalidArgumentError("experiment_name cannot be empty")
        
        if self.seed is not None and self.seed < 0:
            raise InvalidArgumentError("seed must be non-negative")
    
    @classmethod
    def from_experiment_name(
        cls,
        experiment_name: str,
        root_dir: Path = Path("./"),
        seed: Optional[int] = None,
    ) -> "BaseConfig":
        return cls(
            experiment_name=experiment_name,
            paths=PathConfig.for_experiment(experiment_name, root_dir),
            seed=seed,
        )
    
    def to_dict(self) -> dict:
        return {
            "experiment_name": self.experiment_name,
            "seed": self.seed,
            "debug_mode": self.debug_mode,
            "population": {
                "size": self.population.size,
                "mean": self.population.mean,
                "std_dev": self.population.std_dev,
            },
            "simulation": {
                "sample_size": self.simulation.sample_size,
                "confidence_level": self.simulation.confidence_level,
                "num_trials": self.simulation.num_trials,
                "critical_value_method": self.simulation.critical_value_method.value,
            },
            "study": {
                "sample_sizes": list(self.study.sample_sizes),
                "confidence_levels": list(self.study.confidence_levels),
                "num_trials": self.study.num_trials,
                "num_repeats": self.study.num_repeats,
            },
        }


def create_default_config(
    experiment_name: str = "ci_coverage_default"
) -> BaseConfig:
    return BaseConfig.from_experiment_name(experiment_name)
