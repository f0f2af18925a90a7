from configs.base_config import BaseConfig
from configs.base_config import PathConfig
from configs.base_config import create_default_config
from configs.population_config import PopulationConfig
from configs.simulation_config import SimulationConfig
from configs.study_config import StudyConfig
__all__ = [
    "BaseConfig",
    "PathConfig",
    "create_default_config",
    "PopulationConfig",
    "SimulationConfig",
    "StudyConfig",
]
