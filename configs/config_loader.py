from pathlib import Path
from typing import Any
from typing import Optional

from configs.base_config import BaseConfig
from configs.base_config import PathConfig
from configs.population_config import PopulationConfig
from configs.simulation_config import SimulationConfig
from configs.study_config import StudyConfig
from utils.io.config_loader import ConfigLoader


REQUIRED_KEYS = ["experiment_name"]


def build_config_from_dict(
    config_dict: dict[str, Any],
    root_dir: Path = Path("./"),
) -> BaseConfig:
    ConfigLoader.validate_required_keys(config_dict, REQUIRED_KEYS)
    
    experiment_name = config_dict["experiment_name"]
    
    pop_cfg = config_dict.get("population", {})
    population = PopulationConfig(
        size=pop_cfg.get("size", PopulationConfig.size),
        mean=pop_cfg.get("mean", PopulationConfig.mean),
        std_dev=pop_cfg.get("std_dev", PopulationConfig.std_dev),
    )
    
    sim_cfg = config_dict.get("simulation", {})
    simulation = SimulationConfig(
        sample_size=sim_cfg.get("sample_size", SimulationConfig.sample_size),
        confidence_level=sim_cfg.get(
            "confidence_level", SimulationConfig.confidence_level
        ),
        num_trials=sim_cfg.get("num_trials", SimulationConfig.num_trials),
        critical_value_method=sim_cfg.get(
            "critical_value_method", SimulationConfig.critical_value_method
        ),
    )
    
    study_cfg = config_dict.get("study", {})
    study = StudyConfig(
        sample_sizes=tuple(study_cfg.get("sample_sizes", StudyConfig.sample_sizes)),
        confidence_levels=tuple(
            study_cfg.get("confidence_levels", StudyConfig.confidence_levels)
        ),
        num_trials=study_cfg.get("num_trials", StudyConfig.num_trials),
        num_repeats=study_cfg.get("num_repeats", StudyConfig.num_repeats),
    )
    
    return BaseConfig(
        experiment_name=experiment_name,
        paths=PathConfig.for_experiment(experiment_name, root_dir),
        seed=config_dict.get("seed"),
        population=population,
        simulation=simulation,
        study=study,
        debug_mode=config_dict.get("debug_mode", False),
    )


def build_config_from_yaml(
    yaml_path: Path,
    overrides: Optional[dict[str, Any]] = None,
    root_dir: Path = Path("./"),
) -> BaseConfig:
    config_dict = ConfigLoader.load_with_overrides(yaml_path, overrides)
    return build_config_from_dict(config_dict, root_dir)
