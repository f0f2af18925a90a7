from pathlib import Path

import pytest

from configs.base_config import BaseConfig
from configs.config_loader import build_config_from_dict
from configs.config_loader import build_config_from_yaml
from configs.population_config import PopulationConfig
from configs.simulation_config import SimulationConfig
from configs.study_config import StudyConfig
from evaluation.metrics.critical_value import CriticalValueMethod
from utils.exceptions import InvalidArgumentError


EXPERIMENTS_DIR = Path(__file__).resolve().parents[2] / "configs" / "experiments"


class TestDefaults:
    
    def test_population_defaults(self):
        config = PopulationConfig()
        
        assert (config.size, config.mean, config.std_dev) == (10_000, 3.5, 1.0)
    
    def test_simulation_defaults(self):
        config = SimulationConfig()
        
        assert config.sample_size == 30
        assert config.confidence_level == 95.0
        assert config.num_trials == 20
        assert config.critical_value_method == CriticalValueMethod.TABLE
        assert config.within_conventional_ranges()
    
    def test_method_name_is_converted(self):
        config = SimulationConfig(critical_value_method="exact")
        
        assert config.critical_value_method is CriticalValueMethod.EXACT
    
    def test_outside_conventional_ranges(self):
        assert not SimulationConfig(sample_size=500).within_conventional_ranges()


class TestValidation:
    
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_size": 1},
            {"confidence_level": 0},
            {"confidence_level": 100},
            {"num_trials": 0},
        ],
    )
    def test_invalid_simulation_config(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            SimulationConfig(**kwargs)
    
    @pytest.mark.parametrize(
        "kwargs",
        [{"size": 0}, {"std_dev": 0.0}, {"std_dev": -1.0}],
    )
    def test_invalid_population_config(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            PopulationConfig(**kwargs)
    
    def test_invalid_study_config(self):
        with pytest.raises(InvalidArgumentError):
            StudyConfig(sample_sizes=(1, 10))
        with pytest.raises(InvalidArgumentError):
            StudyConfig(confidence_levels=())
    
    def test_negative_seed(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            BaseConfig.from_experiment_name("exp", root_dir=tmp_path, seed=-1)


class TestBuildConfig:
    
    def test_default_yaml(self, tmp_path):
        config = build_config_from_yaml(EXPERIMENTS_DIR / "default.yaml", root_dir=tmp_path)
        
        assert config.experiment_name == "ci_coverage_default"
        assert config.seed is None
        assert config.population == PopulationConfig()
        assert config.simulation == SimulationConfig()
    
    def test_study_yaml(self, tmp_path):
        config = build_config_from_yaml(EXPERIMENTS_DIR / "coverage_study.yaml", root_dir=tmp_path)
        
        assert config.seed == 42
        assert config.study.sample_sizes == (10, 30, 100)
        assert config.study.confidence_levels == (80, 90, 95, 99)
        assert config.study.num_cells == 12
    
    def test_overrides_are_merged(self, tmp_path):
        config = build_config_from_yaml(
            EXPERIMENTS_DIR / "default.yaml",
            overrides={"simulation": {"sample_size": 80}},
            root_dir=tmp_path,
        )
        
        assert config.simulation.sample_size == 80
        assert config.simulation.num_trials == 20
    
    def test_missing_sections_use_defaults(self, tmp_path):
        config = build_config_from_dict({"experiment_name": "bare"}, root_dir=tmp_path)
        
        assert config.population == PopulationConfig()
        assert config.study == StudyConfig()
    
    def test_missing_experiment_name(self, tmp_path):
        with pytest.raises(KeyError):
            build_config_from_dict({"seed": 1}, root_dir=tmp_path)
    
    def test_invalid_values_raise(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            build_config_from_dict(
                {"experiment_name": "bad", "simulation": {"sample_size": 1}},
                root_dir=tmp_path,
            )
    
    def test_paths_are_not_created_until_requested(self, tmp_path):
        config = BaseConfig.from_experiment_name("exp", root_dir=tmp_path)
        
        assert not config.paths.outputs.exists()
        
        config.paths.create_directories()
        
        assert config.paths.logs.is_dir()
        assert config.paths.results.is_dir()
    
    def test_to_dict(self, tmp_path):
        config = BaseConfig.from_experiment_name("exp", root_dir=tmp_path, seed=3)
        
        data = config.to_dict()
        
        assert data["seed"] == 3
        assert data["simulation"]["critical_value_method"] == "table"
        assert data["population"]["size"] == 10_000


class TestIntegerFields:
    
    @pytest.mark.parametrize(
        "kwargs",
        [{"sample_size": 30.5}, {"sample_size": 30.0}, {"num_trials": 2.5}, {"num_trials": True}],
    )
    def test_simulation_config_rejects_non_integers(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            SimulationConfig(**kwargs)
    
    def test_population_config_rejects_non_integer_size(self):
        with pytest.raises(InvalidArgumentError):
            PopulationConfig(size=100.0)
    
    @pytest.mark.parametrize(
        "kwargs",
        [{"sample_sizes": (10, 30.5)}, {"num_trials": 1.5}, {"num_repeats": 2.5}],
    )
    def test_study_config_rejects_non_integers(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            StudyConfig(**kwargs)
    
    def test_yaml_with_fractional_sample_size_raises(self, tmp_path):
        path = tmp_path / "fractional.yaml"
        path.write_text("experiment_name: frac\nsimulation:\n  sample_size: 30.5\n")
        
        with pytest.raises(InvalidArgumentError):
            build_config_from_yaml(path, root_dir=tmp_path)
