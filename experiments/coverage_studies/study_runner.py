from dataclasses import dataclass
from typing import Optional
import itertools

import numpy as np
from tqdm.auto import tqdm

from configs.simulation_config import SimulationConfig
from configs.study_config import StudyConfig
from data.population.population_synthesizer import Population
from evaluation.metrics.critical_value import CriticalValueMethod
from evaluation.protocols.simulation_protocol import run_simulation
from utils.logging.custom_logger import CustomLogger


@dataclass
class StudyCellResult:
    sample_size: int
    confidence_level: float
    critical_value: float
    num_repeats: int
    num_trials: int
    mean_coverage: float
    std_coverage: float
    mean_width: float
    
    def to_dict(self) -> dict:
        return {
            "sample_size": self.sample_size,
            "confidence_level": self.confidence_level,
            "critical_value": self.critical_value,
            "num_repeats": self.num_repeats,
            "num_trials": self.num_trials,
            "mean_coverage": self.mean_coverage,
            "std_coverage": self.std_coverage,
            "mean_width": self.mean_width,
        }


@dataclass
class StudyResult:
    population_mean: float
    population_std_dev: float
    cells: list[StudyCellResult]
    
    def get_cell(self, sample_size: int, confidence_level: float) -> StudyCellResult:
        for cell in self.cells:
            if cell.sample_size == sample_size and cell.confidence_level == confidence_level:
                return cell
        raise KeyError(f"No cell for n={sample_size}, level={confidence_level}")
    
    def to_dict(self) -> dict:
        return {
            "population_mean": self.population_mean,
            "population_std_dev": self.population_std_dev,
            "cells": [cell.to_dict() for cell in self.cells],
        }


class CoverageStudyRunner:
    
    def __init__(
        self,
        population: Population,
        study_config: StudyConfig,
        rng: Optional[np.random.Generator] = None,
        method: CriticalValueMethod = CriticalValueMethod.TABLE,
        logger: Optional[CustomLogger] = None,
    ):
        self._population = population
        self._config = study_config
        self._rng = rng if rng is not None else np.random.default_rng()
        self._method = CriticalValueMethod(method)
        self._logger = logger
    
    def run_cell(self, sample_size: int, confidence_level: float) -> StudyCellResult:
        config = SimulationConfig(
            sample_size=sample_size,
            confidence_level=confidence_level,
            num_trials=self._config.num_trials,
            critical_value_method=self._method,
        )
        
        coverages = []
        widths = []
        critical_value = 0.0
        
        for _ in range(self._config.num_repeats):
            result = run_simulation(
                self._population,
                config.sample_size,
                config.confidence_level,
                config.num_trials,
                rng=self._rng,
                method=config.critical_value_method,
            )
            critical_value = result.critical_value
            coverages.append(result.coverage.fraction)
            widths.append(result.mean_width())
        
        cell = StudyCellResult(
            sample_size=sample_size,
            confidence_level=float(confidence_level),
            critical_value=critical_value,
            num_repeats=self._config.num_repeats,
            num_trials=self._config.num_trials,
            mean_coverage=float(np.mean(coverages)),
            std_coverage=float(np.std(coverages)),
            mean_width=float(np.mean(widths)),
        )
        
        if self._logger:
            self._logger.log_study_cell(
                sample_size=cell.sample_size,
                confidence_level=cell.confidence_level,
                mean_coverage=cell.mean_coverage,
                mean_width=cell.mean_width,
            )
        
        return cell
    
    def run(self, show_progress: bool = True) -> StudyResult:
        grid = list(itertools.product(
            self._config.sample_sizes,
            self._config.confidence_levels,
        ))
        
        iterator = grid
        if show_progress:
            iterator = tqdm(grid, desc="Coverage study")
        
        cells = [
            self.run_cell(sample_size, confidence_level)
            for sample_size, confidence_level in iterator
        ]
        
        return StudyResult(
            population_mean=self._population.mean,
            population_std_dev=self._population.std_dev,
            cells=cells,
        )
