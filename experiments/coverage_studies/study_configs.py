from enum import Enum
from enum import auto

from configs.study_config import StudyConfig


class StudyType(Enum):
    SAMPLE_SIZE_SWEEP = auto()
    CONFIDENCE_SWEEP = auto()
    FULL_GRID = auto()


STUDY_DESCRIPTIONS = {
    StudyType.SAMPLE_SIZE_SWEEP: "Interval width against sample size at 95% confidence",
    StudyType.CONFIDENCE_SWEEP: "Coverage and width against confidence level at n=30",
    StudyType.FULL_GRID: "Every sample size crossed with every confidence level",
}


def create_study_configs(
    num_trials: int = 100,
    num_repeats: int = 50,
) -> dict[StudyType, StudyConfig]:
    configs = {}
    
    configs[StudyType.SAMPLE_SIZE_SWEEP] = StudyConfig(
        sample_sizes=(10, 20, 30, 50, 100),
        confidence_levels=(95.0,),
        num_trials=num_trials,
        num_repeats=num_repeats,
    )
    
    configs[StudyType.CONFIDENCE_SWEEP] = StudyConfig(
        sample_sizes=(30,),
        confidence_levels=(80.0, 85.0, 90.0, 95.0, 99.0),
        num_trials=num_trials,
        num_repeats=num_repeats,
    )
    
    configs[StudyType.FULL_GRID] = StudyConfig(
        sample_sizes=(10, 30, 100),
        confidence_levels=(80.0, 90.0, 95.0, 99.0),
        num_trials=num_trials,
        num_repeats=num_repeats,
    )
    
    return configs


def get_study_config(study_type: StudyType, **kwargs) -> StudyConfig:
    return create_study_configs(**kwargs)[study_type]
