from experiments.coverage_studies.study_configs import StudyType
from experiments.coverage_studies.study_configs import create_study_configs
from experiments.coverage_studies.study_runner import CoverageStudyRunner
from experiments.coverage_studies.study_runner import StudyResult

__all__ = [
    "StudyType",
    "create_study_configs",
    "CoverageStudyRunner",
    "StudyResult",
]
