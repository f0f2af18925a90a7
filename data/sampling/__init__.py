from data.sampling.interval_estimator import IntervalEstimator
from data.sampling.interval_estimator import Trial
from data.sampling.interval_estimator import estimate

__all__ = [
    "IntervalEstimator",
    "Trial",
    "estimate",
]
