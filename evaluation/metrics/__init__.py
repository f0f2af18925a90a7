from evaluation.metrics.confidence_interval import ConfidenceInterval
from evaluation.metrics.confidence_interval import compute_confidence_interval
from evaluation.metrics.coverage import CoverageResult
from evaluation.metrics.coverage import aggregate
from evaluation.metrics.critical_value import CriticalValueMethod
from evaluation.metrics.critical_value import get_critical_value
from evaluation.metrics.critical_value import resolve_critical_value
from evaluation.metrics.critical_value import resolve_critical_value_exact
__all__ = [
    "ConfidenceInterval",
    "compute_confidence_interval",
    "CoverageResult",
    "aggregate",
    "CriticalValueMethod",
    "get_critical_value",
    "resolve_critical_value",
    "resolve_critical_value_exact",
]
