from enum import Enum
import math

from scipy.stats import norm

from utils.exceptions import InvalidArgumentError


# (critical value, cumulative probability) pairs of the standard normal,
# searched in this order.
NORMAL_TABLE: tuple[tuple[float, float], ...] = (
    (1.28, 0.90),
    (1.44, 0.925),
    (1.645, 0.95),
    (1.96, 0.975),
    (2.326, 0.99),
    (2.576, 0.995),
    (2.807, 0.9975),
    (3.291, 0.999),
)


class CriticalValueMethod(str, Enum):
    TABLE = "table"
    EXACT = "exact"


def _validate_confidence_level(confidence_level: float) -> None:
    if not math.isfinite(confidence_level) or not 0.0 < confidence_level < 100.0:
        raise InvalidArgumentError(
            f"confidence_level must be in (0, 100), got {confidence_level}"
        )


def two_sided_probability(confidence_level: float) -> float:
    _validate_confidence_level(confidence_level)
    alpha = 1.0 - confidence_level / 100.0
    return 1.0 - alpha / 2.0


def resolve_critical_value(confidence_level: float) -> float:
    """Nearest table entry to the two-sided cumulative probability.

    This is a step function of ``confidence_level``, not an interpolation.
    On equal distance the earlier table entry wins.
    """
    probability = two_sided_probability(confidence_level)
    
    best_value, best_probability = NORMAL_TABLE[0]
    for value, table_probability in NORMAL_TABLE[1:]:
        if abs(table_probability - probability) < abs(best_probability - probability):
            best_value, best_probability = value, table_probability
    
    return best_value


def resolve_critical_value_exact(confidence_level: float) -> float:
    probability = two_sided_probability(confidence_level)
    return float(norm.ppf(probability))


def get_critical_value(
    confidence_level: float,
    method: CriticalValueMethod = CriticalValueMethod.TABLE,
) -> float:
    method = CriticalValueMethod(method)
    if method == CriticalValueMethod.EXACT:
        return resolve_critical_value_exact(confidence_level)
    return resolve_critical_value(confidence_level)
