from numbers import Integral

from utils.exceptions import InvalidArgumentError


def require_integer(name: str, value, minimum: int) -> None:
    """Reject non-integers (bool included) and values below ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )
    
    if value < minimum:
        raise InvalidArgumentError(
            f"{name} must be at least {minimum}, got {value}"
        )
