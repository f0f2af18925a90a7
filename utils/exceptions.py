class SimulationError(Exception):
    pass


class InvalidArgumentError(SimulationError, ValueError):
    """Raised for out-of-range or nonsensical parameters."""


class InvalidStateError(SimulationError, RuntimeError):
    """Raised when an operation runs without its required prior state."""
