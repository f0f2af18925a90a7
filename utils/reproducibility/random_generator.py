from typing import Optional

import numpy as np

from utils.exceptions import InvalidArgumentError


def create_generator(seed: Optional[int] = None) -> np.random.Generator:
    """The single source of randomness handed to sessions, samplers and studies."""
    if seed is not None and seed < 0:
        raise InvalidArgumentError("seed must be non-negative")
    return np.random.default_rng(seed)
