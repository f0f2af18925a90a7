from utils.exceptions import InvalidArgumentError
from utils.exceptions import InvalidStateError
from utils.exceptions import SimulationError
from utils.io.config_loader import ConfigLoader
from utils.logging.custom_logger import CustomLogger
from utils.logging.custom_logger import get_logger
from utils.reproducibility.random_generator import create_generator
__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "SimulationError",
    "ConfigLoader",
    "CustomLogger",
    "get_logger",
    "create_generator",
]
