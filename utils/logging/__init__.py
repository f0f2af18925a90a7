from utils.logging.custom_logger import CustomLogger
from utils.logging.custom_logger import LogLevel
from utils.logging.custom_logger import get_logger

__all__ = [
    "CustomLogger",
    "LogLevel",
    "get_logger",
]
