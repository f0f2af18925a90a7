from utils.io.config_loader import ConfigLoader
__all__ = [
    "ConfigLoader",
]
