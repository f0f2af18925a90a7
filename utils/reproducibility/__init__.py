from utils.reproducibility.random_generator import create_generator

__all__ = [
    "create_generator",
]
