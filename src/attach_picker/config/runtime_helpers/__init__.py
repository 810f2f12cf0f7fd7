"""Loaders for file-based defaults and pattern list normalization."""

from .dotenv_loader import DotenvLoader
from .json_config_loader import JsonConfigLoader
from .pattern_normalizer import PatternNormalizer

__all__ = [
    "DotenvLoader",
    "JsonConfigLoader",
    "PatternNormalizer",
]
