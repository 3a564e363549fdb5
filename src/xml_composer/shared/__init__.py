"""Shared utilities for XML document composition.

This module provides configuration objects, the exception
hierarchy and logging helpers used across all layers.
"""

from .config import (
    ComposerConfig,
    ConfigError,
    ConfigValidationError,
    MappingConfig,
    RenderConfig,
)
from .errors import (
    ComposerError,
    DocumentWriteError,
    MappingError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ComposerConfig",
    "ConfigError",
    "ConfigValidationError",
    "MappingConfig",
    "RenderConfig",
    "ComposerError",
    "DocumentWriteError",
    "MappingError",
    "CorrelationLogger",
    "get_logger",
]
