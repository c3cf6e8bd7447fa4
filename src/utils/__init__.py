"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Floating-point equality policy (float_cmp)
    - Atomic I/O and YAML (fs)
    - Unified logging (logging_config)
    - Config validation (validators)

No module in utils/ may import from upper layers (tuples, raster, scripts).

Convenience imports:
    from src.utils import fs, float_cmp, validators
    from src.utils.logging_config import setup_logging, get_logger
"""

from . import float_cmp
from . import fs
from . import logging_config
from . import validators

from .float_cmp import EPSILON, float_equal
from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'float_cmp',
    'fs',
    'logging_config',
    'validators',
    # Direct exports
    'EPSILON',
    'float_equal',
    'setup_logging',
    'get_logger',
    'push_context',
]
