"""
simkit: multi-algorithm text similarity.

Exposes `compute`, the option types and `SCORER_REGISTRY`, and imports the
scorer modules for side-effect registration into the registry.
"""

import logging

from .errors import InvalidArgumentError  # noqa: F401
from .options import Algorithm, Granularity, LengthMode, Options, Weighting, resolve_options  # noqa: F401
from .registry import SCORER_REGISTRY  # noqa: F401

# Import modules that register themselves in the registry on import.
from . import edit_distance  # noqa: F401
from . import jaro_winkler  # noqa: F401
from . import sequence  # noqa: F401
from . import token_overlap  # noqa: F401
from . import cosine_ngrams  # noqa: F401
from . import composite  # noqa: F401

from .engine import compute  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Algorithm",
    "Granularity",
    "InvalidArgumentError",
    "LengthMode",
    "Options",
    "SCORER_REGISTRY",
    "Weighting",
    "compute",
    "resolve_options",
]
