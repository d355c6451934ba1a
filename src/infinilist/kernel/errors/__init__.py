"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── SequenceError            (sequence.py)
    │   └── ExhaustedError
    ├── ValueAccessError         (value.py)
    │   ├── EmptyValueError
    │   └── NullPayloadError
    └── EvaluationError          (value.py)
        └── ReentrantForceError
"""

from infinilist.kernel.errors.base import BaseError
from infinilist.kernel.errors.sequence import ExhaustedError, SequenceError
from infinilist.kernel.errors.value import (
    EmptyValueError,
    EvaluationError,
    NullPayloadError,
    ReentrantForceError,
    ValueAccessError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "EvaluationError",
    "ExhaustedError",
    "NullPayloadError",
    "ReentrantForceError",
    "SequenceError",
    "ValueAccessError",
]
