"""Kernel – function contracts, errors, Maybe and Lazy."""

from infinilist.kernel.errors import (
    BaseError,
    EmptyValueError,
    EvaluationError,
    ExhaustedError,
    NullPayloadError,
    ReentrantForceError,
    SequenceError,
    ValueAccessError,
)
from infinilist.kernel.functions import BooleanCondition, Combiner, Producer, Transformer

__all__ = [
    "BaseError",
    "BooleanCondition",
    "Combiner",
    "EmptyValueError",
    "EvaluationError",
    "ExhaustedError",
    "NullPayloadError",
    "Producer",
    "ReentrantForceError",
    "SequenceError",
    "Transformer",
    "ValueAccessError",
]
