"""
Constraint package initialization.
"""

from .base import Constraint, TypeConstraint, ValidationContext, ErrorSink
from .strings import StringConstraint
from .numbers import NumberConstraint
from .arrays import ArrayConstraint
from .objects import ObjectConstraint
from .logical import (
    AllOfConstraint,
    AnyOfConstraint,
    OneOfConstraint
)
from .types import ExplicitTypeConstraint, FalseSchemaConstraint

__all__ = [
    "Constraint",
    "TypeConstraint",
    "ValidationContext",
    "ErrorSink",
    "StringConstraint",
    "NumberConstraint",
    "ArrayConstraint",
    "ObjectConstraint",
    "AllOfConstraint",
    "AnyOfConstraint",
    "OneOfConstraint",
    "ExplicitTypeConstraint",
    "FalseSchemaConstraint"
]
