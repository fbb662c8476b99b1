"""Utility functions for frametree: validation helpers and numpy/scipy interop."""

from .validation import (
    validate_positive,
    validate_pure_quaternion,
    validate_quaternion_array,
    validate_rigid_motion,
    validate_unit_quaternion,
    validate_vector_array,
)

__all__ = [
    "validate_positive",
    "validate_pure_quaternion",
    "validate_quaternion_array",
    "validate_rigid_motion",
    "validate_unit_quaternion",
    "validate_vector_array",
]
