"""Quaternion and dual-quaternion algebra."""

from .dual import IDENTITY_DQ, ConjugateType, DualQuaternion
from .quaternion import EPSILON, IDENTITY, ZERO, Quaternion

__all__ = [
    "EPSILON",
    "IDENTITY",
    "ZERO",
    "Quaternion",
    "ConjugateType",
    "DualQuaternion",
    "IDENTITY_DQ",
]
