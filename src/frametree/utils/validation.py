"""
Validation utilities for quaternions, rigid motions and unit factors.

The algebra does not check its preconditions on every call. These functions
are the opt-in checks: shape problems raise ValueError, tolerance problems
issue a RuntimeWarning.
"""
from __future__ import annotations
import warnings
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from frametree.algebra.dual import DualQuaternion
    from frametree.algebra.quaternion import Quaternion


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ValueError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_quaternion_array(q: NDArray[np.float64], tol: float = 1e-6) -> None:
    """
    Validate that array is a unit quaternion.

    Parameters
    ----------
    q : NDArray[np.float64]
        Quaternion, either component order
    tol : float
        Tolerance for unit norm check

    Raises
    ------
    ValueError
        If quaternion shape is invalid
    """
    if q.shape != (4,):
        raise ValueError(f"Quaternion must have shape (4,), got {q.shape}")

    norm = np.linalg.norm(q)
    if abs(norm - 1.0) > tol:
        warnings.warn(
            f"Quaternion not normalized: |q| = {norm:.6f}. "
            "Consider normalizing before use.",
            RuntimeWarning,
            stacklevel=2
        )


def validate_vector_array(v: NDArray[np.float64], name: str) -> NDArray[np.float64]:
    """
    Validate that `v` is a 3-vector and return it.

    Raises
    ------
    ValueError
        If `v` does not have shape (3,)
    """
    if v.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {v.shape}")
    return v


def validate_unit_quaternion(q: Quaternion, tol: float = 1e-6) -> None:
    """Warn if `q` is not a unit (rotation) quaternion."""
    if not q.is_unit(tol):
        warnings.warn(
            f"Rotation quaternion not normalized: |q| = {q.norm:.6f}",
            RuntimeWarning,
            stacklevel=2
        )


def validate_pure_quaternion(q: Quaternion, tol: float = 1e-6) -> None:
    """Warn if `q` has a scalar part, so is not a point or vector."""
    if not q.is_pure(tol):
        warnings.warn(
            f"Point quaternion is not pure: q0 = {q.q0:.6f}",
            RuntimeWarning,
            stacklevel=2
        )


def validate_rigid_motion(dq: DualQuaternion, tol: float = 1e-6) -> None:
    """
    Validate that a dual quaternion encodes a rigid motion.

    Checks that the real part is unit and that the unit condition
    (``real* dual + dual* real == 0``) holds.

    Parameters
    ----------
    dq : DualQuaternion
        Offset to check
    tol : float
        Tolerance for both checks
    """
    if not dq.real.is_unit(tol):
        warnings.warn(
            f"Offset rotation not normalized: |real| = {dq.norm:.6f}",
            RuntimeWarning,
            stacklevel=2
        )
    if not dq.unit_condition.is_zero(tol):
        warnings.warn(
            "Offset violates the unit condition; it is not a rigid motion.",
            RuntimeWarning,
            stacklevel=2
        )
