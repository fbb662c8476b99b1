"""
Dual quaternions for rigid motions (rotation + translation).

A rigid motion with rotation R (unit quaternion) and translation T (pure
quaternion) is encoded as::

    real = R
    dual = ½ T ⊗ R

Multiplication composes motions: ``P * Q`` applies Q first, then P. This
ordering is what `Frame.transform_to` relies on when it chains offsets up
and down the frame tree.

References
----------
.. [1] Kenwright, B. (2012). A Beginners Guide to Dual-Quaternions.
       WSCG 2012 Communication Proceedings.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .quaternion import EPSILON, IDENTITY, ZERO, Quaternion


class ConjugateType(Enum):
    """
    The three dual-quaternion conjugates.

    QUATERNION          : Qr* + ε Qd*
    DUAL                : Qr  - ε Qd
    DUAL_AND_QUATERNION : Qr* - ε Qd*
    """

    QUATERNION = "quaternion"
    DUAL = "dual"
    DUAL_AND_QUATERNION = "dual_and_quaternion"


@dataclass(frozen=True, slots=True)
class DualQuaternion:
    """
    Immutable rigid motion as a (real, dual) quaternion pair.

    Parameters
    ----------
    real : Quaternion
        Rotation part. Must be normalized for `inverse` and the transform
        formulas to be valid; this is not checked.
    dual : Quaternion
        Dual part, ½ T ⊗ R for translation T.

    Notes
    -----
    Use the ``from_*`` constructors; the raw constructor is for callers that
    already hold a valid (real, dual) pair.
    """

    real: Quaternion = IDENTITY
    dual: Quaternion = ZERO

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rotation_translation(
        cls, rotation: Quaternion, translation: Quaternion
    ) -> DualQuaternion:
        """Rotate by `rotation` then translate by the pure quaternion `translation`."""
        return cls(rotation, 0.5 * (translation * rotation))

    @classmethod
    def from_rotation(cls, rotation: Quaternion) -> DualQuaternion:
        """Pure rotation, zero translation."""
        return cls(rotation, ZERO)

    @classmethod
    def from_translation(cls, translation: Quaternion) -> DualQuaternion:
        """Pure translation, identity rotation."""
        return cls(IDENTITY, 0.5 * translation)

    @classmethod
    def identity(cls) -> DualQuaternion:
        """The motion that does nothing."""
        return IDENTITY_DQ

    # ------------------------------------------------------------------
    # Norm and conjugates
    # ------------------------------------------------------------------

    @property
    def norm(self) -> float:
        """Norm of the real part."""
        return self.real.norm

    def normalize(self) -> DualQuaternion | None:
        """Scale both parts by 1/norm; None when the norm is (near) zero."""
        n = self.norm
        if n <= EPSILON:
            return None
        return DualQuaternion(self.real * (1.0 / n), self.dual * (1.0 / n))

    def conjugate(self, kind: ConjugateType) -> DualQuaternion:
        """
        Return the requested conjugate.

        Parameters
        ----------
        kind : ConjugateType
            Which of the three conjugates to compute

        Returns
        -------
        DualQuaternion
        """
        if kind is ConjugateType.QUATERNION:
            return DualQuaternion(self.real.conjugate, self.dual.conjugate)
        if kind is ConjugateType.DUAL:
            return DualQuaternion(self.real, -self.dual)
        if kind is ConjugateType.DUAL_AND_QUATERNION:
            return DualQuaternion(self.real.conjugate, -self.dual.conjugate)
        raise ValueError(f"Unknown conjugate type: {kind!r}")

    @property
    def inverse(self) -> DualQuaternion:
        """
        Inverse motion, such that ``self * self.inverse == identity``.

        Assumes `real` is normalized.
        """
        return self.conjugate(ConjugateType.QUATERNION)

    @property
    def unit_condition(self) -> Quaternion:
        """Qr* Qd + Qd* Qr; zero for a dual quaternion encoding a rigid motion."""
        return self.real.conjugate * self.dual + self.dual.conjugate * self.real

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def __mul__(self, other: DualQuaternion) -> DualQuaternion:
        if not isinstance(other, DualQuaternion):
            return NotImplemented
        return DualQuaternion(
            self.real * other.real,
            self.real * other.dual + self.dual * other.real,
        )

    def __add__(self, other: DualQuaternion) -> DualQuaternion:
        if not isinstance(other, DualQuaternion):
            return NotImplemented
        return DualQuaternion(self.real + other.real, self.dual + other.dual)

    def composer(self, other: DualQuaternion) -> DualQuaternion:
        """Perform `self`, then `other` (``other * self``)."""
        return other * self

    def scale_translation(self, factor: float) -> DualQuaternion:
        """The same rotation with the translation multiplied by `factor`."""
        return DualQuaternion(self.real, self.dual * factor)

    def isclose(self, other: DualQuaternion, epsilon: float = EPSILON) -> bool:
        """Componentwise comparison of both parts within `epsilon`."""
        return self.real.isclose(other.real, epsilon) and self.dual.isclose(
            other.dual, epsilon
        )

    # ------------------------------------------------------------------
    # Applying the motion
    # ------------------------------------------------------------------

    def transform_translation(self, translation: Quaternion) -> Quaternion:
        """
        Push the point `translation` (pure) through this motion.

        Computes ``(self ⊗ (1 + ε p) ⊗ self^‡).dual`` where ‡ is the
        dual-and-quaternion conjugate.
        """
        point = DualQuaternion(IDENTITY, translation)
        return (self * point * self.conjugate(ConjugateType.DUAL_AND_QUATERNION)).dual

    def transform_rotation(self, rotation: Quaternion) -> Quaternion:
        """Push the rotation `rotation` through this motion (real part of the sandwich)."""
        turn = DualQuaternion(rotation, ZERO)
        return (self * turn * self.conjugate(ConjugateType.DUAL_AND_QUATERNION)).real

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    @property
    def as_rotation(self) -> Quaternion:
        """The rotation quaternion."""
        return self.real

    @property
    def as_translation(self) -> Quaternion:
        """The translation as a pure quaternion, 2 Qd Qr*."""
        return 2.0 * (self.dual * self.real.conjugate)

    @property
    def as_rotation_and_translation(self) -> tuple[Quaternion, Quaternion]:
        """(rotation, translation)."""
        return self.as_rotation, self.as_translation


IDENTITY_DQ = DualQuaternion(IDENTITY, ZERO)
"""Identity motion: no rotation, no translation."""


__all__ = [
    "ConjugateType",
    "DualQuaternion",
    "IDENTITY_DQ",
]
