import math

import pytest

from frametree.algebra.dual import IDENTITY_DQ, ConjugateType, DualQuaternion
from frametree.algebra.quaternion import IDENTITY, ZERO, Quaternion

ACCURACY = 1e-10


def check_values(q, q0, q1, q2, q3):
    assert q.q0 == pytest.approx(q0, abs=ACCURACY)
    assert q.q1 == pytest.approx(q1, abs=ACCURACY)
    assert q.q2 == pytest.approx(q2, abs=ACCURACY)
    assert q.q3 == pytest.approx(q3, abs=ACCURACY)


@pytest.fixture
def rot_z90():
    return Quaternion.from_angle_direction(math.pi / 2, (0.0, 0.0, 1.0))


@pytest.fixture
def unit_x():
    return Quaternion(0.0, 1.0, 0.0, 0.0)


def test_identity():
    assert DualQuaternion.identity() == IDENTITY_DQ
    assert IDENTITY_DQ.real == IDENTITY
    assert IDENTITY_DQ.dual == ZERO
    assert DualQuaternion() == IDENTITY_DQ


def test_translation_round_trip(unit_x):
    d = DualQuaternion.from_translation(unit_x)
    assert d.as_translation == unit_x
    check_values(d.dual, 0.0, 0.5, 0.0, 0.0)


def test_unit_condition(rot_z90, unit_x):
    d = DualQuaternion.from_rotation_translation(rot_z90, unit_x)
    check_values(d.unit_condition, 0.0, 0.0, 0.0, 0.0)


def test_conjugates():
    qr = Quaternion(0.0, 1.0, 2.0, 3.0)
    qd = Quaternion(3.0, 2.0, 1.0, 0.0)
    d = DualQuaternion(qr, qd)

    dc = d.conjugate(ConjugateType.QUATERNION)
    assert dc.real == qr.conjugate
    assert dc.dual == qd.conjugate

    dc = d.conjugate(ConjugateType.DUAL)
    assert dc.real == qr
    assert dc.dual == -qd

    dc = d.conjugate(ConjugateType.DUAL_AND_QUATERNION)
    assert dc.real == qr.conjugate
    assert dc.dual == -qd.conjugate


def test_add(unit_x):
    d0 = DualQuaternion(ZERO, ZERO) + DualQuaternion(IDENTITY, unit_x)
    assert d0.real == IDENTITY
    assert d0.dual == unit_x

    d1 = d0 + d0
    assert d1.real == 2.0 * IDENTITY
    assert d1.dual == 2.0 * unit_x


def test_compose_translations(unit_x):
    dt = DualQuaternion.from_translation(unit_x)
    rotation, translation = (dt * dt).as_rotation_and_translation
    check_values(translation, 0.0, 2.0, 0.0, 0.0)
    check_values(rotation, 1.0, 0.0, 0.0, 0.0)


def test_compose_rotations(rot_z90):
    dr = DualQuaternion.from_rotation(rot_z90)
    rotation, translation = (dr * dr).as_rotation_and_translation
    check_values(translation, 0.0, 0.0, 0.0, 0.0)

    angle, direction = rotation.as_angle_direction()
    assert angle == pytest.approx(math.pi, abs=ACCURACY)
    assert direction == pytest.approx((0.0, 0.0, 1.0), abs=ACCURACY)


def test_translate_then_rotate(rot_z90, unit_x):
    """dr * dt applies the translation first."""
    dr = DualQuaternion.from_rotation(rot_z90)
    dt = DualQuaternion.from_translation(unit_x)
    d2 = dr * dt

    rotation, translation = d2.as_rotation_and_translation
    check_values(translation, 0.0, 0.0, 1.0, 0.0)
    assert rotation.isclose(rot_z90)

    p = Quaternion(0.0, 0.0, 2.0, 0.0)
    check_values(d2.transform_translation(p), 0.0, -2.0, 1.0, 0.0)


def test_composer_reverses_order(rot_z90, unit_x):
    dr = DualQuaternion.from_rotation(rot_z90)
    dt = DualQuaternion.from_translation(unit_x)
    assert dt.composer(dr) == dr * dt


def test_translation_then_rotation_matches_constructor():
    r = Quaternion.from_angle_direction(2 * math.pi / 3, (1.0, 1.0, 1.0))
    t = Quaternion(0.0, 0.0, 0.0, 3.0)
    composed = DualQuaternion.from_translation(t) * DualQuaternion.from_rotation(r)
    assert composed.isclose(DualQuaternion.from_rotation_translation(r, t))


def test_transform_translation_rotation_only():
    d = DualQuaternion.from_rotation(
        Quaternion.from_angle_direction(2 * math.pi / 3, (1.0, 1.0, 1.0))
    )
    check_values(d.real, 0.5, 0.5, 0.5, 0.5)
    check_values(d.transform_translation(Quaternion(0.0, 2.0, 0.0, 0.0)), 0.0, 0.0, 2.0, 0.0)


def test_transform_translation_translation_only():
    d = DualQuaternion.from_translation(Quaternion(0.0, 0.0, 0.0, 3.0))
    check_values(d.as_translation, 0.0, 0.0, 0.0, 3.0)
    check_values(d.dual, 0.0, 0.0, 0.0, 1.5)
    check_values(d.real, 1.0, 0.0, 0.0, 0.0)
    check_values(d.transform_translation(Quaternion(0.0, 2.0, 0.0, 0.0)), 0.0, 2.0, 0.0, 3.0)


def test_transform_rotation(rot_z90, unit_x):
    d = DualQuaternion.from_rotation_translation(rot_z90, unit_x)
    # conjugating a rotation about z by another rotation about z leaves it unchanged
    assert d.transform_rotation(rot_z90).isclose(rot_z90)


def test_inverse_law(rot_z90):
    t = Quaternion(0.0, 1.0, -2.0, 0.5)
    d = DualQuaternion.from_rotation_translation(rot_z90, t)
    assert (d * d.inverse).isclose(IDENTITY_DQ)
    assert (d.inverse * d).isclose(IDENTITY_DQ)


def test_associativity(rot_z90, unit_x):
    a = DualQuaternion.from_rotation_translation(rot_z90, unit_x)
    b = DualQuaternion.from_rotation_translation(
        Quaternion.from_angle_direction(0.7, (1.0, 0.0, 1.0)), Quaternion(0.0, 0.0, 3.0, -1.0)
    )
    c = DualQuaternion.from_translation(Quaternion(0.0, -4.0, 0.0, 2.0))
    assert ((a * b) * c).isclose(a * (b * c), 1e-9)


def test_normalize():
    d = DualQuaternion(2.0 * IDENTITY, Quaternion(0.0, 2.0, 0.0, 0.0))
    n = d.normalize()
    assert n.norm == pytest.approx(1.0)
    check_values(n.dual, 0.0, 1.0, 0.0, 0.0)
    assert DualQuaternion(ZERO, ZERO).normalize() is None
