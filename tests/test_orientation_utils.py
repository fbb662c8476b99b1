"""
Tests for the numpy / scipy interop helpers.

scipy's Rotation is used as an independent reference for the quaternion
algebra: matrices and Euler angles must agree with it.
"""
import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as R

from frametree import ROOT, Axis, Direction, Orientation, Position, Quaternion, meter, millimeter
from frametree.utils.orientation import (
    as_rotation,
    describe_orientation,
    direction_as_array,
    orientation_as_matrix,
    orientation_from_axis_angle,
    orientation_from_euler,
    position_as_array,
    position_from_array,
    quaternion_from_scipy,
    quaternion_to_euler,
    quaternion_to_scipy,
)


class TestQuaternionLayout:
    def test_to_scipy_is_scalar_last(self):
        q = Quaternion(0.5, 0.5, 0.5, 0.5)
        assert np.allclose(quaternion_to_scipy(q), [0.5, 0.5, 0.5, 0.5])
        q = Quaternion(1.0, 0.0, 0.0, 0.0)
        assert np.allclose(quaternion_to_scipy(q), [0.0, 0.0, 0.0, 1.0])

    def test_from_scipy(self):
        q = quaternion_from_scipy([0.0, 0.0, math.sqrt(0.5), math.sqrt(0.5)])
        assert q.isclose(Quaternion(math.sqrt(0.5), 0.0, 0.0, math.sqrt(0.5)))

    def test_from_scipy_bad_shape(self):
        with pytest.raises(ValueError, match="shape"):
            quaternion_from_scipy([1.0, 0.0, 0.0])

    def test_from_scipy_warns_not_normalized(self):
        with pytest.warns(RuntimeWarning, match="not normalized"):
            quaternion_from_scipy([0.0, 0.0, 0.0, 2.0])


class TestAgainstScipy:
    @pytest.mark.parametrize(
        "axis, vector",
        [(Axis.X, [1.0, 0.0, 0.0]), (Axis.Y, [0.0, 1.0, 0.0]), (Axis.Z, [0.0, 0.0, 1.0])],
    )
    def test_axis_angle_matrix(self, axis, vector):
        o = Orientation.from_angle_axis(ROOT, 0.8, axis)
        expected = R.from_rotvec(0.8 * np.array(vector)).as_matrix()
        assert np.allclose(orientation_as_matrix(o), expected)

    def test_yaw_pitch_roll_matches_extrinsic_xyz(self):
        o = Orientation.from_yaw_pitch_roll(ROOT, 0.3, -0.2, 1.2)
        expected = R.from_euler("xyz", [0.3, -0.2, 1.2])
        assert np.allclose(as_rotation(o).as_matrix(), expected.as_matrix())

    def test_point_rotation_matches_matrix(self):
        o = Orientation.from_yaw_pitch_roll(ROOT, -0.9, 0.4, 2.1)
        p = Position(ROOT, meter, 1.0, -2.0, 0.5)
        expected = orientation_as_matrix(o) @ np.array([1.0, -2.0, 0.5])
        assert np.allclose(p.rotate(o).vector, expected)

    def test_composition_matches_scipy(self):
        a = Orientation.from_yaw_pitch_roll(ROOT, 0.1, 0.2, 0.3)
        b = Orientation.from_yaw_pitch_roll(ROOT, -0.4, 0.5, -0.6)
        # a then b
        expected = as_rotation(b) * as_rotation(a)
        assert np.allclose(orientation_as_matrix(a.compose(b)), expected.as_matrix())


class TestOrientationConstruction:
    def test_from_euler_degrees(self):
        o = orientation_from_euler(ROOT, yaw=90)
        assert o.has_frame(ROOT)
        expected = Orientation.from_angle_axis(ROOT, math.pi / 2, Axis.Z)
        assert o.quat.isclose(expected.quat, 1e-9) or o.quat.isclose(-expected.quat, 1e-9)

    def test_from_euler_radians(self):
        o = orientation_from_euler(ROOT, roll=0.1, pitch=0.2, yaw=0.3, degrees=False)
        expected = Orientation.from_yaw_pitch_roll(ROOT, 0.1, 0.2, 0.3)
        assert np.allclose(orientation_as_matrix(o), orientation_as_matrix(expected))

    @pytest.mark.parametrize("axis", ["z", "Z", Axis.Z, [0.0, 0.0, 2.0], np.array([0.0, 0.0, 1.0])])
    def test_from_axis_angle(self, axis):
        o = orientation_from_axis_angle(ROOT, axis, 90.0)
        expected = R.from_euler("z", 90.0, degrees=True).as_matrix()
        assert np.allclose(orientation_as_matrix(o), expected)

    def test_from_axis_angle_radians(self):
        o = orientation_from_axis_angle(ROOT, "x", math.pi, degrees=False)
        assert np.allclose(orientation_as_matrix(o), np.diag([1.0, -1.0, -1.0]))

    def test_from_axis_angle_rejects(self):
        with pytest.raises(ValueError, match="non-zero"):
            orientation_from_axis_angle(ROOT, [0.0, 0.0, 0.0], 10.0)
        with pytest.raises(ValueError, match="Axis must be"):
            orientation_from_axis_angle(ROOT, "q", 10.0)
        with pytest.raises(ValueError, match="shape"):
            orientation_from_axis_angle(ROOT, [1.0, 0.0], 10.0)


class TestInspection:
    def test_quaternion_to_euler(self):
        o = orientation_from_euler(ROOT, roll=10, pitch=-5, yaw=45)
        roll, pitch, yaw = quaternion_to_euler(o)
        assert (roll, pitch, yaw) == pytest.approx((10.0, -5.0, 45.0))

    def test_describe(self):
        text = describe_orientation(orientation_from_euler(ROOT, yaw=90))
        assert text.startswith("Roll: ")
        assert "Yaw: 90.0°" in text
        assert text.endswith(" in root")


class TestArrays:
    def test_position_as_array(self):
        p = Position(ROOT, meter, 1.0, 2.0, 3.0)
        assert np.allclose(position_as_array(p), [1.0, 2.0, 3.0])
        assert np.allclose(position_as_array(p, millimeter), [1000.0, 2000.0, 3000.0])

    def test_position_from_array(self):
        p = position_from_array(ROOT, np.array([4.0, 5.0, 6.0]), millimeter)
        assert p == Position(ROOT, millimeter, 4.0, 5.0, 6.0)
        with pytest.raises(ValueError, match="position must have shape"):
            position_from_array(ROOT, [1.0, 2.0])

    def test_direction_as_array(self):
        d = Direction.from_xyz(ROOT, 0.0, 3.0, 4.0)
        assert np.allclose(direction_as_array(d), [0.0, 0.6, 0.8])
