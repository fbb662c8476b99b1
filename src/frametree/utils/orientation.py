"""
numpy / scipy interop for frame-tagged values.

frametree stores quaternions scalar-first (q0, q1, q2, q3). scipy's
`Rotation` is scalar-last: [x, y, z, w]. The helpers here convert between
the two and build Orientations from the angle conventions scipy supports.

Examples
--------
>>> from frametree import Frame
>>> from frametree.utils.orientation import (
...     orientation_from_euler,
...     orientation_as_matrix,
... )

# 90° heading change, expressed in the root frame
>>> o = orientation_from_euler(Frame.root, yaw=90)
>>> m = orientation_as_matrix(o)
"""
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.spatial.transform import Rotation as R

from frametree.algebra.quaternion import Quaternion
from frametree.core.frame import Axis, Frame
from frametree.geometry.direction import Direction
from frametree.geometry.orientation import Orientation
from frametree.geometry.position import Position
from frametree.units import LengthUnit, meter
from frametree.utils.validation import validate_quaternion_array, validate_vector_array


# =============================================================================
# Quaternion layout
# =============================================================================

def quaternion_to_scipy(q: Quaternion) -> NDArray[np.float64]:
    """
    Scalar-last array [x, y, z, w] for scipy.

    Parameters
    ----------
    q : Quaternion
        Scalar-first quaternion

    Returns
    -------
    NDArray[np.float64]
        Shape (4,)
    """
    return np.array([q.q1, q.q2, q.q3, q.q0], dtype=np.float64)


def quaternion_from_scipy(q: ArrayLike) -> Quaternion:
    """
    Quaternion from a scalar-last [x, y, z, w] array.

    Raises
    ------
    ValueError
        If `q` does not have shape (4,)
    """
    arr = np.asarray(q, dtype=np.float64)
    validate_quaternion_array(arr)
    return Quaternion(float(arr[3]), float(arr[0]), float(arr[1]), float(arr[2]))


def as_rotation(orientation: Orientation) -> R:
    """The scipy Rotation for `orientation` (in its own frame)."""
    return R.from_quat(quaternion_to_scipy(orientation.quat))


# =============================================================================
# Orientation construction
# =============================================================================

def orientation_from_euler(
    frame: Frame,
    roll: float = 0.0,
    pitch: float = 0.0,
    yaw: float = 0.0,
    degrees: bool = True,
    order: str = "xyz",
) -> Orientation:
    """
    Orientation from Euler angles, via scipy.

    Parameters
    ----------
    frame : Frame
        Frame of the result
    roll : float
        Rotation about X [degrees or radians]
    pitch : float
        Rotation about Y [degrees or radians]
    yaw : float
        Rotation about Z [degrees or radians]
    degrees : bool
        If True (default), angles are in degrees. If False, radians.
    order : str
        scipy Euler sequence. Default "xyz" (extrinsic), which matches
        ``RotationConvention.EULER_ZYX`` with (x, y, z) = (roll, pitch, yaw).

    Returns
    -------
    Orientation

    Examples
    --------
    >>> o = orientation_from_euler(Frame.root, roll=10, pitch=-5, yaw=45)
    """
    angles = np.array([roll, pitch, yaw], dtype=np.float64)
    if degrees:
        angles = np.deg2rad(angles)

    rot = R.from_euler(order, angles, degrees=False)
    return Orientation(frame, quaternion_from_scipy(rot.as_quat()))


def orientation_from_axis_angle(
    frame: Frame,
    axis: str | Axis | tuple[float, float, float] | list[float] | NDArray,
    angle: float,
    degrees: bool = True,
) -> Orientation:
    """
    Orientation of `angle` about `axis`.

    Parameters
    ----------
    frame : Frame
        Frame of the result
    axis : str | Axis | array-like
        'x', 'y', 'z', an Axis, or a vector [x, y, z] (normalized here)
    angle : float
        Rotation angle [degrees or radians]
    degrees : bool
        If True (default), `angle` is in degrees

    Raises
    ------
    ValueError
        If `axis` is an unknown name or a zero vector
    """
    if isinstance(axis, (str, Axis)):
        direction = Direction(frame, Axis.parse(axis))
    else:
        vec = validate_vector_array(np.asarray(axis, dtype=np.float64), "axis")
        direction = Direction.from_xyz(frame, *vec)
        if direction is None:
            raise ValueError("Rotation axis must be non-zero")

    if degrees:
        angle = float(np.deg2rad(angle))
    return Orientation.from_angle_direction(frame, angle, direction)


# =============================================================================
# Inspection
# =============================================================================

def orientation_as_matrix(orientation: Orientation) -> NDArray[np.float64]:
    """3x3 rotation matrix of `orientation`."""
    return as_rotation(orientation).as_matrix()


def quaternion_to_euler(
    orientation: Orientation,
    order: str = "xyz",
    degrees: bool = True,
) -> tuple[float, float, float]:
    """
    Euler angles of `orientation` for inspection.

    Returns
    -------
    tuple[float, float, float]
        (roll, pitch, yaw) for the default order
    """
    angles = as_rotation(orientation).as_euler(order, degrees=degrees)
    return tuple(float(a) for a in angles)


def describe_orientation(orientation: Orientation) -> str:
    """
    Human-readable description of an orientation.

    Examples
    --------
    >>> text = describe_orientation(orientation_from_euler(Frame.root, yaw=90))
    >>> text.endswith('Yaw: 90.0° in root')
    True
    """
    roll, pitch, yaw = quaternion_to_euler(orientation, degrees=True)
    return f"Roll: {roll:.1f}°, Pitch: {pitch:.1f}°, Yaw: {yaw:.1f}° in {orientation.frame}"


# =============================================================================
# Positions and directions as arrays
# =============================================================================

def position_as_array(position: Position, unit: LengthUnit | None = None) -> NDArray[np.float64]:
    """
    Coordinates [x, y, z] of `position`.

    Parameters
    ----------
    position : Position
        Point to convert
    unit : LengthUnit | None
        Unit of the returned values. Defaults to ``position.unit``.
    """
    if unit is not None:
        position = position.scale_for(unit)
    return np.array(position.vector, dtype=np.float64)


def position_from_array(frame: Frame, xyz: ArrayLike, unit: LengthUnit = meter) -> Position:
    """
    Position in `frame` from coordinates [x, y, z] in `unit`.

    Raises
    ------
    ValueError
        If `xyz` does not have shape (3,)
    """
    arr = validate_vector_array(np.asarray(xyz, dtype=np.float64), "position")
    return Position(frame, unit, float(arr[0]), float(arr[1]), float(arr[2]))


def direction_as_array(direction: Direction) -> NDArray[np.float64]:
    """Unit vector [x, y, z] of `direction`."""
    return np.array(direction.vector, dtype=np.float64)


__all__ = [
    "quaternion_to_scipy",
    "quaternion_from_scipy",
    "as_rotation",
    "orientation_from_euler",
    "orientation_from_axis_angle",
    "orientation_as_matrix",
    "quaternion_to_euler",
    "describe_orientation",
    "position_as_array",
    "position_from_array",
    "direction_as_array",
]
