"""
frametree - 3D poses in a tree of coordinate frames.

Positions, orientations and directions are expressed relative to a frame;
frames are expressed relative to their parent, up to a single root. Any
value can be converted into any other frame by walking the tree and
composing rigid-body transforms (dual quaternions).

Core Components
---------------
Frame : Node in the frame tree; `Frame.root` is the base
Position : Point in a frame, with a length unit
Orientation : Rotation in a frame
Direction : Unit vector in a frame
Quaternion, DualQuaternion : The underlying algebra

Examples
--------
>>> from frametree import Frame, Position, Orientation, Axis, degree, meter
>>> from frametree.units import Quantity
>>> arm = Frame.from_pose(
...     Position(Frame.root, meter, 1.0, 0.0, 0.0),
...     Orientation.from_angle_axis(Frame.root, Quantity(90.0, degree), Axis.Z),
... )
>>> tip = Position(arm, meter, 1.0, 0.0, 0.0)
>>> tuple(round(c, 9) + 0.0 for c in tip.transform_to(Frame.root).vector)
(1.0, 1.0, 0.0)
"""
import logging

__version__ = "0.1.0"

# Units
from frametree.units import (
    AngleUnit,
    LengthUnit,
    Quantity,
    centimeter,
    degree,
    kilometer,
    meter,
    millimeter,
    radian,
)

# Algebra
from frametree.algebra import (
    IDENTITY,
    IDENTITY_DQ,
    ZERO,
    ConjugateType,
    DualQuaternion,
    Quaternion,
)

# Frames
from frametree.core import ROOT, Axis, Frame, Framed

# Values
from frametree.geometry import Direction, Orientation, Position, RotationConvention

# Errors
from frametree.errors import FrameError, FrameTreeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Units
    "LengthUnit",
    "AngleUnit",
    "Quantity",
    "meter",
    "millimeter",
    "centimeter",
    "kilometer",
    "radian",
    "degree",
    # Algebra
    "Quaternion",
    "DualQuaternion",
    "ConjugateType",
    "IDENTITY",
    "IDENTITY_DQ",
    "ZERO",
    # Frames
    "Frame",
    "Framed",
    "Axis",
    "ROOT",
    # Values
    "Position",
    "Orientation",
    "RotationConvention",
    "Direction",
    # Errors
    "FrameTreeError",
    "FrameError",
]
