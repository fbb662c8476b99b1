"""
Shared fixtures for the frametree test suite.

Frames hang off the process-wide root, so every fixture builds fresh
frames; tests never mutate a frame they did not create.
"""
import os
import sys

import pytest

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

from frametree import Axis, Frame, Orientation, Position, Quantity, meter, radian  # noqa: E402


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def root():
    """The base frame."""
    return Frame.root


@pytest.fixture
def rot_z():
    """Factory: Frame rotated `angle` radians about z, below `parent`."""
    def make(parent, angle):
        return Frame.from_orientation(
            Orientation.from_angle_axis(parent, Quantity(angle, radian), Axis.Z)
        )
    return make


@pytest.fixture
def shifted():
    """Factory: Frame translated by (x, y, z) meters, below `parent`."""
    def make(parent, x=0.0, y=0.0, z=0.0):
        return Frame.from_position(Position(parent, meter, x, y, z))
    return make


@pytest.fixture
def x_chain(shifted):
    """
    Four frames stacked along x.

    f1 at 1 in root, f2 at 2 in f1, f3 at 3 in f2, f4 at 4 in f3.
    """
    f1 = shifted(Frame.root, x=1.0)
    f2 = shifted(f1, x=2.0)
    f3 = shifted(f2, x=3.0)
    f4 = shifted(f3, x=4.0)
    return f1, f2, f3, f4

