"""The frame tree and the capability contracts of framed values."""

from .frame import ROOT, Axis, Frame
from .framed import (
    Composable,
    Framed,
    Invertible,
    Rotatable,
    Transformable,
    Translatable,
)

__all__ = [
    "Frame",
    "Axis",
    "ROOT",
    "Framed",
    "Invertible",
    "Rotatable",
    "Translatable",
    "Transformable",
    "Composable",
]
