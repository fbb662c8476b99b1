"""Exception types for frame tree misuse."""


class FrameTreeError(Exception):
    """Base exception for all frametree errors."""

    pass


class FrameError(FrameTreeError):
    """Invalid operation on a Frame (mutating the root, cyclic re-parenting)."""

    pass


__all__ = [
    "FrameTreeError",
    "FrameError",
]
