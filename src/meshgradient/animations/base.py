"""
Base Motion Class

A motion maps a base position, a phase and an offset scale to an offset.
"""

from typing import Tuple

from meshgradient.models.enums import AnimationKind


class BaseMotion:
    """
    Base class for all point-field motions

    Motions are stateless: offset() is a pure function of its arguments,
    so one instance can serve every point on every frame.

    Subclasses MUST set KIND and implement offset(x, y, t, k) where
        t = elapsed time * speed (phase)
        k = intensity * 0.1 (offset scale)
    """
    KIND: AnimationKind

    def offset(self, x: float, y: float, t: float, k: float) -> Tuple[float, float]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.KIND.value})"
