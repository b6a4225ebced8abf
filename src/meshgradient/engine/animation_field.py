"""
Animation Field

Computes the animated position of every control point for one instant.

evaluate() is a pure function of its inputs: no internal state, no I/O,
only trigonometry over at most 25 points, so it is safe to call on every
render tick. Corner points never move. Every animated position is clamped
to [0, 1] on both axes.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Type

from meshgradient.animations import (
    BaseMotion,
    BounceMotion,
    PulseMotion,
    RotateMotion,
    SpiralMotion,
    WaveMotion,
)
from meshgradient.engine.topology import classify
from meshgradient.models.animation_params import IntensityParam, SpeedParam
from meshgradient.models.enums import AnimationKind, PointKind
from meshgradient.models.geometry import Position

INTENSITY_SCALE = 0.1


def _build_motion_registry() -> Dict[AnimationKind, BaseMotion]:
    """Build motion registry keyed by AnimationKind"""
    class_map: Dict[AnimationKind, Type[BaseMotion]] = {
        AnimationKind.WAVE: WaveMotion,
        AnimationKind.ROTATE: RotateMotion,
        AnimationKind.PULSE: PulseMotion,
        AnimationKind.BOUNCE: BounceMotion,
        AnimationKind.SPIRAL: SpiralMotion,
    }
    return {kind: motion_class() for kind, motion_class in class_map.items()}


MOTIONS: Dict[AnimationKind, BaseMotion] = _build_motion_registry()


@dataclass(frozen=True)
class AnimationParameters:
    """
    Animation settings owned by the editor session

    speed must be in [0.1, 3.0] and intensity in [0.1, 2.0]; use
    with_changes() to get clamped copies from user input.
    """
    kind: AnimationKind = AnimationKind.WAVE
    speed: float = 1.0
    intensity: float = 1.0
    enabled: bool = False

    def with_changes(
        self,
        *,
        kind: Optional[AnimationKind] = None,
        speed: Optional[float] = None,
        intensity: Optional[float] = None,
        enabled: Optional[bool] = None,
    ) -> 'AnimationParameters':
        """Copy with the given fields replaced, numeric values clamped to range"""
        return replace(
            self,
            kind=self.kind if kind is None else kind,
            speed=self.speed if speed is None else SpeedParam().clamp(speed),
            intensity=self.intensity if intensity is None else IntensityParam().clamp(intensity),
            enabled=self.enabled if enabled is None else bool(enabled),
        )


def evaluate(
    base_positions: Sequence[Position],
    params: AnimationParameters,
    now: float,
    kinds: Optional[Sequence[PointKind]] = None,
) -> List[Position]:
    """
    Animated positions for one instant

    Args:
        base_positions: Row-major base positions
        params: Animation settings
        now: Clock reading in seconds
        kinds: Per-point kinds; when omitted each position is classified

    Returns:
        New list, same length and order as base_positions

    Raises:
        ValueError: kinds and base_positions differ in length
    """
    if not params.enabled:
        return list(base_positions)

    if kinds is None:
        kinds = [classify(p) for p in base_positions]
    elif len(kinds) != len(base_positions):
        raise ValueError(f"Got {len(kinds)} kinds for {len(base_positions)} positions")

    motion = MOTIONS[params.kind]
    t = now * params.speed
    k = params.intensity * INTENSITY_SCALE

    result: List[Position] = []
    for position, kind in zip(base_positions, kinds):
        if kind == PointKind.CORNER:
            result.append(position)
            continue

        offset_x, offset_y = motion.offset(position.x, position.y, t, k)
        result.append(Position(position.x + offset_x, position.y + offset_y).clamped())

    return result
