from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from meshgradient.models.animation_params.animation_param_id import AnimationParamID


class AnimationParam(ABC):
    """
    Base class for all user-editable parameters.

    Param = something the user can edit (slider / stepper / API).
    Definitions are stateless: the current value lives in the editor session,
    the definition only knows how to validate and step it.
    """

    key: AnimationParamID
    label: str
    default: Any

    @abstractmethod
    def adjust(self, current: Any, delta: int) -> Any:
        """Step current value by delta steps, return clamped result"""
        ...

    @abstractmethod
    def clamp(self, value: Any) -> Any:
        """Clamp value to valid range"""
        ...
