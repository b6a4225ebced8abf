from .error_handler import (
    DomainError,
    PresetNotFoundError,
    InvalidAnimationKindError,
    InvalidExportFormatError,
    register_exception_handlers,
)

__all__ = [
    "DomainError",
    "PresetNotFoundError",
    "InvalidAnimationKindError",
    "InvalidExportFormatError",
    "register_exception_handlers",
]
