"""
core/exceptions.py
==================
Exception hierarchy for the rope statics solver.

    RopeSystemError
    ├── SceneValidationError  (also a ValueError)
    ├── EquilibriumError      (also a RuntimeError)
    └── ScenePayloadError     (also a ValueError)
"""

from core.models import SceneValidation


class RopeSystemError(Exception):
    """Base class for every error raised by this project."""


class SceneValidationError(RopeSystemError, ValueError):
    """
    Raised when a scene is structurally invalid.

    All validator errors are joined into a single message. The full
    SceneValidation (errors and warnings) is kept on the exception.
    """

    def __init__(self, message: str, validation: SceneValidation | None = None):
        super().__init__(message)
        self.validation = validation

    @classmethod
    def from_validation(cls, validation: SceneValidation) -> "SceneValidationError":
        """Build the aggregated error for a failed validation."""
        return cls(
            f"Scene is inconsistent: {'; '.join(validation.errors)}",
            validation=validation,
        )


class EquilibriumError(RopeSystemError, RuntimeError):
    """Raised when a validated scene still cannot be balanced."""


class ScenePayloadError(RopeSystemError, ValueError):
    """Raised when a scene payload cannot be converted into a RopeScene."""
