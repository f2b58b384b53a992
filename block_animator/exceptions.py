"""Domain exceptions.

Each exception carries the HTTP status the API layer should answer with.
"""
from __future__ import annotations

from typing import Iterable, List, Optional


class AnimationValidationError(ValueError):
    """Raised by strict entry points when a configuration has validation errors."""

    status_code = 422

    def __init__(self, errors: Iterable[str], message: str = "") -> None:
        self.errors: List[str] = list(errors)
        super().__init__(message or self._format_message(self.errors))

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> "AnimationValidationError":
        return cls(errors)

    @staticmethod
    def _format_message(errors: List[str]) -> str:
        if not errors:
            return "Validation failed"
        if len(errors) == 1:
            return errors[0]
        return f"Validation failed with {len(errors)} errors: {'; '.join(errors)}"


class AnimationError(Exception):
    """Animation could not be produced from an otherwise readable configuration."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def invalid_config(cls, message: str = "") -> "AnimationError":
        return cls(message or "Invalid animation configuration provided", 400)

    @classmethod
    def strategy_not_found(cls, animation_type: str) -> "AnimationError":
        return cls(f"Animation strategy not found for type: {animation_type}", 404)

    @classmethod
    def animation_disabled(cls) -> "AnimationError":
        return cls("Animation is not enabled", 400)


class ServiceError(Exception):
    """Service-level failure (missing resource, failed operation)."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def resource_not_found(cls, resource: str, identifier: str = "") -> "ServiceError":
        if identifier:
            return cls(f'Resource "{resource}" not found with identifier: {identifier}', 404)
        return cls(f"Resource not found: {resource}", 404)

    @classmethod
    def operation_failed(cls, operation: str, reason: str = "") -> "ServiceError":
        if reason:
            return cls(f'Operation "{operation}" failed: {reason}', 500)
        return cls(f'Operation "{operation}" failed', 500)
