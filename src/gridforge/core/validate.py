"""Input validation with strong typing."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, ConfigDict

from gridforge.dialect import Dialect
from .errors import ValidationError


# Validation limits
MAX_SOURCE_SIZE = 1024 * 1024  # 1MB
MAX_VALUE_DEPTH = 32

# Non-dialect export targets
INTERCHANGE_TARGETS = ("json", "project", "xml")


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


class ExportRequest(RequestValidator):
    """Validated export request."""

    target: str = Field(min_length=1)
    include_comments: bool | None = None

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Accept a dialect name or an interchange target."""
        target = v.strip().lower()
        if target not in INTERCHANGE_TARGETS and target not in {d.value for d in Dialect}:
            raise ValueError(f"Unknown export target: {v}")
        return target


class ImportRequest(RequestValidator):
    """Validated import request."""

    source: str = Field(min_length=1)
    dialect: str | None = None
    filename: str | None = None

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Ensure source is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Source cannot be empty")
        return stripped

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, v: str | None) -> str | None:
        """Dialect hint must name a known dialect."""
        if v is None:
            return v
        return Dialect(v.strip().lower()).value


def validate_source_size(data: str, max_size: int = MAX_SOURCE_SIZE, name: str = "Source") -> None:
    """
    Validate import size.

    Args:
        data: Text to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        ValidationError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_value_depth(obj: Any, max_depth: int = MAX_VALUE_DEPTH, current_depth: int = 0) -> None:
    """
    Validate nesting depth of a decoded value.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"Nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_value_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_value_depth(item, max_depth, current_depth + 1)
