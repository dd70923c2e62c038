"""Request handlers."""

from .design import DesignHandler

__all__ = ["DesignHandler"]
